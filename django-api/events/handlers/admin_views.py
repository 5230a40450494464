"""Admin login/logout and the token-gated admin surface."""

from django.conf import settings
from rest_framework.request import Request
from rest_framework.response import Response

from events.handlers.base import AdminView, ServiceView
from events.handlers.serializers import (
    EventInputSerializer,
    EventSerializer,
    EventSummarySerializer,
    LoginSerializer,
)


class AdminLoginView(ServiceView):
    """Handler for POST /api/admin/login"""

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        gate = self.auth_gate
        session = gate.login(
            serializer.validated_data["username"],
            serializer.validated_data["password"],
        )
        identity = {
            "username": session.identity.username,
            "role": session.identity.role,
        }
        response = Response(
            {"message": "Login successful", "user": identity, "token": session.token}
        )
        response.set_cookie(
            settings.RSVP_TOKEN_COOKIE,
            session.token,
            max_age=int(gate.ttl.total_seconds()),
            httponly=True,
            samesite="Lax",
            secure=settings.RSVP_SECURE_COOKIES,
        )
        return response


class AdminLogoutView(ServiceView):
    """Handler for POST /api/admin/logout"""

    def post(self, request: Request) -> Response:
        self.auth_gate.logout()
        response = Response({"message": "Logout successful"})
        response.delete_cookie(settings.RSVP_TOKEN_COOKIE, samesite="Lax")
        return response


class AdminCheckAuthView(AdminView):
    """Handler for GET /api/admin/check-auth"""

    def get(self, request: Request) -> Response:
        user = {"username": request.user.username, "role": request.user.role}
        return Response({"isAuthenticated": True, "user": user})


class AdminEventListView(AdminView):
    """Handler for GET /api/admin/events"""

    def get(self, request: Request) -> Response:
        events = self.event_service.list_events()
        return Response(EventSerializer(events, many=True).data)


class AdminEventDetailView(AdminView):
    """Handler for PUT /api/admin/events/{event_id}"""

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.event_service.update_event(event_id, serializer.validated_data)
        return Response(EventSerializer(event).data)


class AdminRsvpListView(AdminView):
    """Handler for GET /api/admin/events/{event_id}/rsvps"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.event_service.get_event(event_id)
        return Response(
            {
                "event": EventSummarySerializer(event).data,
                "participants": list(event.participants),
            }
        )


class AdminRsvpRemoveView(AdminView):
    """Handler for DELETE /api/admin/events/{event_id}/rsvps/{email}"""

    def delete(self, request: Request, event_id: str, email: str) -> Response:
        event = self.rsvp_manager.unregister(event_id, email)
        return Response(EventSerializer(event).data)
