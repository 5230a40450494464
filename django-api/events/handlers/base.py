from django.apps import apps
from django.conf import settings
from rest_framework.views import APIView

from events.handlers.authentication import (
    AdminTokenAuthentication,
    IsAdmin,
    get_auth_gate,
)
from events.services import AuthGate, EventService, RsvpManager


class ServiceView(APIView):
    """APIView with access to the services built in EventsConfig.ready()."""

    @property
    def event_service(self) -> EventService:
        return apps.get_app_config("events").event_service

    @property
    def rsvp_manager(self) -> RsvpManager:
        return apps.get_app_config("events").rsvp_manager

    @property
    def auth_gate(self) -> AuthGate:
        return get_auth_gate()


class AdminView(ServiceView):
    """Base for every admin-only handler."""

    authentication_classes = [AdminTokenAuthentication]
    permission_classes = [IsAdmin]


class EventWriteView(ServiceView):
    """Base for public create/update/delete handlers.

    These stay open while RSVP_PUBLIC_EVENT_WRITES is true; otherwise they
    require an admin token like AdminView.
    """

    write_methods = frozenset({"POST", "PUT", "PATCH", "DELETE"})

    def _gated(self) -> bool:
        return (
            not settings.RSVP_PUBLIC_EVENT_WRITES
            and self.request.method in self.write_methods
        )

    def get_authenticators(self):
        if self._gated():
            return [AdminTokenAuthentication()]
        return super().get_authenticators()

    def get_permissions(self):
        if self._gated():
            return [IsAdmin()]
        return super().get_permissions()
