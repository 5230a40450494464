"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses (see handlers/errors.py)
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.base import EventWriteView, ServiceView
from events.handlers.serializers import (
    EventInputSerializer,
    EventSerializer,
    RsvpRequestSerializer,
    UnrsvpRequestSerializer,
)
from events.services.event_service import parse_event_id
from events.signals import EVENT_LIST_CACHE_KEY, event_cache_key


class HealthView(APIView):
    """Handler for GET /api/health"""

    def get(self, request: Request) -> Response:
        return Response({"status": "UP", "timestamp": timezone.now().isoformat()})


class EventListView(ServiceView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        data = cache.get(EVENT_LIST_CACHE_KEY)
        if data is None:
            events = self.event_service.list_events()
            data = EventSerializer(events, many=True).data
            cache.set(EVENT_LIST_CACHE_KEY, data, settings.RSVP_CACHE_TIMEOUT)
        return Response(data)


class EventCreateView(EventWriteView):
    """Handler for POST /api/events/create"""

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.event_service.create_event(serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(EventWriteView):
    """Handler for GET and PUT /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        key = event_cache_key(parse_event_id(event_id))
        data = cache.get(key)
        if data is None:
            event = self.event_service.get_event(event_id)
            data = EventSerializer(event).data
            cache.set(key, data, settings.RSVP_CACHE_TIMEOUT)
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.event_service.update_event(event_id, serializer.validated_data)
        return Response(EventSerializer(event).data)


class EventDeleteView(EventWriteView):
    """Handler for DELETE /api/events/{event_id}/delete"""

    def delete(self, request: Request, event_id: str) -> Response:
        self.event_service.delete_event(event_id)
        return Response({"message": "Event successfully deleted"})


class RsvpView(ServiceView):
    """Handler for POST /api/events/{event_id}/headCount/rsvp"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = RsvpRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.rsvp_manager.register(event_id, serializer.validated_data["email"])
        return Response(EventSerializer(event).data)


class UnrsvpView(ServiceView):
    """Handler for POST /api/events/{event_id}/headCount/unrsvp"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = UnrsvpRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.rsvp_manager.unregister(
            event_id, serializer.validated_data["email"]
        )
        return Response(EventSerializer(event).data)
