"""In-memory EventStore for service tests."""

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone

from events.domain import Email, Event, EventDetails, EventId
from events.domain.errors import AlreadyRegisteredError, NotRegisteredError
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    def __init__(self) -> None:
        self._events: dict[uuid.UUID, Event] = {}
        self._lock = threading.Lock()

    def list_events(self) -> list[Event]:
        events = [
            e
            for e in self._events.values()
            if e.name and e.description and e.location and e.date is not None
        ]
        return sorted(events, key=lambda e: e.created_at, reverse=True)

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id.value)

    def create_event(self, details: EventDetails) -> Event:
        now = datetime.now(tz=timezone.utc)
        event = Event(
            id=EventId(value=uuid.uuid4()),
            name=details.name,
            description=details.description,
            date=details.date,
            location=details.location,
            head_count=0,
            participants=(),
            created_at=now,
            updated_at=now,
        )
        self._events[event.id.value] = event
        return event

    def put(self, event: Event) -> None:
        """Insert an event as-is, bypassing validation."""
        self._events[event.id.value] = event

    def update_event(self, event_id: EventId, details: EventDetails) -> Event | None:
        with self._lock:
            event = self._events.get(event_id.value)
            if event is None:
                return None
            event = replace(
                event,
                name=details.name,
                description=details.description,
                date=details.date,
                location=details.location,
            )
            self._events[event_id.value] = event
            return event

    def delete_event(self, event_id: EventId) -> bool:
        return self._events.pop(event_id.value, None) is not None

    def add_participant(self, event_id: EventId, email: Email) -> Event | None:
        with self._lock:
            event = self._events.get(event_id.value)
            if event is None:
                return None
            if email.value in event.participants:
                raise AlreadyRegisteredError()
            event = replace(
                event,
                participants=event.participants + (email.value,),
                head_count=event.head_count + 1,
            )
            self._events[event_id.value] = event
            return event

    def remove_participant(self, event_id: EventId, email: Email) -> Event | None:
        with self._lock:
            event = self._events.get(event_id.value)
            if event is None:
                return None
            if email.value not in event.participants:
                raise NotRegisteredError()
            event = replace(
                event,
                participants=tuple(p for p in event.participants if p != email.value),
                head_count=event.head_count - 1,
            )
            self._events[event_id.value] = event
            return event
