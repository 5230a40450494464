"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain import Email, Event, EventDetails, EventId
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidFieldError,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    """Parse a client-supplied event ID.

    Raises:
        InvalidEventIdError: If the event_id is not a valid UUID.
    """
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError):
        raise InvalidEventIdError() from None


def parse_email(email: str) -> Email:
    try:
        return Email(value=email)
    except ValueError as exc:
        raise InvalidFieldError("email", str(exc)) from None


def build_details(data: Mapping[str, Any]) -> EventDetails:
    """Build EventDetails from request data, ignoring unknown keys."""
    try:
        return EventDetails(
            name=data.get("name"),
            description=data.get("description"),
            date=data.get("date"),
            location=data.get("location"),
        )
    except ValueError as exc:
        raise InvalidFieldError("event", str(exc)) from None


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all complete events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, data: Mapping[str, Any]) -> Event:
        """Create an event with head count 0 and no participants.

        Any head count supplied by the caller is ignored.

        Raises:
            InvalidFieldError: If a required field is missing or blank.
        """
        event = self._store.create_event(build_details(data))
        logger.info("Created event %s (%s)", event.id, event.name)
        return event

    def update_event(self, event_id: str, data: Mapping[str, Any]) -> Event:
        """Replace name, description, date and location of an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            InvalidFieldError: If a required field is missing or blank.
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = parse_event_id(event_id)
        details = build_details(data)
        event = self._store.update_event(parsed_id, details)
        if event is None:
            raise EventNotFoundError(event_id)
        logger.info("Updated event %s", event.id)
        return event

    def delete_event(self, event_id: str) -> None:
        """Hard-delete an event and its registrations.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        if not self._store.delete_event(parse_event_id(event_id)):
            raise EventNotFoundError(event_id)
        logger.info("Deleted event %s", event_id)
