"""RSVP manager: keeps head count and participants consistent.

Each operation is a single store call; the store applies the membership
change and the head count adjustment atomically.
"""

import logging

from events.domain import Event
from events.domain.errors import EventNotFoundError
from events.services.event_service import parse_email, parse_event_id
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class RsvpManager:
    """Registers and unregisters participant emails."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def register(self, event_id: str, email: str) -> Event:
        """Add email to an event's participants.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            InvalidFieldError: If the email is blank.
            EventNotFoundError: If the event does not exist.
            AlreadyRegisteredError: If the email is already registered.
        """
        parsed_id = parse_event_id(event_id)
        event = self._store.add_participant(parsed_id, parse_email(email))
        if event is None:
            raise EventNotFoundError(event_id)
        logger.info(
            "Registered participant for event %s, head count %d",
            event.id,
            event.head_count,
        )
        return event

    def unregister(self, event_id: str, email: str) -> Event:
        """Remove email from an event's participants.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            InvalidFieldError: If the email is blank.
            EventNotFoundError: If the event does not exist.
            NotRegisteredError: If the email is not registered.
        """
        parsed_id = parse_event_id(event_id)
        event = self._store.remove_participant(parsed_id, parse_email(email))
        if event is None:
            raise EventNotFoundError(event_id)
        logger.info(
            "Removed participant from event %s, head count %d",
            event.id,
            event.head_count,
        )
        return event
