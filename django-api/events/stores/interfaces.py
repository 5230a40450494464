"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Email, Event, EventDetails, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return complete events ordered by created_at descending.

        Events missing a required field are skipped, not reported.
        """
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create_event(self, details: EventDetails) -> Event:
        """Persist a new event with no participants."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, details: EventDetails) -> Event | None:
        """Replace the descriptive fields of an event, or return None if not found.

        Participants and head count are left untouched.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Hard-delete an event. Return False if it did not exist."""
        ...

    @abstractmethod
    def add_participant(self, event_id: EventId, email: Email) -> Event | None:
        """Add email to participants and increment head count in one atomic step.

        Returns None if the event does not exist.

        Raises:
            AlreadyRegisteredError: If the email is already a participant.
        """
        ...

    @abstractmethod
    def remove_participant(self, event_id: EventId, email: Email) -> Event | None:
        """Remove email from participants and decrement head count in one atomic step.

        Returns None if the event does not exist.

        Raises:
            NotRegisteredError: If the email is not a participant.
        """
        ...
