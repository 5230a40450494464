"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime

from events.domain.value_objects import EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event and its registrations."""

    id: EventId
    name: str
    description: str
    date: date | None
    location: str
    head_count: int
    participants: tuple[str, ...]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AdminIdentity:
    """Decoded claims of a verified admin token."""

    username: str
    role: str = "admin"


@dataclass(frozen=True)
class AdminSession:
    """A freshly issued admin credential."""

    token: str
    identity: AdminIdentity
    expires_at: datetime
