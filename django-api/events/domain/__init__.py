from events.domain.models import AdminIdentity, AdminSession, Event
from events.domain.value_objects import Email, EventDetails, EventId

__all__ = [
    "Event",
    "AdminIdentity",
    "AdminSession",
    "EventId",
    "Email",
    "EventDetails",
]
