from events.services.auth_gate import AuthGate
from events.services.event_service import EventService
from events.services.rsvp_manager import RsvpManager

__all__ = ["AuthGate", "EventService", "RsvpManager"]
