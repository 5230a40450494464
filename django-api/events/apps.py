from django.apps import AppConfig


class EventsConfig(AppConfig):
    """Builds the event store, services and auth gate once, at startup."""

    name = "events"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self) -> None:
        from events import signals  # noqa: F401
        from events.services import AuthGate, EventService, RsvpManager
        from events.stores.django_store import DjangoEventStore

        self.store = DjangoEventStore()
        self.event_service = EventService(self.store)
        self.rsvp_manager = RsvpManager(self.store)
        self.auth_gate = AuthGate.from_settings()
