"""Django signals for cache invalidation and auth gate reloads."""

from django.apps import apps
from django.core.cache import cache
from django.core.signals import setting_changed
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.models import Event, Participant
from events.services import AuthGate

EVENT_LIST_CACHE_KEY = "events:list"

AUTH_GATE_SETTINGS = frozenset(
    {
        "RSVP_ADMIN_USERNAME",
        "RSVP_ADMIN_PASSWORD",
        "RSVP_JWT_SECRET",
        "RSVP_JWT_ALGORITHM",
        "RSVP_TOKEN_TTL_HOURS",
    }
)


def event_cache_key(event_id: object) -> str:
    return f"events:{event_id}"


def _invalidate(event_id: object) -> None:
    keys = [EVENT_LIST_CACHE_KEY, event_cache_key(event_id)]
    cache.delete_many(keys)
    # A read racing the open transaction may re-cache pre-commit state.
    transaction.on_commit(lambda: cache.delete_many(keys))


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    _invalidate(instance.pk)


@receiver([post_save, post_delete], sender=Participant)
def invalidate_participant_cache(sender, instance, **kwargs):
    """Invalidate caches when a registration is added or removed."""
    _invalidate(instance.event_id)


@receiver(setting_changed)
def reload_auth_gate(setting, **kwargs):
    """Rebuild the AuthGate when one of its settings is overridden."""
    if setting in AUTH_GATE_SETTINGS:
        apps.get_app_config("events").auth_gate = AuthGate.from_settings()
