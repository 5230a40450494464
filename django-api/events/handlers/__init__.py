from events.handlers.admin_views import (
    AdminCheckAuthView,
    AdminEventDetailView,
    AdminEventListView,
    AdminLoginView,
    AdminLogoutView,
    AdminRsvpListView,
    AdminRsvpRemoveView,
)
from events.handlers.views import (
    EventCreateView,
    EventDeleteView,
    EventDetailView,
    EventListView,
    HealthView,
    RsvpView,
    UnrsvpView,
)

__all__ = [
    "AdminCheckAuthView",
    "AdminEventDetailView",
    "AdminEventListView",
    "AdminLoginView",
    "AdminLogoutView",
    "AdminRsvpListView",
    "AdminRsvpRemoveView",
    "EventCreateView",
    "EventDeleteView",
    "EventDetailView",
    "EventListView",
    "HealthView",
    "RsvpView",
    "UnrsvpView",
]
