from django.urls import path

from events.handlers import (
    AdminCheckAuthView,
    AdminEventDetailView,
    AdminEventListView,
    AdminLoginView,
    AdminLogoutView,
    AdminRsvpListView,
    AdminRsvpRemoveView,
    EventCreateView,
    EventDeleteView,
    EventDetailView,
    EventListView,
    HealthView,
    RsvpView,
    UnrsvpView,
)

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/create", EventCreateView.as_view(), name="event-create"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/delete",
        EventDeleteView.as_view(),
        name="event-delete",
    ),
    path(
        "events/<str:event_id>/headCount/rsvp",
        RsvpView.as_view(),
        name="event-rsvp",
    ),
    path(
        "events/<str:event_id>/headCount/unrsvp",
        UnrsvpView.as_view(),
        name="event-unrsvp",
    ),
    path("admin/login", AdminLoginView.as_view(), name="admin-login"),
    path("admin/logout", AdminLogoutView.as_view(), name="admin-logout"),
    path("admin/check-auth", AdminCheckAuthView.as_view(), name="admin-check-auth"),
    path("admin/events", AdminEventListView.as_view(), name="admin-event-list"),
    path(
        "admin/events/<str:event_id>",
        AdminEventDetailView.as_view(),
        name="admin-event-detail",
    ),
    path(
        "admin/events/<str:event_id>/rsvps",
        AdminRsvpListView.as_view(),
        name="admin-rsvp-list",
    ),
    path(
        "admin/events/<str:event_id>/rsvps/<str:email>",
        AdminRsvpRemoveView.as_view(),
        name="admin-rsvp-remove",
    ),
]
