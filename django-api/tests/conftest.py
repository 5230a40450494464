"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest
from rest_framework.test import APIClient

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct-horse-battery"
JWT_SECRET = "test-signing-secret-that-is-long-enough-for-hs256"


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def rsvp_settings(settings):
    settings.RSVP_ADMIN_USERNAME = ADMIN_USERNAME
    settings.RSVP_ADMIN_PASSWORD = ADMIN_PASSWORD
    settings.RSVP_JWT_SECRET = JWT_SECRET
    settings.RSVP_EMAIL_DOMAIN = ""
    settings.RSVP_PUBLIC_EVENT_WRITES = True
    return settings


@pytest.fixture
def store():
    from events.stores.django_store import DjangoEventStore
    return DjangoEventStore()


@pytest.fixture
def make_event(store):
    from events.domain import EventDetails

    def _make(**overrides):
        fields = {
            "name": "Clinic",
            "description": "d",
            "date": date(2025, 6, 15),
            "location": "Gym",
        }
        fields.update(overrides)
        return store.create_event(EventDetails(**fields))

    return _make


@pytest.fixture
def admin_token(api_client) -> str:
    response = api_client.post(
        "/api/admin/login",
        {"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
        format="json",
    )
    assert response.status_code == 200
    # Tests pass the token explicitly; drop the cookie the login set.
    api_client.cookies.clear()
    return response.json()["token"]


@pytest.fixture
def admin_client(admin_token) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {admin_token}")
    return client


@pytest.fixture
def fake_store():
    from fakes import InMemoryEventStore
    return InMemoryEventStore()
