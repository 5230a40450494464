"""Tests for DjangoEventStore against the test database.

Run with: pytest tests/test_stores.py -v
"""

import uuid
from datetime import date

import pytest

from events import models
from events.domain import Email, EventDetails, EventId
from events.domain.errors import AlreadyRegisteredError, NotRegisteredError


def _row(event):
    return models.Event.objects.get(pk=event.id.value)


@pytest.mark.django_db
class TestParticipants:
    """Tests for atomic participant changes."""

    def test_add_participant_increments_head_count(self, store, make_event):
        event = make_event()
        updated = store.add_participant(event.id, Email("a@x.edu"))

        assert updated.head_count == 1
        assert updated.participants == ("a@x.edu",)
        assert _row(event).head_count == 1

    def test_add_participant_twice_rolls_back(self, store, make_event):
        """A duplicate email leaves head_count and participants unchanged."""
        event = make_event()
        store.add_participant(event.id, Email("a@x.edu"))

        with pytest.raises(AlreadyRegisteredError):
            store.add_participant(event.id, Email("a@x.edu"))

        assert _row(event).head_count == 1
        assert models.Participant.objects.filter(event_id=event.id.value).count() == 1

    def test_participants_keep_registration_order(self, store, make_event):
        event = make_event()
        for email in ["c@x.edu", "a@x.edu", "b@x.edu"]:
            store.add_participant(event.id, Email(email))
        assert store.get_event(event.id).participants == (
            "c@x.edu",
            "a@x.edu",
            "b@x.edu",
        )

    def test_remove_participant_decrements_head_count(self, store, make_event):
        event = make_event()
        store.add_participant(event.id, Email("a@x.edu"))
        store.add_participant(event.id, Email("b@x.edu"))

        updated = store.remove_participant(event.id, Email("a@x.edu"))

        assert updated.head_count == 1
        assert updated.participants == ("b@x.edu",)

    def test_remove_absent_participant_raises(self, store, make_event):
        event = make_event()
        with pytest.raises(NotRegisteredError):
            store.remove_participant(event.id, Email("a@x.edu"))
        assert _row(event).head_count == 0

    def test_same_email_may_join_different_events(self, store, make_event):
        first, second = make_event(), make_event(name="Sparring")
        store.add_participant(first.id, Email("a@x.edu"))
        updated = store.add_participant(second.id, Email("a@x.edu"))
        assert updated.participants == ("a@x.edu",)

    @pytest.mark.parametrize("method", ["add_participant", "remove_participant"])
    def test_unknown_event_returns_none(self, store, method):
        missing = EventId(value=uuid.uuid4())
        assert getattr(store, method)(missing, Email("a@x.edu")) is None
        assert not models.Participant.objects.exists()


@pytest.mark.django_db
class TestEventRows:
    """Tests for event create, update, list and delete."""

    def test_create_event_starts_empty(self, make_event):
        event = make_event()
        assert event.head_count == 0
        assert event.participants == ()
        assert event.date == date(2025, 6, 15)

    def test_update_event_leaves_participants(self, store, make_event):
        event = make_event()
        store.add_participant(event.id, Email("a@x.edu"))

        updated = store.update_event(
            event.id, EventDetails("Sparring", "new", date(2025, 7, 1), "Ring")
        )

        assert (updated.name, updated.location) == ("Sparring", "Ring")
        assert updated.head_count == 1
        assert updated.participants == ("a@x.edu",)

    def test_update_unknown_event_returns_none(self, store):
        details = EventDetails("Sparring", "new", date(2025, 7, 1), "Ring")
        assert store.update_event(EventId(value=uuid.uuid4()), details) is None

    def test_list_events_skips_incomplete_rows(self, store, make_event):
        complete = make_event()
        models.Event.objects.create(name="No date", description="d", location="Gym")
        models.Event.objects.create(
            name="", description="d", location="Gym", date=date(2025, 1, 1)
        )

        assert [e.id for e in store.list_events()] == [complete.id]

    def test_list_events_newest_first(self, store, make_event):
        older = make_event(name="Older")
        newer = make_event(name="Newer")
        assert [e.id for e in store.list_events()] == [newer.id, older.id]

    def test_delete_event_cascades(self, store, make_event):
        event = make_event()
        store.add_participant(event.id, Email("a@x.edu"))

        assert store.delete_event(event.id) is True
        assert store.get_event(event.id) is None
        assert not models.Participant.objects.exists()

    def test_delete_unknown_event(self, store):
        assert store.delete_event(EventId(value=uuid.uuid4())) is False
