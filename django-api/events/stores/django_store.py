"""Django ORM implementation of the EventStore."""

from django.db import IntegrityError, transaction
from django.db.models import F, QuerySet

from events import models
from events.domain import Email, Event, EventDetails, EventId
from events.domain.errors import AlreadyRegisteredError, NotRegisteredError
from events.stores.interfaces import EventStore


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        name=row.name,
        description=row.description,
        date=row.date,
        location=row.location,
        head_count=row.head_count,
        participants=tuple(p.email for p in row.participants.all()),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM.

    Participants live in their own table with a unique (event, email)
    constraint, so set membership is enforced by the database. Every
    membership change and its head_count adjustment share one transaction.
    """

    def _queryset(self) -> QuerySet[models.Event]:
        return models.Event.objects.prefetch_related("participants")

    def _lock(self, event_id: EventId) -> models.Event | None:
        return (
            models.Event.objects.select_for_update()
            .filter(pk=event_id.value)
            .first()
        )

    def list_events(self) -> list[Event]:
        rows = (
            self._queryset()
            .exclude(name="")
            .exclude(description="")
            .exclude(location="")
            .exclude(date__isnull=True)
        )
        return [_to_domain(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._queryset().filter(pk=event_id.value).first()
        return _to_domain(row) if row is not None else None

    def create_event(self, details: EventDetails) -> Event:
        row = models.Event.objects.create(
            name=details.name,
            description=details.description,
            date=details.date,
            location=details.location,
            head_count=0,
        )
        return _to_domain(row)

    def update_event(self, event_id: EventId, details: EventDetails) -> Event | None:
        with transaction.atomic():
            row = self._lock(event_id)
            if row is None:
                return None
            row.name = details.name
            row.description = details.description
            row.date = details.date
            row.location = details.location
            row.save(
                update_fields=["name", "description", "date", "location", "updated_at"]
            )
        return self.get_event(event_id)

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0

    def add_participant(self, event_id: EventId, email: Email) -> Event | None:
        try:
            with transaction.atomic():
                if self._lock(event_id) is None:
                    return None
                models.Participant.objects.create(
                    event_id=event_id.value, email=email.value
                )
                models.Event.objects.filter(pk=event_id.value).update(
                    head_count=F("head_count") + 1
                )
        except IntegrityError:
            # unique_participant_per_event; the increment was rolled back with it
            raise AlreadyRegisteredError() from None
        return self.get_event(event_id)

    def remove_participant(self, event_id: EventId, email: Email) -> Event | None:
        with transaction.atomic():
            if self._lock(event_id) is None:
                return None
            deleted, _ = models.Participant.objects.filter(
                event_id=event_id.value, email=email.value
            ).delete()
            if not deleted:
                raise NotRegisteredError()
            models.Event.objects.filter(pk=event_id.value).update(
                head_count=F("head_count") - 1
            )
        return self.get_event(event_id)
