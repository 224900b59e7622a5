"""Django ORM implementation of the EventStore and BookingStore."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from django.db import IntegrityError, InterfaceError, OperationalError, transaction

from events import models as orm
from events.domain import Booking, BookingId, Email, Event, EventCandidate, EventId
from events.domain.errors import (
    BookingNotFoundError,
    EventNotFoundError,
    SlugConflictError,
    StorageUnavailableError,
)
from events.domain.models import EVENT_FIELDS
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors() -> Iterator[None]:
    try:
        yield
    except (OperationalError, InterfaceError) as err:
        logger.warning("Database unavailable: %s", err)
        raise StorageUnavailableError() from err


def _is_slug_violation(err: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed: events_event.slug"
    # PostgreSQL: 'duplicate key ... constraint "events_event_slug_key"'
    table = orm.Event._meta.db_table
    message = str(err)
    return f"{table}.slug" in message or f"{table}_slug_key" in message


def _to_event(row: orm.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        title=row.title,
        slug=row.slug,
        description=row.description,
        overview=row.overview,
        image=row.image,
        venue=row.venue,
        location=row.location,
        date=row.date,
        time=row.time,
        mode=row.mode,
        audience=row.audience,
        organizer=row.organizer,
        agenda=tuple(row.agenda),
        tags=tuple(row.tags),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_booking(row: orm.Booking) -> Booking:
    return Booking(
        id=BookingId(value=row.id),
        event_id=EventId(value=row.event_id),
        email=Email(value=row.email),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _event_values(candidate: EventCandidate) -> dict:
    values = {name: getattr(candidate, name) for name in EVENT_FIELDS}
    values["agenda"] = list(candidate.agenda)
    values["tags"] = list(candidate.tags)
    values["slug"] = candidate.slug
    return values


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        with _storage_errors():
            return [_to_event(row) for row in orm.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        with _storage_errors():
            row = orm.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row is not None else None

    def get_event_by_slug(self, slug: str) -> Event | None:
        with _storage_errors():
            row = orm.Event.objects.filter(slug=slug).first()
        return _to_event(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        with _storage_errors():
            return orm.Event.objects.filter(pk=event_id.value).exists()

    def create_event(self, candidate: EventCandidate) -> Event:
        return self._write(lambda: orm.Event.objects.create(**_event_values(candidate)))

    def update_event(self, event_id: EventId, candidate: EventCandidate) -> Event:
        def write() -> orm.Event:
            try:
                row = orm.Event.objects.select_for_update().get(pk=event_id.value)
            except orm.Event.DoesNotExist as err:
                raise EventNotFoundError() from err
            for name, value in _event_values(candidate).items():
                setattr(row, name, value)
            row.save()
            return row

        return self._write(write)

    def _write(self, write: Callable[[], orm.Event]) -> Event:
        with _storage_errors():
            try:
                with transaction.atomic():
                    row = write()
            except IntegrityError as err:
                if _is_slug_violation(err):
                    raise SlugConflictError() from err
                raise
        return _to_event(row)


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        with _storage_errors():
            row = orm.Booking.objects.filter(pk=booking_id.value).first()
        return _to_booking(row) if row is not None else None

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        with _storage_errors():
            rows = orm.Booking.objects.filter(event_id=event_id.value).order_by(
                "created_at"
            )
            return [_to_booking(row) for row in rows]

    def create_booking(self, event_id: EventId, email: Email) -> Booking:
        with _storage_errors(), transaction.atomic():
            row = orm.Booking.objects.create(event_id=event_id.value, email=email.value)
        return _to_booking(row)

    def update_booking(
        self, booking_id: BookingId, event_id: EventId, email: Email
    ) -> Booking:
        with _storage_errors(), transaction.atomic():
            try:
                row = orm.Booking.objects.select_for_update().get(pk=booking_id.value)
            except orm.Booking.DoesNotExist as err:
                raise BookingNotFoundError() from err
            row.event_id = event_id.value
            row.email = email.value
            row.save()
        return _to_booking(row)
