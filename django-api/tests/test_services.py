"""Unit tests for EventService and BookingService.

These test pipeline ordering and domain error mapping against in-memory stores.
Run with: pytest tests/test_services.py -v
"""

import threading
import uuid
from dataclasses import replace

import pytest

from events.domain import BookingCandidate, BookingId, EventCandidate, EventId
from events.domain.errors import (
    BookingNotFoundError,
    DanglingEventReferenceError,
    EmptyAgendaError,
    EmptyTagsError,
    EventNotFoundError,
    InvalidDateError,
    InvalidEmailError,
    InvalidEventIdError,
    InvalidTimeFormatError,
    InvalidTimeValueError,
    InvalidTitleError,
    MissingDateError,
    MissingEventIdError,
    MissingFieldError,
    MissingTimeError,
    MissingTitleError,
    SlugConflictError,
    StorageUnavailableError,
)
from events.services.booking_service import BookingService
from events.services.event_service import EventService, normalize_event_candidate
from events.services.integrity import ReferentialIntegrityChecker
from tests.factories import make_event_candidate
from tests.fakes import InMemoryBookingStore, InMemoryEventStore, UnavailableEventStore

ALL_FIELDS = {
    "title", "description", "overview", "image", "venue", "location", "date",
    "time", "mode", "audience", "organizer", "agenda", "tags",
}


class TestNormalizeEventCandidate:
    """Tests for the ordered event checks."""

    def test_derives_slug_and_normalizes_temporal_fields(self):
        candidate = make_event_candidate(
            title="  Django Meetup: Async ORM! ", date="2025-04-23T23:30:00-05:00", time="7:05"
        )
        normalized = normalize_event_candidate(candidate, ALL_FIELDS)
        assert normalized.title == "Django Meetup: Async ORM!"
        assert normalized.slug == "django-meetup-async-orm"
        assert normalized.date == "2025-04-24"
        assert normalized.time == "07:05"
        assert normalized.agenda == ("Registration", "Keynote")

    def test_trims_text_fields(self):
        normalized = normalize_event_candidate(
            make_event_candidate(venue="  bcc Berlin  "), ALL_FIELDS
        )
        assert normalized.venue == "bcc Berlin"

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_missing_title(self, title):
        with pytest.raises(MissingTitleError):
            normalize_event_candidate(make_event_candidate(title=title), ALL_FIELDS)

    def test_title_without_alphanumerics(self):
        with pytest.raises(InvalidTitleError):
            normalize_event_candidate(make_event_candidate(title="!!!"), ALL_FIELDS)

    def test_missing_date(self):
        with pytest.raises(MissingDateError):
            normalize_event_candidate(make_event_candidate(date=" "), ALL_FIELDS)

    def test_invalid_date(self):
        with pytest.raises(InvalidDateError):
            normalize_event_candidate(make_event_candidate(date="someday"), ALL_FIELDS)

    def test_missing_time(self):
        with pytest.raises(MissingTimeError):
            normalize_event_candidate(make_event_candidate(time=""), ALL_FIELDS)

    def test_invalid_time_format_and_value(self):
        with pytest.raises(InvalidTimeFormatError):
            normalize_event_candidate(make_event_candidate(time="9-05"), ALL_FIELDS)
        with pytest.raises(InvalidTimeValueError):
            normalize_event_candidate(make_event_candidate(time="24:00"), ALL_FIELDS)

    def test_names_first_missing_text_field(self):
        candidate = make_event_candidate(overview=" ", organizer="")
        with pytest.raises(MissingFieldError) as excinfo:
            normalize_event_candidate(candidate, ALL_FIELDS)
        assert excinfo.value.field == "overview"

    @pytest.mark.parametrize("agenda", [[], ["  "], None, "Keynote"])
    def test_empty_agenda(self, agenda):
        with pytest.raises(EmptyAgendaError):
            normalize_event_candidate(make_event_candidate(agenda=agenda), ALL_FIELDS)

    def test_empty_agenda_wins_over_empty_tags(self):
        with pytest.raises(EmptyAgendaError):
            normalize_event_candidate(make_event_candidate(agenda=[], tags=[]), ALL_FIELDS)

    def test_empty_tags(self):
        with pytest.raises(EmptyTagsError):
            normalize_event_candidate(make_event_candidate(tags=["python", ""]), ALL_FIELDS)

    def test_title_check_runs_before_date_check(self):
        with pytest.raises(MissingTitleError):
            normalize_event_candidate(make_event_candidate(title="", date="bad"), ALL_FIELDS)

    def test_unchanged_date_is_not_renormalized(self):
        candidate = make_event_candidate(date="not a date", slug="pycon-berlin-2025")
        normalized = normalize_event_candidate(candidate, {"venue"})
        assert normalized.date == "not a date"

    def test_existing_slug_kept_when_title_unchanged(self):
        candidate = make_event_candidate(slug="custom-slug")
        assert normalize_event_candidate(candidate, {"venue"}).slug == "custom-slug"


class TestEventService:
    """Tests for EventService."""

    def test_submit_event_creates_normalized_event(
        self, event_service: EventService, event_store: InMemoryEventStore
    ):
        event = event_service.submit_event(make_event_candidate(time="9:5"))
        assert event.slug == "pycon-berlin-2025"
        assert event.time == "09:05"
        assert event_store.get_event(event.id) == event

    def test_failed_validation_performs_no_write(
        self, event_service: EventService, event_store: InMemoryEventStore
    ):
        with pytest.raises(EmptyAgendaError):
            event_service.submit_event(make_event_candidate(agenda=[]))
        assert event_store.writes == 0

    def test_duplicate_slug_raises_conflict(self, event_service: EventService):
        event_service.submit_event(make_event_candidate(title="PyCon Berlin"))
        with pytest.raises(SlugConflictError):
            event_service.submit_event(make_event_candidate(title="pycon   berlin!"))

    def test_concurrent_submissions_with_same_slug(
        self, event_service: EventService, event_store: InMemoryEventStore
    ):
        """Exactly one of two racing creates with the same slug succeeds."""
        barrier = threading.Barrier(2)
        outcomes = []

        def submit(title: str) -> None:
            barrier.wait()
            try:
                event_service.submit_event(make_event_candidate(title=title))
                outcomes.append("ok")
            except SlugConflictError:
                outcomes.append("conflict")

        threads = [
            threading.Thread(target=submit, args=(title,))
            for title in ("Data Day", "data-day")
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(outcomes) == ["conflict", "ok"]
        assert len(event_store.list_events()) == 1

    def test_update_recomputes_slug_when_title_changes(self, event_service: EventService):
        event = event_service.submit_event(make_event_candidate())
        updated = event_service.submit_event(
            EventCandidate(id=event.id, title="PyCon Berlin 2026")
        )
        assert updated.slug == "pycon-berlin-2026"
        assert updated.venue == event.venue

    def test_update_keeps_slug_when_title_unchanged(self, event_service: EventService):
        event = event_service.submit_event(make_event_candidate())
        updated = event_service.submit_event(EventCandidate(id=event.id, venue="Estrel"))
        assert updated.slug == event.slug
        assert updated.venue == "Estrel"

    def test_update_normalizes_changed_time(self, event_service: EventService):
        event = event_service.submit_event(make_event_candidate())
        updated = event_service.submit_event(EventCandidate(id=event.id, time="8:00:30"))
        assert updated.time == "08:00"

    def test_update_rejects_blanked_field(self, event_service: EventService):
        event = event_service.submit_event(make_event_candidate())
        with pytest.raises(MissingFieldError) as excinfo:
            event_service.submit_event(EventCandidate(id=event.id, mode=""))
        assert excinfo.value.field == "mode"

    def test_update_into_taken_slug_conflicts(self, event_service: EventService):
        event_service.submit_event(make_event_candidate(title="First"))
        second = event_service.submit_event(make_event_candidate(title="Second"))
        with pytest.raises(SlugConflictError):
            event_service.submit_event(EventCandidate(id=second.id, title="first"))

    def test_update_missing_event(self, event_service: EventService):
        with pytest.raises(EventNotFoundError):
            event_service.submit_event(
                replace(make_event_candidate(), id=EventId(value=uuid.uuid4()))
            )

    def test_get_event_invalid_id_raises_error(self, event_service: EventService):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            event_service.get_event("not-a-uuid")

    def test_get_event_not_found_raises_error(self, event_service: EventService):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError):
            event_service.get_event(str(uuid.uuid4()))

    def test_get_event_by_slug(self, event_service: EventService):
        event = event_service.submit_event(make_event_candidate())
        assert event_service.get_event_by_slug("pycon-berlin-2025") == event
        with pytest.raises(EventNotFoundError):
            event_service.get_event_by_slug("missing")


class TestReferentialIntegrityChecker:
    """Tests for the event existence check."""

    def test_reflects_current_store_state(self, event_service, event_store):
        checker = ReferentialIntegrityChecker(event_store)
        event = event_service.submit_event(make_event_candidate())
        assert checker.event_exists(event.id) is True
        event_store.remove(event.id)
        assert checker.event_exists(event.id) is False
        assert event_store.exists_calls == 2

    def test_storage_unavailable_propagates(self):
        checker = ReferentialIntegrityChecker(UnavailableEventStore())
        with pytest.raises(StorageUnavailableError):
            checker.event_exists(EventId(value=uuid.uuid4()))


class TestBookingService:
    """Tests for BookingService."""

    @pytest.fixture
    def event(self, event_service: EventService):
        return event_service.submit_event(make_event_candidate())

    def test_submit_booking_lowercases_email(self, booking_service: BookingService, event):
        booking = booking_service.submit_booking(
            BookingCandidate(event_id=str(event.id), email="Foo@Bar.COM")
        )
        assert booking.email.value == "foo@bar.com"
        assert booking.event_id == event.id

    @pytest.mark.parametrize("event_id", [None, "", "   "])
    def test_missing_event_id(self, booking_service: BookingService, event_id):
        with pytest.raises(MissingEventIdError):
            booking_service.submit_booking(
                BookingCandidate(event_id=event_id, email="a@b.co")
            )

    def test_malformed_event_id(self, booking_service: BookingService):
        with pytest.raises(InvalidEventIdError):
            booking_service.submit_booking(
                BookingCandidate(event_id="123", email="a@b.co")
            )

    def test_dangling_reference_performs_no_write(
        self, booking_service: BookingService, booking_store: InMemoryBookingStore
    ):
        with pytest.raises(DanglingEventReferenceError):
            booking_service.submit_booking(
                BookingCandidate(event_id=str(uuid.uuid4()), email="a@b.co")
            )
        assert booking_store.writes == 0

    def test_dangling_reference_checked_before_email(self, booking_service: BookingService):
        with pytest.raises(DanglingEventReferenceError):
            booking_service.submit_booking(
                BookingCandidate(event_id=str(uuid.uuid4()), email="nope")
            )

    @pytest.mark.parametrize("email", [None, "", "foo", "foo@bar", "a b@c.de"])
    def test_invalid_email(self, booking_service: BookingService, event, email):
        with pytest.raises(InvalidEmailError):
            booking_service.submit_booking(
                BookingCandidate(event_id=event.id, email=email)
            )

    def test_storage_unavailable_aborts_write(self):
        store = InMemoryBookingStore()
        service = BookingService(store, ReferentialIntegrityChecker(UnavailableEventStore()))
        with pytest.raises(StorageUnavailableError):
            service.submit_booking(
                BookingCandidate(event_id=str(uuid.uuid4()), email="a@b.co")
            )
        assert store.writes == 0

    def test_update_revalidates_reference(
        self, booking_service: BookingService, event_store: InMemoryEventStore, event
    ):
        booking = booking_service.submit_booking(
            BookingCandidate(event_id=event.id, email="a@b.co")
        )
        updated = booking_service.submit_booking(
            BookingCandidate(id=booking.id, email=" New@Example.org ")
        )
        assert updated.email.value == "new@example.org"
        event_store.remove(event.id)
        with pytest.raises(DanglingEventReferenceError):
            booking_service.submit_booking(BookingCandidate(id=booking.id, email="c@d.io"))

    def test_update_missing_booking(self, booking_service: BookingService, event):
        with pytest.raises(BookingNotFoundError):
            booking_service.submit_booking(
                BookingCandidate(
                    id=BookingId(value=uuid.uuid4()), event_id=event.id, email="a@b.co"
                )
            )

    def test_list_bookings_for_event(self, booking_service: BookingService, event):
        booking_service.submit_booking(BookingCandidate(event_id=event.id, email="a@b.co"))
        bookings = booking_service.list_bookings_for_event(str(event.id))
        assert [b.email.value for b in bookings] == ["a@b.co"]

    def test_list_bookings_for_missing_event(self, booking_service: BookingService):
        with pytest.raises(EventNotFoundError):
            booking_service.list_bookings_for_event(str(uuid.uuid4()))
