"""Booking service - referential and email checks in front of booking writes."""

import logging

from events.domain import Booking, BookingCandidate, Email, EventId
from events.domain.errors import (
    BookingNotFoundError,
    DanglingEventReferenceError,
    DomainError,
    EventNotFoundError,
    MissingEventIdError,
)
from events.services.integrity import ReferentialIntegrityChecker
from events.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)


def _coerce_event_id(raw: EventId | str | None) -> EventId:
    if isinstance(raw, EventId):
        return raw
    if isinstance(raw, str):
        raw = raw.strip()
    if raw is None or raw == "":
        raise MissingEventIdError()
    return EventId.from_string(raw)


def normalize_booking_candidate(
    candidate: BookingCandidate, integrity: ReferentialIntegrityChecker
) -> tuple[EventId, Email]:
    """Check a booking candidate in order and return its normalized parts.

    Raises:
        MissingEventIdError: If no event id was given.
        InvalidEventIdError: If the event id is not a UUID.
        DanglingEventReferenceError: If the event does not exist.
        InvalidEmailError: If the email is missing or malformed.
        StorageUnavailableError: If the existence check cannot reach storage.
    """
    event_id = _coerce_event_id(candidate.event_id)
    if not integrity.event_exists(event_id):
        raise DanglingEventReferenceError()
    return event_id, Email.normalize(candidate.email)


class BookingService:
    """Service for booking writes and lookups."""

    def __init__(
        self, store: BookingStore, integrity: ReferentialIntegrityChecker
    ) -> None:
        self._store = store
        self._integrity = integrity

    def submit_booking(self, candidate: BookingCandidate) -> Booking:
        """Validate and persist a booking.

        With ``candidate.id`` set, unset fields are taken from the stored
        booking and the merged record is re-validated in full.

        Raises:
            DomainError: The first failed check, or BookingNotFoundError when
                updating a missing booking.
        """
        try:
            if candidate.id is None:
                event_id, email = normalize_booking_candidate(candidate, self._integrity)
                booking = self._store.create_booking(event_id, email)
            else:
                existing = self._store.get_booking(candidate.id)
                if existing is None:
                    raise BookingNotFoundError()
                merged = BookingCandidate(
                    id=candidate.id,
                    event_id=(
                        candidate.event_id
                        if candidate.event_id is not None
                        else existing.event_id
                    ),
                    email=(
                        candidate.email
                        if candidate.email is not None
                        else existing.email.value
                    ),
                )
                event_id, email = normalize_booking_candidate(merged, self._integrity)
                booking = self._store.update_booking(candidate.id, event_id, email)
        except DomainError as err:
            logger.info("Booking write rejected: %s", err.code.value)
            raise
        logger.info("Booking %s saved for event %s", booking.id, booking.event_id)
        return booking

    def list_bookings_for_event(self, event_id: str) -> list[Booking]:
        """Return bookings for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = EventId.from_string(event_id)
        if not self._integrity.event_exists(parsed):
            raise EventNotFoundError()
        return self._store.list_bookings_for_event(parsed)
