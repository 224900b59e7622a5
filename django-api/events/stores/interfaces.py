"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Writes are atomic per
record; implementations translate unreachable storage into
StorageUnavailableError and slug uniqueness violations into
SlugConflictError.
"""

from abc import ABC, abstractmethod

from events.domain import Booking, BookingId, Email, Event, EventCandidate, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return an event by slug, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def create_event(self, candidate: EventCandidate) -> Event:
        """Insert a fully normalized candidate and return the stored event."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, candidate: EventCandidate) -> Event:
        """Overwrite a stored event with a fully normalized candidate."""
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        """Return bookings for an event, ordered by created_at ascending."""
        ...

    @abstractmethod
    def create_booking(self, event_id: EventId, email: Email) -> Booking:
        """Insert a booking and return it."""
        ...

    @abstractmethod
    def update_booking(
        self, booking_id: BookingId, event_id: EventId, email: Email
    ) -> Booking:
        """Overwrite a stored booking and return it."""
        ...
