"""Domain models representing persisted state and write candidates.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import BookingId, Email, EventId

# Text fields that must be non-empty after trimming, in check order.
EVENT_TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)

EVENT_LIST_FIELDS = ("agenda", "tags")

EVENT_FIELDS = EVENT_TEXT_FIELDS + EVENT_LIST_FIELDS


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    organizer: str
    agenda: tuple[str, ...]
    tags: tuple[str, ...]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class EventCandidate:
    """Unvalidated Event input.

    ``id`` is set when the candidate updates an existing Event. ``None``
    fields on an update keep the stored value.
    """

    id: EventId | None = None
    title: str | None = None
    slug: str | None = None
    description: str | None = None
    overview: str | None = None
    image: str | None = None
    venue: str | None = None
    location: str | None = None
    date: str | None = None
    time: str | None = None
    mode: str | None = None
    audience: str | None = None
    organizer: str | None = None
    agenda: Sequence[str] | None = None
    tags: Sequence[str] | None = None


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    event_id: EventId
    email: Email
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class BookingCandidate:
    """Unvalidated Booking input; ``event_id`` may be a raw string."""

    id: BookingId | None = None
    event_id: EventId | str | None = None
    email: str | None = None
