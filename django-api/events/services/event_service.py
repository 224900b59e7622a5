"""Event service - validation, normalization and orchestration of event writes.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Collection
from dataclasses import fields, replace

from events.domain import Event, EventCandidate, EventId
from events.domain.errors import (
    DomainError,
    EmptyAgendaError,
    EmptyTagsError,
    EventNotFoundError,
    InvalidTitleError,
    MissingDateError,
    MissingFieldError,
    MissingTimeError,
    MissingTitleError,
)
from events.domain.models import EVENT_FIELDS, EVENT_TEXT_FIELDS
from events.domain.slugs import slugify
from events.domain.temporal import normalize_date, normalize_time
from events.domain.validators import is_non_empty_sequence, is_non_empty_text
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _trimmed(candidate: EventCandidate) -> EventCandidate:
    changes = {
        name: value.strip()
        for name in EVENT_TEXT_FIELDS
        if isinstance(value := getattr(candidate, name), str)
    }
    return replace(candidate, **changes)


def normalize_event_candidate(
    candidate: EventCandidate, changed: Collection[str]
) -> EventCandidate:
    """Run the ordered event checks and return the normalized candidate.

    ``changed`` names the fields that differ from the stored record; on
    create it holds every field. Slug, date and time are only recomputed
    when their source field changed (or the slug is missing). The first
    failing check raises; nothing after it runs.
    """
    candidate = _trimmed(candidate)

    if "title" in changed or not candidate.slug:
        if not is_non_empty_text(candidate.title):
            raise MissingTitleError()
        slug = slugify(candidate.title)
        if not slug:
            raise InvalidTitleError()
        candidate = replace(candidate, slug=slug)

    if "date" in changed:
        if not is_non_empty_text(candidate.date):
            raise MissingDateError()
        candidate = replace(candidate, date=normalize_date(candidate.date))

    if "time" in changed:
        if not is_non_empty_text(candidate.time):
            raise MissingTimeError()
        candidate = replace(candidate, time=normalize_time(candidate.time))

    for name in EVENT_TEXT_FIELDS:
        if not is_non_empty_text(getattr(candidate, name)):
            raise MissingFieldError(name)

    if not is_non_empty_sequence(candidate.agenda):
        raise EmptyAgendaError()
    if not is_non_empty_sequence(candidate.tags):
        raise EmptyTagsError()

    return replace(candidate, agenda=tuple(candidate.agenda), tags=tuple(candidate.tags))


def _merge(candidate: EventCandidate, existing: Event) -> tuple[EventCandidate, set[str]]:
    """Fill unset candidate fields from ``existing`` and report what changed."""
    merged = {}
    changed = set()
    for name in EVENT_FIELDS:
        value = getattr(candidate, name)
        stored = getattr(existing, name)
        if value is None:
            merged[name] = stored
            continue
        merged[name] = value
        if name in ("agenda", "tags"):
            if not isinstance(value, (list, tuple)) or tuple(value) != stored:
                changed.add(name)
        elif value != stored:
            changed.add(name)
    merged["slug"] = candidate.slug or existing.slug
    return replace(candidate, **merged), changed


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(EventId.from_string(event_id))
        if event is None:
            raise EventNotFoundError()
        return event

    def get_event_by_slug(self, slug: str) -> Event:
        """Return an event by slug.

        Raises:
            EventNotFoundError: If no event has this slug.
        """
        event = self._store.get_event_by_slug(slug)
        if event is None:
            raise EventNotFoundError()
        return event

    def submit_event(self, candidate: EventCandidate) -> Event:
        """Validate, normalize and persist an event candidate.

        A candidate without an id is created; one with an id updates the
        stored event, re-deriving only what its changed fields affect.

        Raises:
            DomainError: The first failed check, SlugConflictError when the
                store rejects a duplicate slug, EventNotFoundError when
                updating a missing event.
        """
        try:
            if candidate.id is None:
                normalized = normalize_event_candidate(
                    candidate, {f.name for f in fields(EventCandidate)}
                )
                event = self._store.create_event(normalized)
            else:
                existing = self._store.get_event(candidate.id)
                if existing is None:
                    raise EventNotFoundError()
                merged, changed = _merge(candidate, existing)
                normalized = normalize_event_candidate(merged, changed)
                event = self._store.update_event(candidate.id, normalized)
        except DomainError as err:
            logger.info("Event write rejected: %s", err.code.value)
            raise
        logger.info("Event %s saved with slug %s", event.id, event.slug)
        return event
