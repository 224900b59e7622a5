"""Builders for valid event input."""

from events.domain import EventCandidate


def make_event_candidate(**overrides) -> EventCandidate:
    values = {
        "title": "PyCon Berlin 2025",
        "description": "Three days of Python talks.",
        "overview": "Talks, tutorials and sprints.",
        "image": "/images/pycon.png",
        "venue": "bcc Berlin",
        "location": "Berlin, Germany",
        "date": "2025-04-23",
        "time": "09:30",
        "mode": "offline",
        "audience": "Developers",
        "organizer": "Python Software Verband",
        "agenda": ["Registration", "Keynote"],
        "tags": ["python", "conference"],
    }
    values.update(overrides)
    return EventCandidate(**values)


def event_payload(**overrides) -> dict:
    """JSON body for the events endpoint."""
    candidate = make_event_candidate(**overrides)
    return {
        name: value
        for name, value in vars(candidate).items()
        if name not in ("id", "slug") and value is not None
    }
