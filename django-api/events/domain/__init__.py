from events.domain.models import Booking, BookingCandidate, Event, EventCandidate
from events.domain.value_objects import BookingId, Email, EventId

__all__ = [
    "Event",
    "EventCandidate",
    "Booking",
    "BookingCandidate",
    "EventId",
    "BookingId",
    "Email",
]
