from events.handlers.views import (
    BookingListView,
    EventBookingListView,
    EventDetailView,
    EventListView,
    EventSlugView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventSlugView",
    "EventBookingListView",
    "BookingListView",
]
