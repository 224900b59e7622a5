from django.urls import path

from events.handlers import (
    BookingListView,
    EventBookingListView,
    EventDetailView,
    EventListView,
    EventSlugView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/slug/<slug:slug>", EventSlugView.as_view(), name="event-by-slug"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/bookings",
        EventBookingListView.as_view(),
        name="event-booking-list",
    ),
    path("bookings", BookingListView.as_view(), name="booking-list"),
]
