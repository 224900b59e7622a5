"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import BookingCandidate, EventCandidate, EventId
from events.domain.errors import DomainError, ErrorCode
from events.handlers.serializers import (
    BookingInputSerializer,
    BookingSerializer,
    EventInputSerializer,
    EventSerializer,
)
from events.services.booking_service import BookingService
from events.services.event_service import EventService
from events.services.integrity import ReferentialIntegrityChecker
from events.stores.django_store import DjangoBookingStore, DjangoEventStore

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DANGLING_EVENT_REFERENCE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.SLUG_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.STORAGE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def get_booking_service() -> BookingService:
    return BookingService(
        DjangoBookingStore(), ReferentialIntegrityChecker(DjangoEventStore())
    )


def error_response(err: DomainError) -> Response:
    body = {"error": {"code": err.code.value, "message": err.message}}
    if err.field is not None:
        body["error"]["field"] = err.field
    return Response(body, status=ERROR_STATUS.get(err.code, status.HTTP_400_BAD_REQUEST))


def invalid_input_response(errors: dict) -> Response:
    return Response(
        {
            "error": {
                "code": "INVALID_INPUT",
                "message": "Malformed request body",
                "fields": errors,
            }
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        try:
            events = get_event_service().list_events()
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        try:
            event = get_event_service().submit_event(
                EventCandidate(**serializer.validated_data)
            )
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PATCH /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            event = get_event_service().get_event(event_id)
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        try:
            candidate = EventCandidate(
                id=EventId.from_string(event_id), **serializer.validated_data
            )
            event = get_event_service().submit_event(candidate)
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(event).data)


class EventSlugView(APIView):
    """Handler for GET /api/events/slug/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        try:
            event = get_event_service().get_event_by_slug(slug)
        except DomainError as err:
            return error_response(err)
        return Response(EventSerializer(event).data)


class EventBookingListView(APIView):
    """Handler for GET /api/events/{event_id}/bookings"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            bookings = get_booking_service().list_bookings_for_event(event_id)
        except DomainError as err:
            return error_response(err)
        return Response(BookingSerializer(bookings, many=True).data)


class BookingListView(APIView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        serializer = BookingInputSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        try:
            booking = get_booking_service().submit_booking(
                BookingCandidate(**serializer.validated_data)
            )
        except DomainError as err:
            return error_response(err)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)
