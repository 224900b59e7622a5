"""Serializers for parsing write input and rendering domain models.

Input serializers only check JSON types; business rules run in the services.
"""

from rest_framework import serializers


def _text(**kwargs) -> serializers.CharField:
    return serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False, **kwargs
    )


def _text_list() -> serializers.ListField:
    return serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
        allow_empty=True,
    )


class EventInputSerializer(serializers.Serializer):
    """Shape of an event create/update body."""

    title = _text()
    description = _text()
    overview = _text()
    image = _text()
    venue = _text()
    location = _text()
    date = _text()
    time = _text()
    mode = _text()
    audience = _text()
    organizer = _text()
    agenda = _text_list()
    tags = _text_list()


class BookingInputSerializer(serializers.Serializer):
    """Shape of a booking body; ``eventId`` is accepted as sent by clients."""

    eventId = _text(source="event_id")
    email = _text()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    overview = serializers.CharField()
    image = serializers.CharField()
    venue = serializers.CharField()
    location = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    mode = serializers.CharField()
    audience = serializers.CharField()
    organizer = serializers.CharField()
    agenda = serializers.ListField(child=serializers.CharField())
    tags = serializers.ListField(child=serializers.CharField())
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField(source="id.value")
    eventId = serializers.CharField(source="event_id.value")
    email = serializers.CharField(source="email.value")
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
