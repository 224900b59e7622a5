"""Django ORM models (persistence layer).

These models handle database concerns. Validation and normalization live in
the services; rows are only written after a candidate passes them.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.TextField()
    slug = models.TextField(unique=True)
    description = models.TextField()
    overview = models.TextField()
    image = models.TextField()
    venue = models.TextField()
    location = models.TextField()
    date = models.CharField(max_length=10)
    time = models.CharField(max_length=5)
    mode = models.TextField()
    audience = models.TextField()
    organizer = models.TextField()
    agenda = models.JSONField(default=list)
    tags = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="events_even_created_0a3c1f_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Booking(models.Model):
    """Persistence model for event bookings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="bookings")
    email = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["event", "created_at"], name="events_book_event_i_5b2d9e_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.email} - {self.event_id}"
