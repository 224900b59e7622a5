"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from events.services.booking_service import BookingService
from events.services.event_service import EventService
from events.services.integrity import ReferentialIntegrityChecker
from tests.fakes import InMemoryBookingStore, InMemoryEventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def event_service(event_store: InMemoryEventStore) -> EventService:
    return EventService(event_store)


@pytest.fixture
def booking_service(
    event_store: InMemoryEventStore, booking_store: InMemoryBookingStore
) -> BookingService:
    return BookingService(booking_store, ReferentialIntegrityChecker(event_store))
