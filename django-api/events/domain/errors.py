"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_TITLE = "INVALID_TITLE"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_TIME_VALUE = "INVALID_TIME_VALUE"
    EMPTY_AGENDA = "EMPTY_AGENDA"
    EMPTY_TAGS = "EMPTY_TAGS"
    SLUG_CONFLICT = "SLUG_CONFLICT"
    MISSING_EVENT_ID = "MISSING_EVENT_ID"
    DANGLING_EVENT_REFERENCE = "DANGLING_EVENT_REFERENCE"
    INVALID_EMAIL = "INVALID_EMAIL"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_FOUND, message="Booking not found")


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
            field="event_id",
        )


class MissingFieldError(DomainError):
    """Raised when a required field is absent or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELD,
            message=f'Field "{field}" is required.',
            field=field,
        )


class MissingTitleError(MissingFieldError):
    """Raised when an event has no usable title."""

    def __init__(self) -> None:
        super().__init__("title")


class MissingDateError(MissingFieldError):
    """Raised when a changed event date is blank."""

    def __init__(self) -> None:
        super().__init__("date")


class MissingTimeError(MissingFieldError):
    """Raised when a changed event time is blank."""

    def __init__(self) -> None:
        super().__init__("time")


class InvalidTitleError(DomainError):
    """Raised when a title has no characters a slug can be built from."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TITLE,
            message="Title must contain at least one letter or digit.",
            field="title",
        )


class InvalidDateError(DomainError):
    """Raised when an event date cannot be parsed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE, message="Invalid event date.", field="date"
        )


class InvalidTimeFormatError(DomainError):
    """Raised when an event time is not shaped like HH:MM."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_FORMAT,
            message="Time must be in HH:MM format.",
            field="time",
        )


class InvalidTimeValueError(DomainError):
    """Raised when an event time has an out-of-range hour or minute."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_VALUE, message="Invalid time value.", field="time"
        )


class EmptyAgendaError(DomainError):
    """Raised when an event agenda has no non-empty items."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_AGENDA,
            message="Agenda must contain at least one non-empty item.",
            field="agenda",
        )


class EmptyTagsError(DomainError):
    """Raised when event tags have no non-empty items."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_TAGS,
            message="Tags must contain at least one non-empty item.",
            field="tags",
        )


class SlugConflictError(DomainError):
    """Raised when another event already owns the derived slug."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SLUG_CONFLICT,
            message="An event with this slug already exists.",
            field="slug",
        )


class MissingEventIdError(DomainError):
    """Raised when a booking does not reference an event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_EVENT_ID,
            message="eventId is required.",
            field="event_id",
        )


class DanglingEventReferenceError(DomainError):
    """Raised when a booking references an event that does not exist."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DANGLING_EVENT_REFERENCE,
            message="Referenced event does not exist.",
            field="event_id",
        )


class InvalidEmailError(DomainError):
    """Raised when a booking email is missing or malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EMAIL,
            message="Email must be a valid email address.",
            field="email",
        )


class StorageUnavailableError(DomainError):
    """Raised when the backing store cannot be reached."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_UNAVAILABLE,
            message="Storage is temporarily unavailable.",
        )
