"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID

from events.domain.errors import InvalidEmailError, InvalidEventIdError
from events.domain.validators import is_valid_email_shape


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value=UUID(str(value)))
        except ValueError as err:
            raise InvalidEventIdError() from err

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Email:
    """Lowercased, trimmed address with a valid shape."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_email_shape(self.value) or self.value != self.value.strip().lower():
            raise InvalidEmailError()

    @classmethod
    def normalize(cls, raw: object) -> Self:
        if not isinstance(raw, str):
            raise InvalidEmailError()
        return cls(value=raw.strip().lower())

    def __str__(self) -> str:
        return self.value
