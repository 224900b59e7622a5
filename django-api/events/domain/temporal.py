"""Normalization of free-form event dates and times.

Dates are stored as ``YYYY-MM-DD`` (UTC calendar date) and times as
zero-padded 24-hour ``HH:MM``.
"""

import re
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime

from django.utils.dateparse import parse_date, parse_datetime

from events.domain.errors import (
    InvalidDateError,
    InvalidTimeFormatError,
    InvalidTimeValueError,
)

# Accepted in addition to ISO 8601 dates and timestamps.
DATE_INPUT_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%a %b %d %Y",
)

TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{1,2})(?::\d{2})?$", re.ASCII)


def _parse(raw: str) -> date | datetime | None:
    try:
        parsed = parse_datetime(raw) or parse_date(raw)
    except ValueError:
        # Well-formed ISO value with out-of-range components.
        return None
    if parsed is not None:
        return parsed
    try:
        # RFC 2822, e.g. "Wed, 23 Apr 2025 10:00:00 GMT".
        return parsedate_to_datetime(raw)
    except (TypeError, ValueError, OverflowError):
        pass
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue
    return None


def normalize_date(raw: str) -> str:
    """Return the UTC calendar date of ``raw`` formatted as ``YYYY-MM-DD``.

    Timestamps carrying an offset are converted to UTC before truncation;
    naive values are taken as UTC.

    Raises:
        InvalidDateError: If ``raw`` cannot be parsed.
    """
    if not isinstance(raw, str):
        raise InvalidDateError()
    parsed = _parse(raw.strip())
    if parsed is None:
        raise InvalidDateError()
    if isinstance(parsed, datetime):
        if parsed.tzinfo is not None:
            try:
                parsed = parsed.astimezone(timezone.utc)
            except OverflowError as err:
                raise InvalidDateError() from err
        parsed = parsed.date()
    return f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"


def normalize_time(raw: str) -> str:
    """Return ``raw`` as ``HH:MM``; seconds, if present, are dropped.

    Raises:
        InvalidTimeFormatError: If ``raw`` is not ``H:MM``, ``HH:MM`` or ``HH:MM:SS``
            (a single-digit minute is also accepted).
        InvalidTimeValueError: If the hour or minute is out of range.
    """
    if not isinstance(raw, str):
        raise InvalidTimeFormatError()
    match = TIME_PATTERN.match(raw.strip())
    if match is None:
        raise InvalidTimeFormatError()
    hours, minutes = int(match.group(1)), int(match.group(2))
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise InvalidTimeValueError()
    return f"{hours:02d}:{minutes:02d}"
