"""Guard predicates shared by the write pipelines.

All predicates are total: they accept any value and answer with a bool.
"""

import re
from collections.abc import Sequence

# Coarse local-part@domain.tld shape; deliverability is not checked.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_non_empty_text(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_non_empty_sequence(value: object) -> bool:
    """True for a non-empty list/tuple whose items are all non-empty text."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    return len(value) > 0 and all(is_non_empty_text(item) for item in value)


def is_valid_email_shape(value: object) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None
