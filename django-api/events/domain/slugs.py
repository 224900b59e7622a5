"""URL-safe identifiers derived from event titles."""

import re

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """Lowercase ``title`` and collapse every non ``[a-z0-9]`` run into one hyphen.

    Leading and trailing hyphens are stripped, so a title without any ASCII
    letter or digit yields an empty string.
    """
    return _NON_ALNUM_RUN.sub("-", title.lower().strip()).strip("-")
