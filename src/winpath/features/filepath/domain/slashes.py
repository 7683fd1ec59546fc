"""
Summary: Slash inspection helpers shared by every path operation.
Why: Keep delimiter detection and segment splitting in one place.
"""

from __future__ import annotations

import re
from typing import Final

SLASHES: Final[str] = "\\/"

_SLASH_RUN: Final[re.Pattern[str]] = re.compile(r"[\\/]+")

# Leading slashes, then the first component, then the delimiter after it.
_FIRST_DELIMITER: Final[re.Pattern[str]] = re.compile(r"^[\\/]*[^\\/]+([\\/])")


def has_mixed_slashes(path: str) -> bool:
    """Return True when ``path`` contains both backslashes and forward slashes."""

    return "\\" in path and "/" in path


def has_trailing_slash(path: str) -> bool:
    """Return True when the last character of ``path`` is a slash."""

    return bool(path) and path[-1] in SLASHES


def split_segments(path: str) -> list[str]:
    """Split ``path`` on runs of either slash, dropping empty tokens."""

    return [segment for segment in _SLASH_RUN.split(path) if segment]


def first_delimiter(path: str) -> str | None:
    """Return the slash that follows the first component of ``path``.

    Returns:
        str | None: ``"\\"`` or ``"/"``, or None when no component is followed
        by a slash.
    """
    match = _FIRST_DELIMITER.match(path)
    if match is None:
        return None
    return match.group(1)


__all__ = [
    "SLASHES",
    "first_delimiter",
    "has_mixed_slashes",
    "has_trailing_slash",
    "split_segments",
]
