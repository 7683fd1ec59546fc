"""
Summary: Legal file name checks for a single Windows path segment.
Why: Reject characters, device names and lengths the Windows shell refuses.
"""

from __future__ import annotations

import re
from typing import Final

from .models import ValidationOutcome

MAX_FILE_NAME_LENGTH: Final[int] = 255

INVALID_CHARACTERS: Final[re.Pattern[str]] = re.compile(r'[<>:"/\\|?*]')

ALL_DOTS: Final[re.Pattern[str]] = re.compile(r"^\.+$")

# Device names stay reserved whatever extension follows them (``nul.txt``).
RESERVED_DEVICE_NAME: Final[re.Pattern[str]] = re.compile(
    r"^(?:PRN|AUX|NUL|CON|COM[1-9]|LPT[1-9])(?:\.|$)",
    re.IGNORECASE,
)


def diagnose_file_name(name: str) -> ValidationOutcome:
    """Check ``name`` and report the first rule it breaks.

    Args:
        name: A single path segment without delimiters.

    Returns:
        ValidationOutcome: ``valid`` is True when the name is legal, otherwise
        ``reason`` names the broken rule and ``detail`` carries the name.
    """
    if not name:
        return ValidationOutcome.fail("empty file name", name)

    match = INVALID_CHARACTERS.search(name)
    if match is not None:
        return ValidationOutcome.fail(f"invalid character {match.group(0)!r}", name)

    if ALL_DOTS.match(name):
        return ValidationOutcome.fail("name consists only of dots", name)

    if RESERVED_DEVICE_NAME.match(name):
        return ValidationOutcome.fail("reserved device name", name)

    if len(name) > MAX_FILE_NAME_LENGTH:
        return ValidationOutcome.fail(
            f"name longer than {MAX_FILE_NAME_LENGTH} characters", name
        )

    return ValidationOutcome.ok()


def is_valid_file_name(name: str) -> bool:
    """Return whether ``name`` is a legal Windows file name."""

    return diagnose_file_name(name).valid


__all__ = ["MAX_FILE_NAME_LENGTH", "diagnose_file_name", "is_valid_file_name"]
