"""
Summary: Fragment and whole-path validation with Windows/UNC classification.
Why: Decide which structural family a string belongs to before it is modelled.
"""

from __future__ import annotations

import re
from typing import Final

from .domain_name import DEFAULT_DOMAIN_VALIDATOR, DomainNameValidator
from .extraction import extract_unc_parts, extract_windows_parts
from .file_name import diagnose_file_name
from .models import FilePathType, ValidationOutcome
from .schemes import strip_prefix
from .slashes import has_mixed_slashes, split_segments

MAX_PATH_LENGTH: Final[int] = 255

_SINGLE_LETTER: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]$")


def diagnose_fragment(path: str) -> ValidationOutcome:
    """Check a relative path fragment segment by segment.

    A depth counter starts at zero, drops by one on ``..`` and rises by one
    on any other segment. The fragment fails when the counter goes negative,
    when it mixes slash styles, or when a regular segment is not a legal
    file name.
    """
    if has_mixed_slashes(path):
        return ValidationOutcome.fail("mixed slashes", path)

    depth = 0
    for segment in split_segments(path):
        if segment == "..":
            depth -= 1
            if depth < 0:
                return ValidationOutcome.fail("'..' climbs above the fragment root", path)
            continue

        depth += 1
        if segment == ".":
            continue

        outcome = diagnose_file_name(segment)
        if not outcome.valid:
            return ValidationOutcome.fail(f"invalid segment: {outcome.reason}", segment)

    return ValidationOutcome.ok()


def validate_fragment(path: str) -> bool:
    """Return whether ``path`` is a structurally valid relative fragment."""

    return diagnose_fragment(path).valid


def _diagnose_common(stripped: str) -> ValidationOutcome | None:
    if has_mixed_slashes(stripped):
        return ValidationOutcome.fail("mixed slashes", stripped)
    if len(stripped) > MAX_PATH_LENGTH:
        return ValidationOutcome.fail(f"path longer than {MAX_PATH_LENGTH} characters")
    return None


def _diagnose_drive_letter(drive_letter: str) -> ValidationOutcome | None:
    if not _SINGLE_LETTER.match(drive_letter):
        return ValidationOutcome.fail("drive letter must be a single letter", drive_letter)
    return None


def diagnose_windows(path: str) -> ValidationOutcome:
    """Check whether ``path`` is a valid drive-rooted Windows path."""

    stripped = strip_prefix(path)
    failure = _diagnose_common(stripped)
    if failure is not None:
        return failure

    parts = extract_windows_parts(path)
    if parts.drive_letter is None:
        return ValidationOutcome.fail("missing drive letter")
    failure = _diagnose_drive_letter(parts.drive_letter)
    if failure is not None:
        return failure

    if parts.local_path is not None:
        return diagnose_fragment(parts.local_path)
    return ValidationOutcome.ok()


def diagnose_unc(
    path: str,
    domain_validator: DomainNameValidator | None = None,
) -> ValidationOutcome:
    """Check whether ``path`` is a valid UNC path.

    Args:
        path: Path text in any supported scheme.
        domain_validator: Host name rules; defaults to RFC 1123 host names.

    Returns:
        ValidationOutcome: Success, or the first failed rule.
    """
    validator = domain_validator or DEFAULT_DOMAIN_VALIDATOR

    stripped = strip_prefix(path)
    failure = _diagnose_common(stripped)
    if failure is not None:
        return failure

    parts = extract_unc_parts(path)
    if parts.domain_name is None:
        return ValidationOutcome.fail("missing domain name")
    if not validator.is_valid(parts.domain_name):
        return ValidationOutcome.fail("invalid domain name", parts.domain_name)

    if parts.drive_letter is not None:
        failure = _diagnose_drive_letter(parts.drive_letter)
        if failure is not None:
            return failure

    if parts.local_path is not None:
        return diagnose_fragment(parts.local_path)
    return ValidationOutcome.ok()


def is_valid_windows(path: str) -> bool:
    """Return whether ``path`` is a valid Windows path."""

    return diagnose_windows(path).valid


def is_valid_unc(path: str, domain_validator: DomainNameValidator | None = None) -> bool:
    """Return whether ``path`` is a valid UNC path."""

    return diagnose_unc(path, domain_validator).valid


def classify_type(
    path: str,
    domain_validator: DomainNameValidator | None = None,
) -> FilePathType:
    """Classify ``path`` as Windows, UNC, Ambiguous (both) or Unknown (neither)."""

    windows = is_valid_windows(path)
    unc = is_valid_unc(path, domain_validator)
    if windows and unc:
        return FilePathType.AMBIGUOUS
    if windows:
        return FilePathType.WINDOWS
    if unc:
        return FilePathType.UNC
    return FilePathType.UNKNOWN


def is_valid_path(path: str, domain_validator: DomainNameValidator | None = None) -> bool:
    """Return whether ``path`` is unambiguously a valid Windows or UNC path."""

    return classify_type(path, domain_validator).is_known


__all__ = [
    "MAX_PATH_LENGTH",
    "classify_type",
    "diagnose_fragment",
    "diagnose_unc",
    "diagnose_windows",
    "is_valid_path",
    "is_valid_unc",
    "is_valid_windows",
    "validate_fragment",
]
