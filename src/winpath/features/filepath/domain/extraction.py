"""
Summary: Pull drive letter, domain name and local path out of path text.
Why: Separate substring extraction from the rules that judge each part.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from .schemes import strip_prefix

_WINDOWS_ROOT: Final[re.Pattern[str]] = re.compile(r"^([A-Za-z]*):")
_UNC_DOMAIN: Final[re.Pattern[str]] = re.compile(r"^[\\/]{2}([^\\/]*)")
# Administrative share marker, e.g. ``\c$`` followed by a slash or the end.
_UNC_SHARE: Final[re.Pattern[str]] = re.compile(r"^[\\/]([A-Za-z])\$(?=[\\/]|$)")


@dataclass(slots=True, frozen=True)
class WindowsParts:
    """Substrings of a drive-rooted path; None means the part was not found."""

    drive_letter: str | None
    local_path: str | None


@dataclass(slots=True, frozen=True)
class UncParts:
    """Substrings of a network path; None means the part was not found."""

    domain_name: str | None
    drive_letter: str | None
    local_path: str | None


def extract_windows_parts(path: str) -> WindowsParts:
    """Split prefix-stripped ``path`` at its drive colon.

    ``c:\\dir`` gives ``("c", "\\dir")``; ``:dir`` gives ``("", "dir")``;
    text without a leading letter run and colon gives ``(None, None)``.
    """
    stripped = strip_prefix(path)
    match = _WINDOWS_ROOT.match(stripped)
    if match is None:
        return WindowsParts(drive_letter=None, local_path=None)
    return WindowsParts(drive_letter=match.group(1), local_path=stripped[match.end():])


def extract_unc_parts(path: str) -> UncParts:
    """Split prefix-stripped ``path`` into host, share marker and remainder."""

    stripped = strip_prefix(path)
    domain_match = _UNC_DOMAIN.match(stripped)
    if domain_match is None:
        return UncParts(domain_name=None, drive_letter=None, local_path=None)

    remainder = stripped[domain_match.end():]
    share_match = _UNC_SHARE.match(remainder)
    if share_match is None:
        return UncParts(
            domain_name=domain_match.group(1),
            drive_letter=None,
            local_path=remainder,
        )
    return UncParts(
        domain_name=domain_match.group(1),
        drive_letter=share_match.group(1),
        local_path=remainder[share_match.end():],
    )


def extract_drive_letter(path: str) -> str | None:
    """Return the drive letter of a Windows-shaped path, or None."""

    return extract_windows_parts(path).drive_letter


def extract_domain_name(path: str) -> str | None:
    """Return the host of a UNC-shaped path, or None."""

    return extract_unc_parts(path).domain_name


__all__ = [
    "UncParts",
    "WindowsParts",
    "extract_domain_name",
    "extract_drive_letter",
    "extract_unc_parts",
    "extract_windows_parts",
]
