"""
Summary: Value types describing classified Windows and UNC path strings.
Why: Give parse, format, join and resolve a single shared vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FilePathType(str, Enum):
    """Represent the structural family a path string belongs to."""

    WINDOWS = "windows"
    UNC = "unc"
    UNKNOWN = "unknown"
    AMBIGUOUS = "ambiguous"

    @property
    def is_known(self) -> bool:
        """Return whether the type renders with a drive or domain root."""

        return self in (FilePathType.WINDOWS, FilePathType.UNC)

    @staticmethod
    def from_user_input(value: str) -> "FilePathType":
        """Translate raw CLI input into the matching path type."""

        normalized = value.strip().lower()
        for path_type in FilePathType:
            if path_type.value == normalized:
                return path_type
        valid = ", ".join(p.value for p in FilePathType if p is not FilePathType.AMBIGUOUS)
        msg = f"Unsupported path type '{value}'. Valid options: {valid}"
        raise ValueError(msg)


class Scheme(str, Enum):
    """Represent the textual notation a Windows or UNC path is written in."""

    PLAIN = "plain"
    FILE_URI = "file-uri"
    SHORT_PREFIXED = "short-prefixed"
    LONG_PREFIXED = "long-prefixed"

    @staticmethod
    def from_user_input(value: str) -> "Scheme":
        """Translate raw CLI input into the matching scheme."""

        normalized = value.strip().lower().replace("_", "-")
        for scheme in Scheme:
            if scheme.value == normalized:
                return scheme
        valid = ", ".join(s.value for s in Scheme)
        msg = f"Unsupported scheme '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(slots=True, frozen=True)
class ValidationOutcome:
    """Result of a validation check with the reason it failed, if it did."""

    valid: bool
    reason: str | None = None
    detail: str | None = None

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def ok(cls) -> "ValidationOutcome":
        return cls(valid=True)

    @classmethod
    def fail(cls, reason: str, detail: str | None = None) -> "ValidationOutcome":
        return cls(valid=False, reason=reason, detail=detail)


@dataclass(slots=True)
class PathObject:
    """Structured representation of a path string.

    ``None`` marks a field that was not found in the source text, while an
    empty string marks a field that was found but had no content. Windows
    objects always carry ``drive_letter``; UNC objects always carry
    ``domain_name``; Unknown objects carry ``delimiter`` instead of ``scheme``.
    """

    original_string: str
    file_path_type: FilePathType
    scheme: Scheme | None = None
    drive_letter: str | None = None
    domain_name: str | None = None
    local_path: str | None = None
    segments: list[str] | None = None
    trailing_slash: bool | None = None
    delimiter: str | None = None


__all__ = ["FilePathType", "PathObject", "Scheme", "ValidationOutcome"]
