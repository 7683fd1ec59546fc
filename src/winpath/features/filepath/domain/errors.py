"""
Summary: Exception hierarchy for operational path failures.
Why: Let callers tell argument defects apart from structural exhaustion.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import FilePathType


class FilePathError(ValueError):
    """Base class for every failure raised by the filepath feature."""


class ArgumentCombinationError(FilePathError):
    """Raised when formatter or converter input is contradictory or incomplete."""

    def __init__(self, message: str, file_path_type: FilePathType | None = None) -> None:
        super().__init__(message)
        self.file_path_type: FilePathType | None = file_path_type


class PathJoinError(FilePathError):
    """Raised when a join request has no usable first fragment."""


class SegmentResolutionError(FilePathError):
    """Raised when a segment list climbs above its root with ``..``."""

    def __init__(self, segments: Sequence[str], path: str | None = None) -> None:
        target = path if path is not None else "/".join(segments)
        super().__init__(f"Too many '..' segments in path: {target}")
        self.segments: tuple[str, ...] = tuple(segments)
        self.path: str | None = path


__all__ = [
    "ArgumentCombinationError",
    "FilePathError",
    "PathJoinError",
    "SegmentResolutionError",
]
