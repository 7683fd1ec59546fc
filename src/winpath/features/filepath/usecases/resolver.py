"""
Summary: Collapse "." and ".." segments in segment lists and whole paths.
Why: Produce canonical paths without touching the filesystem.
"""

from __future__ import annotations

from collections.abc import Iterable

from winpath.features.filepath.domain.domain_name import DomainNameValidator
from winpath.features.filepath.domain.errors import SegmentResolutionError
from winpath.platform.logging import logger

from .formatter import format_path_object
from .parser import parse_path


def resolve_segments(segments: Iterable[str]) -> list[str]:
    """Apply ``.`` and ``..`` to an ordered segment list.

    Args:
        segments: Segments in path order.

    Returns:
        list[str]: Segments with ``.`` dropped and each ``..`` cancelling the
        segment before it.

    Raises:
        SegmentResolutionError: If a ``..`` has nothing left to cancel.
    """
    original = list(segments)
    resolved: list[str] = []
    for segment in original:
        if segment == ".":
            continue
        if segment == "..":
            if not resolved:
                raise SegmentResolutionError(original)
            _ = resolved.pop()
            continue
        resolved.append(segment)
    return resolved


def resolve_path(
    path: str,
    *,
    default_delimiter: str = "\\",
    domain_validator: DomainNameValidator | None = None,
) -> str:
    """Resolve ``.`` and ``..`` in ``path`` and render it in its own notation.

    Args:
        path: Path text in any supported scheme.
        default_delimiter: Slash for Unknown paths that contain none.
        domain_validator: Host name rules for UNC classification.

    Returns:
        str: The resolved path.

    Raises:
        SegmentResolutionError: If ``path`` climbs above its root.
    """
    path_object = parse_path(path, domain_validator=domain_validator)
    try:
        path_object.segments = resolve_segments(path_object.segments or [])
    except SegmentResolutionError as e:
        logger.debug(
            "Cannot resolve %s",
            path,
            extra={
                "path_event": "filepath.error",
                "source_path": path,
                "error_message": "too many '..' segments",
            },
        )
        raise SegmentResolutionError(e.segments, path=path) from e

    if not path_object.file_path_type.is_known and path_object.delimiter is None:
        path_object.delimiter = default_delimiter

    resolved = format_path_object(path_object)
    logger.debug(
        "Resolved %s to %s",
        path,
        resolved,
        extra={
            "path_event": "filepath.resolve",
            "source_path": path,
            "target_path": resolved,
        },
    )
    return resolved


__all__ = ["resolve_path", "resolve_segments"]
