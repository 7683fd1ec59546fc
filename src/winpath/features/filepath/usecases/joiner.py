"""
Summary: Concatenate path fragments under the first fragment's type and scheme.
Why: Build paths from pieces that may still hold unsubstituted placeholders.
"""

from __future__ import annotations

from collections.abc import Iterable

from winpath.features.filepath.domain.domain_name import DomainNameValidator
from winpath.features.filepath.domain.errors import PathJoinError
from winpath.features.filepath.domain.slashes import SLASHES, has_trailing_slash, split_segments
from winpath.platform.logging import logger

from .formatter import format_path_object
from .parser import parse_path


def join_path(
    fragments: Iterable[str],
    *,
    default_delimiter: str = "\\",
    domain_validator: DomainNameValidator | None = None,
) -> str:
    """Join ``fragments`` into a single path.

    The first fragment decides the type, scheme, drive letter, domain name and
    delimiter of the result. When it is not a Windows or UNC path its text is
    kept whole as the first segment, so tokens like ``$root`` survive. Every
    later fragment is split on slashes and appended. Only the last fragment
    decides whether the result ends with a slash. Segments are not validated.

    Args:
        fragments: Ordered path fragments.
        default_delimiter: Slash used when the first fragment has no known
            type and no slash of its own.
        domain_validator: Host name rules for classifying the first fragment.

    Returns:
        str: The joined path.

    Raises:
        PathJoinError: If there are no fragments or the first one is empty.
    """
    items = list(fragments)
    if not items:
        raise PathJoinError("Cannot join an empty sequence of fragments")
    first = items[0]
    if not first:
        raise PathJoinError("The first fragment of a join must not be empty")

    baseline = parse_path(first, domain_validator=domain_validator)
    if baseline.file_path_type.is_known:
        segments = list(baseline.segments or [])
    else:
        segments = [first.rstrip(SLASHES)]
        if baseline.delimiter is None:
            baseline.delimiter = default_delimiter

    for fragment in items[1:]:
        segments.extend(split_segments(fragment))

    baseline.segments = segments
    baseline.trailing_slash = has_trailing_slash(items[-1])

    joined = format_path_object(baseline)
    logger.debug(
        "Joined %d fragments into %s",
        len(items),
        joined,
        extra={
            "path_event": "filepath.join",
            "fragment_count": len(items),
            "target_path": joined,
            "file_path_type": baseline.file_path_type.value,
        },
    )
    return joined


__all__ = ["join_path"]
