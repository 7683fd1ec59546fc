"""
Summary: Build the structured PathObject for a path string.
Why: Give formatting, joining and resolving one canonical starting point.
"""

from __future__ import annotations

from winpath.features.filepath.domain.domain_name import DomainNameValidator
from winpath.features.filepath.domain.extraction import (
    extract_unc_parts,
    extract_windows_parts,
)
from winpath.features.filepath.domain.models import FilePathType, PathObject
from winpath.features.filepath.domain.schemes import classify_scheme
from winpath.features.filepath.domain.slashes import (
    first_delimiter,
    has_trailing_slash,
    split_segments,
)
from winpath.features.filepath.domain.validation import classify_type
from winpath.platform.logging import logger


def parse_path(
    path: str,
    *,
    domain_validator: DomainNameValidator | None = None,
) -> PathObject:
    """Classify ``path`` and break it into its structured fields.

    Windows and UNC paths get their drive letter, domain name, local path,
    segments and trailing slash flag. Anything else is kept as a plain list
    of segments plus the delimiter it was written with.

    Args:
        path: Path text in any supported scheme.
        domain_validator: Host name rules for UNC classification.

    Returns:
        PathObject: Structured representation of ``path``.
    """
    file_path_type = classify_type(path, domain_validator)

    if file_path_type is FilePathType.WINDOWS:
        windows_parts = extract_windows_parts(path)
        path_object = PathObject(
            original_string=path,
            file_path_type=file_path_type,
            scheme=classify_scheme(path),
            drive_letter=windows_parts.drive_letter,
            local_path=windows_parts.local_path,
        )
    elif file_path_type is FilePathType.UNC:
        unc_parts = extract_unc_parts(path)
        path_object = PathObject(
            original_string=path,
            file_path_type=file_path_type,
            scheme=classify_scheme(path),
            drive_letter=unc_parts.drive_letter,
            domain_name=unc_parts.domain_name,
            local_path=unc_parts.local_path,
        )
    else:
        path_object = PathObject(
            original_string=path,
            file_path_type=file_path_type,
            segments=split_segments(path),
            trailing_slash=has_trailing_slash(path),
            delimiter=first_delimiter(path),
        )

    if path_object.local_path is not None:
        path_object.segments = split_segments(path_object.local_path)
        path_object.trailing_slash = has_trailing_slash(path_object.local_path)

    logger.debug(
        "Parsed %s as %s",
        path,
        file_path_type.value,
        extra={
            "path_event": "filepath.parse",
            "source_path": path,
            "file_path_type": file_path_type.value,
            "scheme": path_object.scheme.value if path_object.scheme else None,
        },
    )
    return path_object


__all__ = ["parse_path"]
