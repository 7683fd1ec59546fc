"""
Summary: Render path text from structured fields in any type and scheme.
Why: Invert parsing so edited PathObjects can be written back out.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from winpath.features.filepath.domain.errors import ArgumentCombinationError
from winpath.features.filepath.domain.models import FilePathType, PathObject, Scheme
from winpath.platform.logging import logger

LONG_PROVIDER_PREFIX: Final[str] = "Microsoft.PowerShell.Core\\FileSystem::"
SHORT_PROVIDER_PREFIX: Final[str] = "FileSystem::"


def _prefix_for(file_path_type: FilePathType, scheme: Scheme) -> str:
    if scheme is Scheme.FILE_URI:
        # UNC hosts bring their own double slash after "file:".
        return "file:///" if file_path_type is FilePathType.WINDOWS else "file:"
    if scheme is Scheme.SHORT_PREFIXED:
        return SHORT_PROVIDER_PREFIX
    if scheme is Scheme.LONG_PREFIXED:
        return LONG_PROVIDER_PREFIX
    return ""


def _check_arguments(
    file_path_type: FilePathType,
    scheme: Scheme | None,
    drive_letter: str | None,
    domain_name: str | None,
    delimiter: str | None,
) -> None:
    if file_path_type is FilePathType.UNC and not domain_name:
        raise ArgumentCombinationError("UNC paths require a domain name", file_path_type)
    if file_path_type is FilePathType.WINDOWS and not drive_letter:
        raise ArgumentCombinationError("Windows paths require a drive letter", file_path_type)

    if file_path_type.is_known:
        if delimiter is not None:
            raise ArgumentCombinationError(
                f"A delimiter cannot be set for {file_path_type.value} paths; "
                + "the scheme decides the slash",
                file_path_type,
            )
        return

    if scheme is not None:
        raise ArgumentCombinationError(
            "A scheme cannot be set for paths of unknown type", file_path_type
        )
    if delimiter is None or len(delimiter) != 1:
        raise ArgumentCombinationError(
            "Paths of unknown type require a single character delimiter", file_path_type
        )


def format_path(
    file_path_type: FilePathType,
    scheme: Scheme | None = None,
    *,
    drive_letter: str | None = None,
    domain_name: str | None = None,
    segments: Sequence[str] = (),
    trailing_slash: bool = False,
    delimiter: str | None = None,
) -> str:
    """Render a path string from its structured fields.

    Segment values are not validated, so placeholders meant for later
    substitution pass through unchanged.

    Args:
        file_path_type: Windows, UNC or Unknown. Ambiguous renders as Unknown.
        scheme: Notation for Windows and UNC paths; defaults to Plain. Must be
            None for Unknown paths.
        drive_letter: Drive for Windows paths, administrative share for UNC.
        domain_name: Host of UNC paths.
        segments: Path segments below the root.
        trailing_slash: Whether to end the path with a slash.
        delimiter: Slash for Unknown paths; must be None for known types.

    Returns:
        str: The rendered path.

    Raises:
        ArgumentCombinationError: If the fields contradict each other or a
            required field is missing.
    """
    _check_arguments(file_path_type, scheme, drive_letter, domain_name, delimiter)

    effective_scheme: Scheme | None = None
    if not file_path_type.is_known:
        assert delimiter is not None
        rendered = delimiter.join(segments)
        if trailing_slash:
            rendered += delimiter
    else:
        effective_scheme = scheme or Scheme.PLAIN
        slash = "/" if effective_scheme is Scheme.FILE_URI else "\\"
        prefix = _prefix_for(file_path_type, effective_scheme)

        if file_path_type is FilePathType.UNC:
            rendered = prefix + slash * 2 + str(domain_name)
            if drive_letter:
                rendered += slash + drive_letter + "$"
        else:
            rendered = prefix + str(drive_letter) + ":"

        # The root slash only appears when something follows it.
        if segments:
            rendered += slash + slash.join(segments)
        if trailing_slash:
            rendered += slash

    logger.debug(
        "Formatted %s",
        rendered,
        extra={
            "path_event": "filepath.format",
            "target_path": rendered,
            "file_path_type": file_path_type.value,
            "scheme": effective_scheme.value if effective_scheme else None,
        },
    )
    return rendered


def format_path_object(
    path_object: PathObject,
    *,
    file_path_type: FilePathType | None = None,
    scheme: Scheme | None = None,
    delimiter: str | None = None,
) -> str:
    """Render ``path_object``, optionally as another type or scheme.

    Args:
        path_object: Parsed or hand-built path fields.
        file_path_type: Target type; defaults to the object's own.
        scheme: Target scheme; defaults to the object's own for known types.
        delimiter: Slash for an Unknown target; defaults to the object's own.

    Returns:
        str: The rendered path.

    Raises:
        ArgumentCombinationError: If the object lacks what the target needs.
    """
    target_type = file_path_type or path_object.file_path_type
    if target_type.is_known:
        target_scheme = scheme or path_object.scheme
        target_delimiter = None
    else:
        target_scheme = scheme
        target_delimiter = delimiter or path_object.delimiter

    return format_path(
        target_type,
        target_scheme,
        drive_letter=path_object.drive_letter,
        domain_name=path_object.domain_name if target_type is FilePathType.UNC else None,
        segments=path_object.segments or (),
        trailing_slash=bool(path_object.trailing_slash),
        delimiter=target_delimiter,
    )


__all__ = ["LONG_PROVIDER_PREFIX", "SHORT_PROVIDER_PREFIX", "format_path", "format_path_object"]
