"""
Summary: One-shot conversion of path text between types and schemes.
Why: Callers often hold a string and only want it in another notation.
"""

from __future__ import annotations

from winpath.features.filepath.domain.domain_name import DomainNameValidator
from winpath.features.filepath.domain.errors import ArgumentCombinationError
from winpath.features.filepath.domain.models import FilePathType, Scheme
from winpath.platform.logging import logger

from .formatter import format_path_object
from .parser import parse_path


def reformat_path(
    path: str,
    file_path_type: FilePathType | None = None,
    scheme: Scheme | None = None,
    *,
    delimiter: str | None = None,
    domain_validator: DomainNameValidator | None = None,
) -> str:
    """Parse ``path`` and render it again as the requested type and scheme.

    Args:
        path: Path text in any supported scheme.
        file_path_type: Target type; defaults to the parsed type.
        scheme: Target scheme; defaults to the parsed scheme for known types.
        delimiter: Slash for an Unknown target; defaults to the parsed one.
        domain_validator: Host name rules for UNC classification.

    Returns:
        str: The converted path.

    Raises:
        ArgumentCombinationError: If the parsed path lacks the domain name or
            drive letter the target type needs, or the target fields conflict.
    """
    path_object = parse_path(path, domain_validator=domain_validator)
    target_type = file_path_type or path_object.file_path_type

    if target_type is FilePathType.UNC and path_object.domain_name is None:
        raise ArgumentCombinationError(
            f"Cannot convert '{path}' to a UNC path: it has no domain name", target_type
        )
    if target_type is FilePathType.WINDOWS and path_object.drive_letter is None:
        raise ArgumentCombinationError(
            f"Cannot convert '{path}' to a Windows path: it has no drive letter", target_type
        )

    converted = format_path_object(
        path_object,
        file_path_type=target_type,
        scheme=scheme,
        delimiter=delimiter,
    )
    logger.debug(
        "Converted %s to %s",
        path,
        converted,
        extra={
            "path_event": "filepath.reformat",
            "source_path": path,
            "target_path": converted,
            "file_path_type": target_type.value,
        },
    )
    return converted


__all__ = ["reformat_path"]
