"""Parse, validate, convert, join and resolve Windows and UNC path strings."""

from winpath.features.filepath import (
    ArgumentCombinationError,
    FilePathError,
    FilePathType,
    PathJoinError,
    PathObject,
    Scheme,
    SegmentResolutionError,
    classify_scheme,
    classify_type,
    format_path,
    is_valid_path,
    join_path,
    parse_path,
    reformat_path,
    resolve_path,
    resolve_segments,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentCombinationError",
    "FilePathError",
    "FilePathType",
    "PathJoinError",
    "PathObject",
    "Scheme",
    "SegmentResolutionError",
    "classify_scheme",
    "classify_type",
    "format_path",
    "is_valid_path",
    "join_path",
    "parse_path",
    "reformat_path",
    "resolve_path",
    "resolve_segments",
]
