# Path: `src/winpath/features/filepath/__init__.py`
# Summary: Export filepath feature domain and use case symbols.
# Why: Provide a stable import surface for the CLI and tests.

from .domain import (
    DEFAULT_DOMAIN_VALIDATOR,
    ArgumentCombinationError,
    DomainNameValidator,
    FilePathError,
    FilePathType,
    HostNameValidator,
    PathJoinError,
    PathObject,
    Scheme,
    SegmentResolutionError,
    ValidationOutcome,
    classify_scheme,
    classify_type,
    diagnose_file_name,
    diagnose_fragment,
    diagnose_unc,
    diagnose_windows,
    first_delimiter,
    has_mixed_slashes,
    has_trailing_slash,
    is_valid_file_name,
    is_valid_path,
    is_valid_unc,
    is_valid_windows,
    split_segments,
    strip_prefix,
    validate_fragment,
)
from .usecases import (
    format_path,
    format_path_object,
    join_path,
    parse_path,
    reformat_path,
    resolve_path,
    resolve_segments,
)

__all__ = [
    "DEFAULT_DOMAIN_VALIDATOR",
    "ArgumentCombinationError",
    "DomainNameValidator",
    "FilePathError",
    "FilePathType",
    "HostNameValidator",
    "PathJoinError",
    "PathObject",
    "Scheme",
    "SegmentResolutionError",
    "ValidationOutcome",
    "classify_scheme",
    "classify_type",
    "diagnose_file_name",
    "diagnose_fragment",
    "diagnose_unc",
    "diagnose_windows",
    "first_delimiter",
    "format_path",
    "format_path_object",
    "has_mixed_slashes",
    "has_trailing_slash",
    "is_valid_file_name",
    "is_valid_path",
    "is_valid_unc",
    "is_valid_windows",
    "join_path",
    "parse_path",
    "reformat_path",
    "resolve_path",
    "resolve_segments",
    "split_segments",
    "strip_prefix",
    "validate_fragment",
]
