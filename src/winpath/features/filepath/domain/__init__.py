"""Domain rules for Windows and UNC path text."""

from .domain_name import DEFAULT_DOMAIN_VALIDATOR, DomainNameValidator, HostNameValidator
from .errors import (
    ArgumentCombinationError,
    FilePathError,
    PathJoinError,
    SegmentResolutionError,
)
from .extraction import UncParts, WindowsParts, extract_unc_parts, extract_windows_parts
from .file_name import diagnose_file_name, is_valid_file_name
from .models import FilePathType, PathObject, Scheme, ValidationOutcome
from .schemes import classify_scheme, match_prefix, strip_prefix
from .slashes import first_delimiter, has_mixed_slashes, has_trailing_slash, split_segments
from .validation import (
    classify_type,
    diagnose_fragment,
    diagnose_unc,
    diagnose_windows,
    is_valid_path,
    is_valid_unc,
    is_valid_windows,
    validate_fragment,
)

__all__ = [
    "ArgumentCombinationError",
    "DEFAULT_DOMAIN_VALIDATOR",
    "DomainNameValidator",
    "FilePathError",
    "FilePathType",
    "HostNameValidator",
    "PathJoinError",
    "PathObject",
    "Scheme",
    "SegmentResolutionError",
    "UncParts",
    "ValidationOutcome",
    "WindowsParts",
    "classify_scheme",
    "classify_type",
    "diagnose_file_name",
    "diagnose_fragment",
    "diagnose_unc",
    "diagnose_windows",
    "extract_unc_parts",
    "extract_windows_parts",
    "first_delimiter",
    "has_mixed_slashes",
    "has_trailing_slash",
    "is_valid_file_name",
    "is_valid_path",
    "is_valid_unc",
    "is_valid_windows",
    "match_prefix",
    "split_segments",
    "strip_prefix",
    "validate_fragment",
]
