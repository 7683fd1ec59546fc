"""Path operations built on the filepath domain rules."""

from .converter import reformat_path
from .formatter import format_path, format_path_object
from .joiner import join_path
from .parser import parse_path
from .resolver import resolve_path, resolve_segments

__all__ = [
    "format_path",
    "format_path_object",
    "join_path",
    "parse_path",
    "reformat_path",
    "resolve_path",
    "resolve_segments",
]
