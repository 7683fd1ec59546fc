"""Console rendering helpers for the CLI."""

from .result import ResultDisplay, path_object_to_dict

__all__ = ["ResultDisplay", "path_object_to_dict"]
