"""src/winpath/ui/cli/display/result.py
What: Render command results for the winpath CLI.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any, final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from winpath.features.filepath import FilePathType, PathObject, Scheme, ValidationOutcome


def path_object_to_dict(path_object: PathObject) -> dict[str, Any]:
    """Convert ``path_object`` into JSON-ready primitives.

    Absent fields are kept as ``None`` so they stay distinct from empty strings.
    """
    return {
        "original_string": path_object.original_string,
        "file_path_type": path_object.file_path_type.value,
        "scheme": path_object.scheme.value if path_object.scheme else None,
        "drive_letter": path_object.drive_letter,
        "domain_name": path_object.domain_name,
        "local_path": path_object.local_path,
        "segments": path_object.segments,
        "trailing_slash": path_object.trailing_slash,
        "delimiter": path_object.delimiter,
    }


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display.

        Args:
            console: Console to print to; defaults to standard output.
        """
        self.console = console or Console()

    def _print_plain(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def show_path(self, path: str) -> None:
        """Print a rendered path exactly as produced."""

        self._print_plain(path)

    def show_segments(self, segments: Sequence[str]) -> None:
        """Print one segment per line."""

        for segment in segments:
            self._print_plain(segment)

    def show_classification(self, file_path_type: FilePathType, scheme: Scheme | None) -> None:
        """Print the type and scheme of a path."""

        scheme_label = scheme.value if scheme else "unknown"
        self._print_plain(f"type: {file_path_type.value}")
        self._print_plain(f"scheme: {scheme_label}")

    def show_validation(self, outcome: ValidationOutcome) -> None:
        """Print ``valid`` or the reason validation failed."""

        if outcome.valid:
            self._print_plain("valid")
            return
        message = f"invalid: {outcome.reason}"
        if outcome.detail:
            message += f" ({outcome.detail})"
        self._print_plain(message)

    def show_path_object(self, path_object: PathObject, output_format: str = "text") -> None:
        """Print the fields of ``path_object`` as a table or as JSON."""

        fields = path_object_to_dict(path_object)
        if output_format == "json":
            self._print_plain(json.dumps(fields, ensure_ascii=False))
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Field")
        table.add_column("Value", overflow="fold")
        for name, value in fields.items():
            table.add_row(name, Text("<absent>" if value is None else repr(value)))
        self.console.print(table)
