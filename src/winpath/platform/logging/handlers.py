"""Rich console handler for structured path events.

Where: platform/logging/handlers.py
What: Render ``path_event`` log records with icons and coloured separators.
Why: Keep console output readable when many paths are converted in a row.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathEventRichHandler(RichHandler):
    """Rich handler that highlights path separators in path events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "filepath.parse": ("🔍", "cyan"),
        "filepath.format": ("🧩", "blue"),
        "filepath.reformat": ("🔁", "magenta"),
        "filepath.join": ("🔗", "green"),
        "filepath.resolve": ("🧭", "green"),
        "filepath.error": ("⛔", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "filepath.parse": "Parsed ",
        "filepath.format": "Formatted ",
        "filepath.reformat": "Converted ",
        "filepath.join": "Joined ",
        "filepath.resolve": "Resolved ",
        "filepath.error": "Failed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and compact rendering.

        Paths with more than ``_PATH_SEGMENT_LIMIT`` body segments keep their
        anchor and the last segments, joined by an ellipsis.
        """
        pure_path = self._to_pure_path(path)
        is_windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if not truncated:
            return self._style_path_string(path, separator)

        body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
        display_string = anchor.rstrip("\\/") + separator if anchor else ""
        display_string += "…" + separator + separator.join(body_parts)
        if path[-1:] in ("\\", "/"):
            display_string += separator
        return self._style_path_string(display_string, separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_path_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured path events with dedicated styling."""

        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, ""))

        fragment_count = getattr(record, "fragment_count", None)
        if event == "filepath.join" and isinstance(fragment_count, int):
            _ = body.append(f"{fragment_count} fragments")

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))
        if target_path:
            if source_path or isinstance(fragment_count, int):
                _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path)))

        details: list[str] = []
        file_path_type = getattr(record, "file_path_type", None)
        if file_path_type:
            details.append(f"type={file_path_type}")
        scheme = getattr(record, "scheme", None)
        if scheme:
            details.append(f"scheme={scheme}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path events."""

        event_text = self._render_path_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PathEventRichHandler"]
