"""Where: src/winpath/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Hand validated values to the CLI without repeating boundary checks.
Trade-offs: - Invalid values fall back to defaults with a warning instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass

from winpath.config.config import OUTPUT_FORMATS, Config
from winpath.platform.logging import logger

DEFAULT_DELIMITER: str = "\\"
DEFAULT_OUTPUT_FORMAT: str = "text"


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Validated values the CLI passes into the path operations."""

    default_delimiter: str
    output_format: str


def resolve_settings(app_config: Config) -> RuntimeSettings:
    """Validate ``app_config`` and substitute defaults for unusable values."""

    delimiter = app_config.default_delimiter
    if delimiter not in ("\\", "/"):
        logger.warning(
            "Invalid default_delimiter %r in configuration; using %r",
            delimiter,
            DEFAULT_DELIMITER,
        )
        delimiter = DEFAULT_DELIMITER

    output_format = (app_config.output_format or "").strip().lower()
    if output_format not in OUTPUT_FORMATS:
        logger.warning(
            "Invalid output_format %r in configuration; using %r",
            app_config.output_format,
            DEFAULT_OUTPUT_FORMAT,
        )
        output_format = DEFAULT_OUTPUT_FORMAT

    return RuntimeSettings(default_delimiter=delimiter, output_format=output_format)


__all__ = ["DEFAULT_DELIMITER", "DEFAULT_OUTPUT_FORMAT", "RuntimeSettings", "resolve_settings"]
