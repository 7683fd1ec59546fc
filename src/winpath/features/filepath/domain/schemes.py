"""
Summary: Provider and URI prefix stripping plus scheme classification.
Why: Reduce every notation to the plain text the part extractors understand.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from .models import Scheme


@dataclass(slots=True, frozen=True)
class PrefixRule:
    """One entry of the ordered prefix table."""

    name: str
    scheme: Scheme
    pattern: re.Pattern[str]


@dataclass(slots=True, frozen=True)
class PrefixMatch:
    """Which rule matched a path and the text left once its prefix is removed."""

    rule: PrefixRule
    stripped: str


# Order matters: the first matching rule wins. Each pattern only consumes the
# part of the prefix that has to go, so ``file:///c:`` keeps ``c:`` and
# ``file://server`` keeps ``//server``.
PREFIX_RULES: Final[tuple[PrefixRule, ...]] = (
    PrefixRule(
        name="short-provider",
        scheme=Scheme.SHORT_PREFIXED,
        pattern=re.compile(r"^FileSystem::", re.IGNORECASE),
    ),
    PrefixRule(
        name="long-provider",
        scheme=Scheme.LONG_PREFIXED,
        pattern=re.compile(r"^Microsoft\.PowerShell\.Core\\FileSystem::", re.IGNORECASE),
    ),
    PrefixRule(
        name="file-uri-drive",
        scheme=Scheme.FILE_URI,
        pattern=re.compile(r"^file:///(?=[A-Za-z]:)", re.IGNORECASE),
    ),
    PrefixRule(
        name="file-uri-host",
        scheme=Scheme.FILE_URI,
        pattern=re.compile(r"^file:(?=//(?!/))", re.IGNORECASE),
    ),
)

_PLAIN_WINDOWS: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:")
_PLAIN_UNC: Final[re.Pattern[str]] = re.compile(r"^[\\/]{2}[A-Za-z0-9]")


def match_prefix(path: str) -> PrefixMatch | None:
    """Return the first prefix rule matching ``path``, or None."""

    for rule in PREFIX_RULES:
        match = rule.pattern.match(path)
        if match is not None:
            return PrefixMatch(rule=rule, stripped=path[match.end():])
    return None


def strip_prefix(path: str) -> str:
    """Remove a recognised provider or URI prefix; unknown text is unchanged."""

    matched = match_prefix(path)
    if matched is None:
        return path
    return matched.stripped


def is_plain(path: str) -> bool:
    """Return whether unprefixed ``path`` starts like a drive or a UNC host."""

    return bool(_PLAIN_WINDOWS.match(path) or _PLAIN_UNC.match(path))


def classify_scheme(path: str) -> Scheme | None:
    """Classify the notation of ``path``.

    Returns:
        Scheme | None: The matching scheme, or None when the text uses no
        recognised notation.
    """
    matched = match_prefix(path)
    if matched is not None:
        return matched.rule.scheme
    if is_plain(path):
        return Scheme.PLAIN
    return None


__all__ = [
    "PREFIX_RULES",
    "PrefixMatch",
    "PrefixRule",
    "classify_scheme",
    "is_plain",
    "match_prefix",
    "strip_prefix",
]
