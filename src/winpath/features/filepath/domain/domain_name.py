"""
Summary: Host name validation used for the server part of UNC paths.
Why: Allow callers to supply their own rules while shipping a sane default.
"""

from __future__ import annotations

import re
from typing import ClassVar, Protocol, final, runtime_checkable


@runtime_checkable
class DomainNameValidator(Protocol):
    """Port deciding whether a UNC server name is acceptable."""

    def is_valid(self, domain_name: str) -> bool:
        """Return True when ``domain_name`` may be used as a UNC host."""
        ...


@final
class HostNameValidator:
    """RFC 1123 host names: dot separated labels of letters, digits and hyphens."""

    MAX_LENGTH: ClassVar[int] = 253
    LABEL: ClassVar[re.Pattern[str]] = re.compile(
        r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?$"
    )

    def is_valid(self, domain_name: str) -> bool:
        if not domain_name or len(domain_name) > self.MAX_LENGTH:
            return False
        # A single trailing dot denotes a fully qualified name.
        name = domain_name[:-1] if domain_name.endswith(".") else domain_name
        return all(self.LABEL.match(label) for label in name.split("."))


DEFAULT_DOMAIN_VALIDATOR: DomainNameValidator = HostNameValidator()


__all__ = ["DEFAULT_DOMAIN_VALIDATOR", "DomainNameValidator", "HostNameValidator"]
