"""
errkit — Severity Levels

Severity is orthogonal to the error code: INFO and WARNING are informational,
ERROR is the default recoverable level, FATAL is reserved for violated
invariants (the assertion layer always uses it).
"""

from __future__ import annotations

import enum


class SeverityLevel(int, enum.Enum):
    """How bad is it? Ordered INFO < WARNING < ERROR < FATAL."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    FATAL = 3

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)


def format_severity(value: int) -> str:
    """Render any integer as a severity name, ``SeverityLevel(<n>)`` when out of range."""
    try:
        return SeverityLevel(value).name
    except ValueError:
        return f"SeverityLevel({int(value)})"
