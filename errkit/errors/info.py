"""
errkit — Error Info

Auxiliary diagnostic metadata attached to a structured error: suggestions for
the user, the creation timestamp, a free-form context mapping, a frame-label
stack trace and an optional wrapped inner error.

An Info is exclusively owned by one Err. When ownership moves (wrapping,
merging) the receiver gets a ``copy()`` so the two never share mutable
collections afterwards.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from errkit.errors.stack import StackTrace
from errkit.primitives.common import Identified, utc_now


class Info(Identified):
    """Diagnostic bag carried by an Err. ``id`` correlates log events."""

    suggestions: list[str] = Field(default_factory=list)
    timestamp: datetime | None = Field(default_factory=utc_now)
    context: dict[str, Any] = Field(default_factory=dict)
    stack_trace: StackTrace | None = None
    inner: BaseException | None = None

    def copy(self) -> Info:  # type: ignore[override]
        """
        Independent copy: fresh suggestion list, context dict and stack trace.
        ``inner``, ``timestamp`` and ``id`` are carried over as-is; the id
        follows the metadata, so callers that keep both sides alive assign a
        new one.
        """
        return Info(
            id=self.id,
            suggestions=list(self.suggestions),
            timestamp=self.timestamp,
            context=dict(self.context),
            stack_trace=self.stack_trace.copy() if self.stack_trace is not None else None,
            inner=self.inner,
        )

    def has_details(self) -> bool:
        return (
            self.timestamp is not None
            or bool(self.suggestions)
            or bool(self.context)
            or self.stack_trace is not None
            or self.inner is not None
        )


def new_info() -> Info:
    """Fresh Info stamped with the current UTC time."""
    return Info()
