"""
errkit — Stack Trace

A stack trace here is an ordered list of human-readable frame labels that
call sites append as an error travels outward. It is not a Python traceback.
"""

from __future__ import annotations

from pydantic import Field

from errkit.primitives.common import ErrkitBaseModel

FRAME_SEPARATOR = " <- "


class StackTrace(ErrkitBaseModel):
    """
    Frames in the order they were pushed. The first frame is the innermost
    call, so rendering in append order reads from the failure point outward.

    Invariant: every stored frame is non-empty and whitespace-trimmed.
    """

    frames: list[str] = Field(default_factory=list)

    @classmethod
    def of(cls, frame: str) -> StackTrace:
        trace = cls()
        trace.push(frame)
        return trace

    def push(self, frame: str) -> None:
        """Append ``frame``. Empty or whitespace-only labels are ignored."""
        frame = frame.strip()
        if not frame:
            return
        self.frames.append(frame)

    def render(self, separator: str = FRAME_SEPARATOR) -> str:
        return separator.join(self.frames)

    def copy(self) -> StackTrace:  # type: ignore[override]
        return StackTrace(frames=list(self.frames))

    def __str__(self) -> str:
        return self.render()
