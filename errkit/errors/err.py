"""
errkit — Structured Error

``Err`` combines a severity, a typed code, a message and an owned ``Info``.
It is an ordinary exception: return it as a value for the caller to inspect,
or raise it (see ``errkit.errors.display.panic``).

Mutators exist both as methods and as module functions. The functions accept
``None`` and do nothing, so call sites holding an optional error need no
presence check of their own.
"""

from __future__ import annotations

from typing import Any

from errkit.errors.codes import ErrorCoder
from errkit.errors.info import Info, new_info
from errkit.errors.severity import SeverityLevel, format_severity
from errkit.errors.stack import StackTrace

NO_MESSAGE = "[no message was provided]"
GENERIC_MESSAGE = "something went wrong"


class Err(Exception):
    """A generalized, structured error."""

    def __init__(
        self,
        code: ErrorCoder,
        message: str = "",
        severity: SeverityLevel = SeverityLevel.ERROR,
        info: Info | None = None,
    ) -> None:
        super().__init__(message)
        self._code = code
        self.severity = severity
        self.message = message
        self.info = info

    @property
    def code(self) -> ErrorCoder:
        return self._code

    @property
    def inner(self) -> BaseException | None:
        return self.info.inner if self.info is not None else None

    def __str__(self) -> str:
        # Must stay on one line so it composes inside other text.
        msg = " ".join((self.message or NO_MESSAGE).splitlines())
        return f"[{format_severity(self.severity)}] {self.code}: {msg}"

    def __repr__(self) -> str:
        return (
            f"Err(severity={format_severity(self.severity)}, "
            f"code={self.code}, message={self.message!r})"
        )

    # ─── Enrichment ──────────────────────────────────────────────

    def _owned_info(self) -> Info:
        # Info may have been handed over to a wrapping error.
        if self.info is None:
            self.info = new_info()
        return self.info

    def change_severity(self, level: SeverityLevel) -> None:
        self.severity = level

    def add_suggestion(self, suggestion: str) -> None:
        self._owned_info().suggestions.append(suggestion)

    def add_context(self, key: str, value: Any) -> None:
        self._owned_info().context[key] = value

    def add_frame(self, frame: str) -> None:
        """Append ``frame`` to the stack trace. Blank labels are ignored."""
        frame = frame.strip()
        if not frame:
            return

        info = self._owned_info()
        if info.stack_trace is None:
            info.stack_trace = StackTrace.of(frame)
        else:
            info.stack_trace.push(frame)

    def set_inner(self, inner: BaseException | None) -> None:
        self._owned_info().inner = inner

    def value(self, key: str) -> tuple[Any, bool]:
        """Context lookup. ``(None, False)`` when the key is absent."""
        if self.info is None or not self.info.context:
            return None, False
        if key not in self.info.context:
            return None, False
        return self.info.context[key], True


# ─── Constructors ────────────────────────────────────────────────


def new(code: ErrorCoder, message: str) -> Err:
    """New ERROR-level error with fresh info. Never returns None."""
    return Err(code, message, SeverityLevel.ERROR, new_info())


def new_with_severity(severity: SeverityLevel, code: ErrorCoder, message: str) -> Err:
    return Err(code, message, severity, new_info())


def new_from_error(code: ErrorCoder, source: BaseException | None) -> Err:
    """
    Wrap an arbitrary exception under ``code``.

    A structured source hands its message and info over to the new error and
    is left without info, so the metadata has exactly one owner. The result
    is always ERROR-level regardless of the source's severity.
    """
    if source is None:
        return Err(code, GENERIC_MESSAGE, SeverityLevel.ERROR, new_info())

    if isinstance(source, Err):
        info = source.info.copy() if source.info is not None else new_info()
        source.info = None
        return Err(code, source.message, SeverityLevel.ERROR, info)

    return Err(code, str(source), SeverityLevel.ERROR, new_info())


# ─── None-safe helpers ───────────────────────────────────────────


def error_text(err: BaseException | None) -> str:
    """Short single-line form of ``err``, or the empty string for None."""
    if err is None:
        return ""
    return str(err)


def change_severity(err: Err | None, level: SeverityLevel) -> None:
    if err is not None:
        err.change_severity(level)


def add_suggestion(err: Err | None, suggestion: str) -> None:
    if err is not None:
        err.add_suggestion(suggestion)


def add_context(err: Err | None, key: str, value: Any) -> None:
    if err is not None:
        err.add_context(key, value)


def add_frame(err: Err | None, frame: str) -> None:
    if err is not None:
        err.add_frame(frame)


def set_inner(err: Err | None, inner: BaseException | None) -> None:
    if err is not None:
        err.set_inner(inner)


def value(err: Err | None, key: str) -> tuple[Any, bool]:
    if err is None:
        return None, False
    return err.value(key)
