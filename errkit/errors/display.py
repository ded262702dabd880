"""
errkit — Error Display

Renders an error, and the chain of errors it wraps, as human-readable text:

    [FATAL] ASSERT_FAIL: cond failed
    Occurred at: 2026-10-19T08:15:02.114Z
    Suggestion:
    - check your input

    Context:
    - n: 5

    Stack trace:
    - assert_cond <- load_plan

    Caused by:
    [ERROR] OPERATION_FAIL: ...

Each section goes to the sink in a single write. A sink that accepts fewer
characters (or bytes) than it was given fails the whole display with
``ShortWriteError``.
"""

from __future__ import annotations

import io
from datetime import datetime
from typing import IO, Any

import structlog

from errkit.config import get_config
from errkit.errors.err import Err, error_text
from errkit.errors.info import Info

logger = structlog.get_logger()


class ShortWriteError(OSError):
    """The sink did not accept everything it was given (or there is no sink)."""


class DisplayAbort(RuntimeError):
    """Raised by ``panic`` when the error it is escalating cannot be displayed."""


def _write(sink: IO[Any], text: str) -> None:
    data: str | bytes = text
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        data = text.encode("utf-8")

    n = sink.write(data)
    # Writers that return None are taken to have consumed everything.
    if n is not None and n != len(data):
        raise ShortWriteError(f"short write: {n} of {len(data)}")


def _format_timestamp(ts: datetime, fmt: str) -> str:
    if fmt == "iso":
        return ts.isoformat()
    return ts.strftime(fmt)


def _info_sections(info: Info) -> list[str]:
    display = get_config().display
    sections: list[str] = []

    if info.timestamp is not None:
        sections.append(f"Occurred at: {_format_timestamp(info.timestamp, display.timestamp_format)}\n")

    if info.suggestions:
        lines = "".join(f"- {s}\n" for s in info.suggestions)
        sections.append(f"Suggestion:\n{lines}")

    if info.context:
        lines = "".join(f"- {k}: {v}\n" for k, v in info.context.items())
        sections.append(f"\nContext:\n{lines}")

    if info.stack_trace is not None:
        sections.append(f"\nStack trace:\n- {info.stack_trace.render(display.frame_separator)}\n")

    if info.inner is not None:
        sections.append(f"\nCaused by:\n{render_error(info.inner)}")

    return sections


def display_error(sink: IO[Any] | None, err: BaseException | None) -> None:
    """
    Write the short form of ``err`` followed, for structured errors, by the
    detail sections of its info. ``None`` displays nothing.
    """
    if err is None:
        return
    if sink is None:
        raise ShortWriteError("no sink to write to")

    _write(sink, error_text(err) + "\n")

    if not isinstance(err, Err) or err.info is None or not err.info.has_details():
        return

    for section in _info_sections(err.info):
        _write(sink, section)


def render_error(err: BaseException | None) -> str:
    """``display_error`` into a string."""
    buf = io.StringIO()
    display_error(buf, err)
    return buf.getvalue()


def panic(sink: IO[Any] | None, err: BaseException | None) -> None:
    """
    Display ``err`` to ``sink`` and raise it. Never returns unless ``err``
    is None.

    If the display itself fails, ``DisplayAbort`` is raised instead, chained
    to the display failure, with the original error attached as its
    ``escalated`` attribute.
    """
    if err is None:
        return

    try:
        display_error(sink, err)
    except Exception as exc:
        logger.warning("display_failed", error=error_text(err), reason=str(exc))
        abort = DisplayAbort(f"could not display error: {error_text(err)}")
        abort.escalated = err  # type: ignore[attr-defined]
        raise abort from exc

    if isinstance(err, Err):
        logger.debug(
            "panic",
            code=str(err.code),
            severity=str(err.severity),
            error_id=err.info.id if err.info is not None else None,
        )
    raise err
