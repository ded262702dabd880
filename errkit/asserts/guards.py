"""
errkit — Assertion Guards

Guards for developer-stated invariants. A guard that holds returns without
side effects. A guard that fails builds a FATAL ``Err`` with code
``ASSERT_FAIL``, records its own name as a stack frame, displays the error on
the diagnostic sink and raises it. There is no soft mode: a failed guard
never returns to its caller.

The diagnostic sink is chosen by ``ErrkitConfig.asserts.sink`` and resolved
at failure time.
"""

from __future__ import annotations

import sys
from typing import IO, Any, NoReturn, TypeVar

import structlog

from errkit.config import get_config
from errkit.errors.codes import ErrorCode
from errkit.errors.display import panic
from errkit.errors.err import Err, new_from_error, new_with_severity
from errkit.errors.factories import new_err_invalid_parameter
from errkit.errors.severity import SeverityLevel

logger = structlog.get_logger()

T = TypeVar("T")

_MISSING: Any = object()


def diagnostic_sink() -> IO[str] | None:
    """The stream failed assertions are displayed on, or None for no display."""
    target = get_config().asserts.sink
    if target == "stdout":
        return sys.stdout
    if target == "none":
        return None
    return sys.stderr


def fail(err: Err, frame: str) -> NoReturn:
    """Escalate ``err``: record ``frame``, display it and raise it."""
    err.add_frame(frame)
    logger.debug("assertion_failed", frame=frame, code=str(err.code), message=err.message)

    sink = diagnostic_sink()
    if sink is not None:
        panic(sink, err)
    raise err


def _assert_fail(message: str) -> Err:
    return new_with_severity(SeverityLevel.FATAL, ErrorCode.ASSERT_FAIL, message)


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


def _type_name(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " | ".join(t.__name__ for t in expected)
    return expected.__name__


# ─── Boolean Guards ──────────────────────────────────────────────


def assert_cond(cond: bool, msg: str) -> None:
    """Fail with ``msg`` unless ``cond`` holds."""
    if cond:
        return
    fail(_assert_fail(msg), "assert_cond")


def assert_condf(cond: bool, fmt: str, *args: Any) -> None:
    """Like ``assert_cond`` with a %-style formatted message."""
    if cond:
        return
    fail(_assert_fail(_format(fmt, args)), "assert_condf")


def assert_ok(ok: bool, fmt: str, *args: Any) -> None:
    """Fail with ``<fmt> = false`` unless ``ok``."""
    if ok:
        return
    fail(_assert_fail(_format(fmt, args) + " = false"), "assert_ok")


def assert_not_ok(ok: bool, fmt: str, *args: Any) -> None:
    """Fail with ``<fmt> = true`` if ``ok``."""
    if not ok:
        return
    fail(_assert_fail(_format(fmt, args) + " = true"), "assert_not_ok")


def assert_err(inner: BaseException | None, fmt: str, *args: Any) -> None:
    """Fail with ``<fmt> = <inner>`` unless ``inner`` is None."""
    if inner is None:
        return
    fail(_assert_fail(_format(fmt, args) + " = " + str(inner)), "assert_err")


# ─── Value Guards ────────────────────────────────────────────────


def assert_not_nil(obj: Any, name: str = "") -> None:
    if obj is not None:
        return
    fail(_assert_fail(f"{name or 'object'} = None"), "assert_not_nil")


def _zero_of(obj: Any) -> Any:
    if obj is None:
        return None
    try:
        return type(obj)()
    except TypeError:
        err = new_err_invalid_parameter(f"{type(obj).__name__} has no default value")
        err.add_suggestion("pass the value to compare against as zero=...")
        raise err from None


def assert_not_zero(obj: Any, name: str = "", zero: Any = _MISSING) -> None:
    """
    Fail if ``obj`` equals its type's default value (``0``, ``""``, ``[]``,
    ``False``, ...). ``None`` always counts as zero. Types that cannot be
    built without arguments need an explicit ``zero`` sentinel.
    """
    if zero is _MISSING:
        zero = _zero_of(obj)

    if obj is not None and obj != zero:
        return
    fail(_assert_fail(f"{name or 'object'} = {obj!r}"), "assert_not_zero")


def _type_mismatch(obj: Any, expected: type | tuple[type, ...], name: str) -> str:
    actual = "None" if obj is None else type(obj).__name__
    return f"{name or 'object'} = {actual}, expected {_type_name(expected)}"


def assert_type(
    obj: Any,
    expected: type | tuple[type, ...],
    name: str = "",
    allow_nil: bool = False,
) -> None:
    """Fail unless ``obj`` is an instance of ``expected`` (or None, when allowed)."""
    if obj is None and allow_nil:
        return
    if obj is not None and isinstance(obj, expected):
        return
    fail(_assert_fail(_type_mismatch(obj, expected, name)), "assert_type")


def assert_conv(obj: Any, target: type[T], name: str = "") -> T:
    """Return ``obj`` typed as ``target``; fail if it is not an instance."""
    if obj is not None and isinstance(obj, target):
        return obj
    fail(_assert_fail(_type_mismatch(obj, target, name)), "assert_conv")


def assert_new(obj: T | None, inner: BaseException | None) -> T:
    """
    Guard a constructor's ``(value, error)`` result: fail when it reported an
    error or produced nothing, otherwise return the value.
    """
    if inner is not None:
        err = new_from_error(ErrorCode.ASSERT_FAIL, inner)
        err.change_severity(SeverityLevel.FATAL)
    elif obj is not None:
        return obj
    else:
        err = _assert_fail("object must not be the zero value")
    fail(err, "assert_new")
