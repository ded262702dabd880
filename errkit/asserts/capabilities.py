"""
errkit — Validate / Fix Guards

Objects opt in to these guards by exposing ``validate()`` or ``fix()``. Both
report a problem by returning an exception (or raising one); returning None
means the object is fine.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from errkit.asserts.guards import fail
from errkit.errors.codes import ErrorCode
from errkit.errors.err import Err, new, new_from_error, new_with_severity
from errkit.errors.severity import SeverityLevel


@runtime_checkable
class Validator(Protocol):
    def validate(self) -> BaseException | None: ...


@runtime_checkable
class Fixer(Protocol):
    def fix(self) -> BaseException | None: ...


def _call(method: Any) -> BaseException | None:
    try:
        return method()
    except Exception as exc:
        return exc


def _nil_message(name: str) -> str:
    if not name:
        return "receiver must not be None"
    return f'"{name}" must not be None'


def _frame(kind: str, name: str, allow_nil: bool) -> str:
    return f"{kind}[{name!r}, {allow_nil}]" if name else f"{kind}[receiver, {allow_nil}]"


def _guard(kind: str, code: ErrorCode, name: str, obj: Any, method: str, allow_nil: bool) -> None:
    if obj is None:
        if allow_nil:
            return
        err = new_with_severity(SeverityLevel.FATAL, code, _nil_message(name))
    else:
        bound = getattr(obj, method, None)
        if bound is None:
            return

        inner = _call(bound)
        if inner is None:
            return

        err = new_from_error(code, inner)
        err.change_severity(SeverityLevel.FATAL)

    fail(err, _frame(kind, name, allow_nil))


def assert_validate(name: str, obj: Validator | None, allow_nil: bool = False) -> None:
    """Fail with INVALID_STATE if ``obj`` does not validate."""
    _guard("assert_validate", ErrorCode.INVALID_STATE, name, obj, "validate", allow_nil)


def assert_fix(name: str, obj: Fixer | None, allow_nil: bool = False) -> None:
    """Fail with FAIL_FIX if ``obj`` cannot be fixed."""
    _guard("assert_fix", ErrorCode.FAIL_FIX, name, obj, "fix", allow_nil)


def try_fix(name: str, obj: Fixer | None, allow_nil: bool = False) -> Err | None:
    """
    Non-raising ``assert_fix``: returns the FAIL_FIX error instead of
    escalating it, or None when the object was fixed (or is an allowed None).
    """
    name = name or "object"

    if obj is None:
        if allow_nil:
            return None
        return new(ErrorCode.FAIL_FIX, _nil_message(name))

    fix = getattr(obj, "fix", None)
    if fix is None:
        return None

    inner = _call(fix)
    if inner is None:
        return None

    err = new_from_error(ErrorCode.FAIL_FIX, inner)
    err.add_frame(f"{name}.fix()")
    return err
