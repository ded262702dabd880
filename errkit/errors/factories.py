"""
errkit — Error Factories

Ready-made constructors for the common members of ``ErrorCode``.
"""

from __future__ import annotations

from errkit.errors.codes import ErrorCode
from errkit.errors.err import Err, new, new_with_severity
from errkit.errors.severity import SeverityLevel


def new_err_invalid_parameter(message: str) -> Err:
    return new(ErrorCode.BAD_PARAMETER, message)


def new_err_nil_parameter(parameter: str) -> Err:
    """``parameter ("<name>") must not be nil``"""
    return new(ErrorCode.BAD_PARAMETER, f'parameter ("{parameter}") must not be nil')


def new_err_invalid_usage(message: str, usage: str) -> Err:
    """``usage`` is attached as a suggestion on how to call things correctly."""
    err = new(ErrorCode.INVALID_USAGE, message)
    err.add_suggestion(usage)
    return err


def new_err_fix(message: str, reason: BaseException | None) -> Err:
    err = new(ErrorCode.FAIL_FIX, message)
    err.set_inner(reason)
    return err


def _operation_fail(preposition: str, where: str, fallback: str, reason: BaseException | None) -> Err:
    if where:
        msg = f"an error occurred {preposition} {where}"
    else:
        msg = f"an error occurred {fallback}"

    err = new(ErrorCode.OPERATION_FAIL, msg)
    err.set_inner(reason)
    return err


def new_err_at(at: str, reason: BaseException | None) -> Err:
    return _operation_fail("at", at, "somewhere", reason)


def new_err_after(before: str, reason: BaseException | None) -> Err:
    return _operation_fail("after", before, "after something", reason)


def new_err_before(after: str, reason: BaseException | None) -> Err:
    return _operation_fail("before", after, "before something", reason)


def new_err_no_such_key(key: str) -> Err:
    return new(ErrorCode.NO_SUCH_KEY, f'key ("{key}") does not exist')


def new_err_assert_fail(message: str) -> Err:
    return new_with_severity(SeverityLevel.FATAL, ErrorCode.ASSERT_FAIL, message)
