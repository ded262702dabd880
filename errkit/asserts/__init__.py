"""
errkit — Assertions

Guard-and-panic helpers: every failed guard raises a FATAL structured error.
"""

from errkit.asserts.capabilities import (
    Fixer,
    Validator,
    assert_fix,
    assert_validate,
    try_fix,
)
from errkit.asserts.guards import (
    assert_cond,
    assert_condf,
    assert_conv,
    assert_err,
    assert_new,
    assert_not_nil,
    assert_not_ok,
    assert_not_zero,
    assert_ok,
    assert_type,
    diagnostic_sink,
    fail,
)

__all__ = [
    "Fixer",
    "Validator",
    "assert_cond",
    "assert_condf",
    "assert_conv",
    "assert_err",
    "assert_fix",
    "assert_new",
    "assert_not_nil",
    "assert_not_ok",
    "assert_not_zero",
    "assert_ok",
    "assert_type",
    "assert_validate",
    "diagnostic_sink",
    "fail",
    "try_fix",
]
