"""
errkit — Structured errors and assertion guards.

Build an error record, enrich it, display it, or escalate it.
"""

from errkit.asserts import (
    assert_cond,
    assert_condf,
    assert_conv,
    assert_err,
    assert_fix,
    assert_new,
    assert_not_nil,
    assert_not_ok,
    assert_not_zero,
    assert_ok,
    assert_type,
    assert_validate,
)
from errkit.config import ErrkitConfig, configure, get_config, load_config
from errkit.errors import (
    Err,
    ErrorCode,
    SeverityLevel,
    as_err,
    as_with_code,
    display_error,
    is_code,
    merge_errors,
    new,
    new_from_error,
    new_with_severity,
    panic,
)

__version__ = "0.1.0"

__all__ = [
    "Err",
    "ErrkitConfig",
    "ErrorCode",
    "SeverityLevel",
    "as_err",
    "as_with_code",
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
    "configure",
    "display_error",
    "get_config",
    "is_code",
    "load_config",
    "merge_errors",
    "new",
    "new_from_error",
    "new_with_severity",
    "panic",
]
