"""
errkit — Structured Errors

Severity, typed codes, diagnostic info, rendering, classification and merging
for structured errors.
"""

from errkit.errors.classify import as_err, as_with_code, is_code
from errkit.errors.codes import CodeEnum, ErrorCode, ErrorCoder, codes_match
from errkit.errors.display import (
    DisplayAbort,
    ShortWriteError,
    display_error,
    panic,
    render_error,
)
from errkit.errors.err import (
    GENERIC_MESSAGE,
    NO_MESSAGE,
    Err,
    add_context,
    add_frame,
    add_suggestion,
    change_severity,
    error_text,
    new,
    new_from_error,
    new_with_severity,
    set_inner,
    value,
)
from errkit.errors.factories import (
    new_err_after,
    new_err_assert_fail,
    new_err_at,
    new_err_before,
    new_err_fix,
    new_err_invalid_parameter,
    new_err_invalid_usage,
    new_err_nil_parameter,
    new_err_no_such_key,
)
from errkit.errors.info import Info, new_info
from errkit.errors.merge import merge, merge_errors
from errkit.errors.severity import SeverityLevel, format_severity
from errkit.errors.stack import FRAME_SEPARATOR, StackTrace

__all__ = [
    # Data model
    "CodeEnum",
    "Err",
    "ErrorCode",
    "ErrorCoder",
    "FRAME_SEPARATOR",
    "GENERIC_MESSAGE",
    "Info",
    "NO_MESSAGE",
    "SeverityLevel",
    "StackTrace",
    # Construction
    "new",
    "new_from_error",
    "new_info",
    "new_with_severity",
    "new_err_after",
    "new_err_assert_fail",
    "new_err_at",
    "new_err_before",
    "new_err_fix",
    "new_err_invalid_parameter",
    "new_err_invalid_usage",
    "new_err_nil_parameter",
    "new_err_no_such_key",
    # Enrichment
    "add_context",
    "add_frame",
    "add_suggestion",
    "change_severity",
    "set_inner",
    "value",
    # Rendering
    "DisplayAbort",
    "ShortWriteError",
    "display_error",
    "error_text",
    "format_severity",
    "panic",
    "render_error",
    # Classification and merging
    "as_err",
    "as_with_code",
    "codes_match",
    "is_code",
    "merge",
    "merge_errors",
]
