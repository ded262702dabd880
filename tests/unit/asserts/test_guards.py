"""
Tests for the assertion guards.

Every failing guard must raise a FATAL structured error, record its own
name as a stack frame and display the error on the diagnostic sink.
"""

from __future__ import annotations

import pytest

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
)
from errkit.config import AssertConfig, ErrkitConfig, set_config
from errkit.errors.codes import ErrorCode
from errkit.errors.err import Err, new
from errkit.errors.severity import SeverityLevel


def _check_failure(err: Err, frame: str) -> None:
    assert err.severity == SeverityLevel.FATAL
    assert err.code is ErrorCode.ASSERT_FAIL
    assert err.info.stack_trace.frames[-1] == frame


class Point:
    def __init__(self, x: int) -> None:
        self.x = x

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Point) and other.x == self.x


# ─── Boolean Guards ───────────────────────────────────────────────


class TestBooleanGuards:
    def test_cond_passes(self):
        assert_cond(True, "never shown")

    def test_cond_fails(self):
        with pytest.raises(Err) as exc_info:
            assert_cond(False, "cond failed")
        _check_failure(exc_info.value, "assert_cond")
        assert exc_info.value.message == "cond failed"

    def test_condf_formats(self):
        assert_condf(True, "%d items", 3)
        with pytest.raises(Err) as exc_info:
            assert_condf(False, "expected %d items, got %d", 3, 2)
        _check_failure(exc_info.value, "assert_condf")
        assert exc_info.value.message == "expected 3 items, got 2"

    def test_condf_without_args_keeps_percent(self):
        with pytest.raises(Err) as exc_info:
            assert_condf(False, "100% sure")
        assert exc_info.value.message == "100% sure"

    def test_ok(self):
        assert_ok(True, "ready")
        with pytest.raises(Err) as exc_info:
            assert_ok(False, "ready(%s)", "db")
        _check_failure(exc_info.value, "assert_ok")
        assert exc_info.value.message == "ready(db) = false"

    def test_not_ok(self):
        assert_not_ok(False, "closed")
        with pytest.raises(Err) as exc_info:
            assert_not_ok(True, "closed")
        _check_failure(exc_info.value, "assert_not_ok")
        assert exc_info.value.message == "closed = true"

    def test_err(self):
        assert_err(None, "open config")
        with pytest.raises(Err) as exc_info:
            assert_err(FileNotFoundError("no such file"), "open %s", "a.yaml")
        _check_failure(exc_info.value, "assert_err")
        assert exc_info.value.message == "open a.yaml = no such file"

    def test_err_with_structured_inner(self):
        inner = new(ErrorCode.NO_SUCH_KEY, "k")
        with pytest.raises(Err) as exc_info:
            assert_err(inner, "lookup")
        assert exc_info.value.message == "lookup = [ERROR] NO_SUCH_KEY: k"


# ─── Value Guards ─────────────────────────────────────────────────


class TestNotNil:
    def test_passes(self):
        assert_not_nil(0, "n")
        assert_not_nil("", "s")

    def test_fails(self):
        with pytest.raises(Err) as exc_info:
            assert_not_nil(None, "conn")
        _check_failure(exc_info.value, "assert_not_nil")
        assert exc_info.value.message == "conn = None"

    def test_default_name(self):
        with pytest.raises(Err) as exc_info:
            assert_not_nil(None, "")
        assert exc_info.value.message == "object = None"


class TestNotZero:
    def test_zero_int_fails(self):
        with pytest.raises(Err) as exc_info:
            assert_not_zero(0, "x")
        _check_failure(exc_info.value, "assert_not_zero")
        assert "x = 0" in exc_info.value.message

    def test_non_zero_passes(self):
        assert_not_zero(5, "x")
        assert_not_zero("a", "s")
        assert_not_zero([1], "items")
        assert_not_zero(True, "flag")

    @pytest.mark.parametrize("zero", ["", [], {}, 0.0, False, ()])
    def test_builtin_zero_values(self, zero):
        with pytest.raises(Err):
            assert_not_zero(zero, "v")

    def test_none_is_zero(self):
        with pytest.raises(Err) as exc_info:
            assert_not_zero(None, "v")
        assert exc_info.value.message == "v = None"

    def test_string_zero_message(self):
        with pytest.raises(Err) as exc_info:
            assert_not_zero("", "name")
        assert exc_info.value.message == "name = ''"

    def test_explicit_sentinel(self):
        origin = Point(0)
        assert_not_zero(Point(1), "p", zero=origin)
        with pytest.raises(Err) as exc_info:
            assert_not_zero(Point(0), "p", zero=origin)
        _check_failure(exc_info.value, "assert_not_zero")

    def test_type_without_default_needs_sentinel(self):
        with pytest.raises(Err) as exc_info:
            assert_not_zero(Point(0), "p")
        err = exc_info.value
        assert err.code is ErrorCode.BAD_PARAMETER
        assert err.severity == SeverityLevel.ERROR
        assert err.info.suggestions


class TestType:
    def test_matching_type_passes(self):
        assert_type(5, int, "v")
        assert_type("s", (int, str), "v")

    def test_mismatch(self):
        with pytest.raises(Err) as exc_info:
            assert_type("hello", int, "v", False)
        _check_failure(exc_info.value, "assert_type")
        assert exc_info.value.message == "v = str, expected int"
        assert "expected int" in exc_info.value.message

    def test_tuple_names(self):
        with pytest.raises(Err) as exc_info:
            assert_type(1.5, (int, str), "v")
        assert exc_info.value.message == "v = float, expected int | str"

    def test_none_allowed(self):
        assert_type(None, int, "v", allow_nil=True)

    def test_none_rejected(self):
        with pytest.raises(Err) as exc_info:
            assert_type(None, int, "v")
        assert exc_info.value.message == "v = None, expected int"


class TestConv:
    def test_returns_value(self):
        value = assert_conv(5, int, "v")
        assert value == 5

    def test_mismatch(self):
        with pytest.raises(Err) as exc_info:
            assert_conv("5", int, "v")
        _check_failure(exc_info.value, "assert_conv")
        assert exc_info.value.message == "v = str, expected int"

    def test_none(self):
        with pytest.raises(Err) as exc_info:
            assert_conv(None, int)
        assert exc_info.value.message == "object = None, expected int"


class TestNew:
    def test_returns_value(self):
        obj = object()
        assert assert_new(obj, None) is obj

    def test_error_wins(self):
        with pytest.raises(Err) as exc_info:
            assert_new(object(), ValueError("bad config"))
        _check_failure(exc_info.value, "assert_new")
        assert exc_info.value.message == "bad config"

    def test_missing_value(self):
        with pytest.raises(Err) as exc_info:
            assert_new(None, None)
        _check_failure(exc_info.value, "assert_new")
        assert exc_info.value.message == "object must not be the zero value"


# ─── Diagnostics ──────────────────────────────────────────────────


class TestDiagnostics:
    def test_failure_displayed_on_stderr(self, capsys):
        with pytest.raises(Err):
            assert_cond(False, "cond failed")
        err_out = capsys.readouterr().err
        assert err_out.startswith("[FATAL] ASSERT_FAIL: cond failed\n")
        assert "Stack trace:\n- assert_cond\n" in err_out

    def test_pass_displays_nothing(self, capsys):
        assert_cond(True, "fine")
        assert capsys.readouterr().err == ""

    def test_sink_none_still_raises(self, capsys):
        set_config(ErrkitConfig(asserts=AssertConfig(sink="none")))
        assert diagnostic_sink() is None
        with pytest.raises(Err):
            assert_cond(False, "quiet")
        assert "quiet" not in capsys.readouterr().err

    def test_sink_stdout(self, capsys):
        set_config(ErrkitConfig(asserts=AssertConfig(sink="stdout")))
        with pytest.raises(Err):
            assert_cond(False, "loud")
        assert "[FATAL] ASSERT_FAIL: loud" in capsys.readouterr().out
