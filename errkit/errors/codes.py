"""
errkit — Error Codes

A code is a typed, enumerated classifier for the kind of failure. Any type
that renders itself as a string and exposes an integer value can act as a
code; ``CodeEnum`` is the ready-made base for enumerated families.

Codes from different families never compare equal, even when their integer
values coincide: ``CodeEnum`` deliberately does not subclass ``int``.
"""

from __future__ import annotations

import enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorCoder(Protocol):
    """Capability: an integer value plus a string rendering."""

    def __int__(self) -> int: ...

    def __str__(self) -> str: ...


class CodeEnum(enum.Enum):
    """Base for integer-backed enumerated error codes."""

    def __int__(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)

    def int(self) -> int:
        return int(self.value)


def codes_match(a: object, b: object) -> bool:
    """True when ``a`` and ``b`` share a concrete type and an integer value."""
    if a is None or b is None:
        return False
    if type(a) is not type(b):
        return False
    return int(a) == int(b)  # type: ignore[call-overload]


class ErrorCode(CodeEnum):
    """The library-wide failure taxonomy."""

    # A parameter is invalid, e.g. None where None is not allowed.
    BAD_PARAMETER = 0
    # A function was called without its preconditions being met.
    INVALID_USAGE = 1
    # An object could not be fixed because of an invalid internal state.
    FAIL_FIX = 2
    # An operation could not be completed due to an internal error.
    OPERATION_FAIL = 3
    # A context key was requested but does not exist.
    NO_SUCH_KEY = 4
    # A developer-stated invariant does not hold.
    ASSERT_FAIL = 5
    # A method was called on an object whose state is invalid.
    INVALID_STATE = 6
