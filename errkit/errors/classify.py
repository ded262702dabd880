"""
errkit — Error Classification

Find a structured ``Err`` inside an arbitrary exception and test its code.
The search follows Python's own wrapping: explicit ``__cause__``, implicit
``__context__`` (unless suppressed) and the members of exception groups.
"""

from __future__ import annotations

from errkit.errors.codes import ErrorCoder, codes_match
from errkit.errors.err import Err


def _walk(err: BaseException) -> Err | None:
    seen: set[int] = set()
    stack: list[BaseException] = [err]

    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))

        if isinstance(current, Err):
            return current

        # Pushed in reverse so the cause is visited before the context and
        # group members keep their order.
        candidates: list[BaseException] = []
        if current.__cause__ is not None:
            candidates.append(current.__cause__)
        if current.__context__ is not None and not current.__suppress_context__:
            candidates.append(current.__context__)
        if isinstance(current, BaseExceptionGroup):
            candidates.extend(current.exceptions)
        stack.extend(reversed(candidates))

    return None


def as_err(err: BaseException | None) -> tuple[Err | None, bool]:
    """The first structured error found in ``err``'s wrapping chain."""
    if err is None:
        return None, False

    found = _walk(err)
    if found is None:
        return None, False
    return found, True


def as_with_code(err: BaseException | None, code: ErrorCoder) -> tuple[Err | None, bool]:
    """Like ``as_err`` but the error's code must also match ``code``."""
    found, ok = as_err(err)
    if not ok or found is None or not codes_match(found.code, code):
        return None, False
    return found, True


def is_code(err: BaseException | None, code: ErrorCoder) -> bool:
    """True iff ``err`` holds a structured error whose code matches ``code``."""
    _, ok = as_with_code(err, code)
    return ok
