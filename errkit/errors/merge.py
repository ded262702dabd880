"""
errkit — Merging

Combine two errors (or two infos) when one wraps the other. The outer side
takes precedence on every field; the inner info is only used when there is
no outer info at all.
"""

from __future__ import annotations

from errkit.errors.err import Err
from errkit.errors.info import Info, new_info
from errkit.primitives.common import new_id


def merge(outer: Info | None, inner: Info | None) -> Info:
    """
    Merge ``inner`` into ``outer``. Never returns None and never returns one
    of its arguments: the result is always an independent copy with its own
    id, since both source errors stay alive next to the merged one.
    """
    if outer is None:
        if inner is None:
            return new_info()
        merged = inner.copy()
    else:
        # Outer wins on every collision, so a present inner adds nothing.
        merged = outer.copy()
    merged.id = new_id()
    return merged


def merge_errors(outer: BaseException | None, inner: BaseException | None) -> BaseException | None:
    """
    Combine ``outer`` and ``inner`` into one error.

    Either side missing: the other is returned unchanged. Neither side
    structured: an ``ExceptionGroup`` holding both, outer first. Otherwise a
    new ``Err`` carrying the outer's (else the inner's) severity, code and
    message, with merged info.
    """
    if outer is None:
        return inner
    if inner is None:
        return outer

    o = outer if isinstance(outer, Err) else None
    i = inner if isinstance(inner, Err) else None

    if o is None and i is None:
        # An ExceptionGroup when both are Exceptions.
        return BaseExceptionGroup(f"{outer}: {inner}", [outer, inner])

    head: Err = o if o is not None else i  # type: ignore[assignment]

    return Err(
        head.code,
        head.message,
        head.severity,
        merge(o.info if o is not None else None, i.info if i is not None else None),
    )

