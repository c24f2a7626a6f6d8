"""
Guard and chain
===============

Continue a computation after a possibly pending value, without the caller
knowing in advance whether anything is asynchronous.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .pending import Deferred, is_pending, resolve


def guard[R](fn: Callable[..., R], *args: typing.Any, **kwargs: typing.Any) -> R | Deferred[R]:
    """
    Call fn; a synchronous exception becomes a failed Deferred.

    Pending results are returned as-is. Use this only where a call site must
    treat sync throws and async failures the same way.
    """
    try:
        return fn(*args, **kwargs)
    except Exception as exc:
        return Deferred.rejected(exc)


def chain[T, R](
    value: T | typing.Awaitable[T],
    on_ok: Callable[[T], R | typing.Awaitable[R]],
    on_error: Callable[[Exception], R | typing.Awaitable[R]] | None = None,
) -> R | Deferred[R]:
    """
    Continue with on_ok once value is settled.

    Settled value: on_ok runs right away and its result (or exception) is
    the result. Pending value: a Deferred is returned that awaits value,
    then on_ok, or on_error when value fails. Results of the handlers are
    flattened, so returning another pending value is fine.

    NOTE: on_error does not see exceptions raised by on_ok.
    """
    if not is_pending(value):
        return typing.cast(R, on_ok(typing.cast(T, value)))

    async def run() -> R:
        try:
            settled = await resolve(value)
        except Exception as exc:
            if on_error is None:
                raise
            return await resolve(on_error(exc))
        return await resolve(on_ok(settled))

    return Deferred(run)


__all__ = ("chain", "guard")
