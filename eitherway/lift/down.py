"""
Bridges to kungfu result types.

Run a possibly pending value and capture its outcome as a Result instead
of letting the exception escape.
"""

from __future__ import annotations

import typing

from kungfu import Error, LazyCoroResult, Ok, Result

from .pending import resolve


async def to_result[T](value: T | typing.Awaitable[T]) -> Result[T, Exception]:
    """
    Settle value and return Ok(value) or Error(exception).

    Example:
        result = await to_result(ew.map(fetch, ids))
        match result:
            case Ok(users): ...
            case Error(exc): ...
    """
    try:
        return Ok(await resolve(value))
    except Exception as exc:
        return Error(exc)


def to_lazy[T](value: T | typing.Awaitable[T]) -> LazyCoroResult[T, Exception]:
    """
    Wrap value into LazyCoroResult so it can join kungfu pipelines.

    NOTE: a coroutine can only be awaited once, wrap it in Deferred first if
    the LazyCoroResult will be awaited more than once.
    """

    async def run() -> Result[T, Exception]:
        return await to_result(value)

    return LazyCoroResult(run)


__all__ = ("to_lazy", "to_result")
