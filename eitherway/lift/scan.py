"""
Ordered short-circuit
=====================

Shared engine behind find/some/every, OR/AND in match, and_/or_ and
if_else: test items one after another and stop at the first verdict with
the wanted truthiness.

A pending verdict is awaited before the next item is tested, so a later
synchronous hit can never jump ahead of an earlier pending test.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator

from .pending import Deferred, is_pending, resolve


def scan[T, R](
    items: Iterable[T],
    test: Callable[[T], typing.Any],
    *,
    stop_on: bool,
    hit: Callable[[T], R | typing.Awaitable[R]],
    miss: R,
) -> R | Deferred[R]:
    """
    Return hit(item) for the first item whose verdict has truthiness stop_on,
    miss if there is none.

    Stays synchronous until some verdict is pending.
    """
    iterator = iter(items)
    for item in iterator:
        verdict = test(item)
        if is_pending(verdict):
            return Deferred(lambda: _scan_rest(item, verdict, iterator, test, stop_on, hit, miss))
        if bool(verdict) is stop_on:
            return hit(item)  # type: ignore[return-value]
    return miss


async def _scan_rest[T, R](
    item: T,
    verdict: typing.Awaitable[typing.Any],
    iterator: Iterator[T],
    test: Callable[[T], typing.Any],
    stop_on: bool,
    hit: Callable[[T], R | typing.Awaitable[R]],
    miss: R,
) -> R:
    if bool(await resolve(verdict)) is stop_on:
        return await resolve(hit(item))
    for item in iterator:
        if bool(await resolve(test(item))) is stop_on:
            return await resolve(hit(item))
    return miss


__all__ = ("scan",)
