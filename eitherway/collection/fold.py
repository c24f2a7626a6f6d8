"""
Reduce
======

Strictly sequential left fold. The accumulator is settled before the next
entry is visited, so reducers always see a plain value.
"""

from __future__ import annotations

import contextlib
import typing
from collections.abc import Callable, Iterator

from .._errors import UsageError
from .._helpers import spread
from ..container import ContainerKind, classify, entries, pull
from ..control.curry import curry
from ..lift import Deferred, is_pending, resolve


@curry
def reduce(callback: Callable[..., typing.Any], initial: typing.Any, container: typing.Any) -> typing.Any:
    """
    reduce(callback, initial, container) -> accumulator

    callback gets (acc, value, key, container), trimmed to what it accepts.
    Stays synchronous until a reducer returns a pending value; streams are
    always folded asynchronously in chunk arrival order.

    Example:
        reduce(lambda acc, n: acc + n, 0, irange(1, 10))  # 55
    """
    if not callable(callback):
        raise UsageError(f"reduce() needs a callable, got {type(callback).__name__!r}", callback)
    call = spread(callback)
    kind = classify(container)
    if kind is ContainerKind.STREAM:
        return Deferred(lambda: _reduce_chunks(call, initial, container))

    acc = initial
    remaining = iter(entries(container, kind))
    for value, key in remaining:
        acc = call(acc, value, key, container)
        if is_pending(acc):
            return Deferred(lambda: _reduce_rest(call, acc, remaining, container))
    return acc


async def _reduce_rest(
    call: Callable[..., typing.Any],
    acc: typing.Any,
    remaining: Iterator[tuple[typing.Any, typing.Any]],
    container: typing.Any,
) -> typing.Any:
    acc = await resolve(acc)
    for value, key in remaining:
        acc = await resolve(call(acc, value, key, container))
    return acc


async def _reduce_chunks(call: Callable[..., typing.Any], acc: typing.Any, source: typing.Any) -> typing.Any:
    async with contextlib.aclosing(pull(source)) as chunks:
        async for chunk, index in chunks:
            acc = await resolve(call(acc, chunk, index, source))
    return acc


__all__ = ("reduce",)
