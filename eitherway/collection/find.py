"""
Search and quantifiers
======================

find, some and every test entries one at a time in enumeration order and
stop at the first decisive verdict. A pending verdict is settled before
the next entry is tested, so the answer is always the first qualifying
entry by position, never the first to resolve.
"""

from __future__ import annotations

import contextlib
import typing
from collections.abc import Callable

from .._helpers import spread
from .._types import Callback
from ..container import ContainerKind, classify, entries, pull
from ..control.curry import curry
from ..lift import Deferred, resolve, scan
from ..match import as_callback


def _search[R](
    callback: Callback[typing.Any, typing.Any],
    container: typing.Any,
    *,
    stop_on: bool,
    hit: Callable[[typing.Any], R],
    miss: R,
) -> R | Deferred[R]:
    call = spread(as_callback(callback))
    kind = classify(container)
    if kind is ContainerKind.STREAM:
        return Deferred(lambda: _scan_chunks(call, container, stop_on, hit, miss))
    return scan(
        entries(container, kind),
        lambda entry: call(entry[0], entry[1], container),
        stop_on=stop_on,
        hit=lambda entry: hit(entry[0]),
        miss=miss,
    )


async def _scan_chunks[R](
    call: Callable[..., typing.Any],
    source: typing.Any,
    stop_on: bool,
    hit: Callable[[typing.Any], R],
    miss: R,
) -> R:
    async with contextlib.aclosing(pull(source)) as chunks:
        async for chunk, index in chunks:
            if bool(await resolve(call(chunk, index, source))) is stop_on:
                return hit(chunk)
    return miss


def _found(value: typing.Any) -> typing.Any:
    return value


@curry
def find(callback: Callback[typing.Any, bool], container: typing.Any) -> typing.Any:
    """
    First value whose verdict is truthy, None if there is none.

    Example:
        find(lambda a: a > 2, [1, 2, 5, 7])       # 5
        find(lambda a, key: key == 1, [1, 2, 5])  # 2
        find([0, 2, 3], [1, 2, 5, 7])             # 2, list spec = alternatives
    """
    return _search(callback, container, stop_on=True, hit=_found, miss=None)


@curry
def some(callback: Callback[typing.Any, bool], container: typing.Any) -> bool | Deferred[bool]:
    """Some entry passes. Stops at the first truthy verdict."""
    return _search(callback, container, stop_on=True, hit=lambda _: True, miss=False)


@curry
def every(callback: Callback[typing.Any, bool], container: typing.Any) -> bool | Deferred[bool]:
    """Every entry passes. Stops at the first falsy verdict; empty containers pass."""
    return _search(callback, container, stop_on=False, hit=lambda _: False, miss=True)


__all__ = ("every", "find", "some")
