"""
Map
===

Transform every entry, keeping keys, order and container kind. Streams are
not materialized: mapping a stream gives a new stream.
"""

from __future__ import annotations

import contextlib
import typing
from collections.abc import AsyncIterator, Callable

from .._helpers import spread
from .._types import Callback
from ..container import ContainerKind, Stream, classify, pull, rebuild
from ..control.curry import curry
from ..lift import resolve
from ..match import as_callback
from .each import Pair, settle_each


@curry
def map(callback: Callback[typing.Any, typing.Any], container: typing.Any) -> typing.Any:
    """
    map(callback, container) -> container of the same kind

    The callback gets (value, key, container), trimmed to what it accepts.
    Callbacks run eagerly for every entry; if any returns a pending value
    the result is a Deferred of the rebuilt container.

    Example:
        map(lambda x: x * 2, [1, 2, 3])                      # [2, 4, 6]
        map(lambda value, key: key, {"one": 1})              # {"one": "one"}
        await map(lambda x: asyncio.sleep(0, result=x), {1})  # {1}
    """
    call = spread(as_callback(callback))
    kind = classify(container)
    if kind is ContainerKind.STREAM:
        return Stream(_map_chunks(call, container))

    def finish(pairs: list[Pair], results: list[typing.Any]) -> typing.Any:
        return rebuild(container, ((key, result) for (key, _), result in zip(pairs, results)), kind)

    return settle_each(call, container, kind, finish)


async def _map_chunks(call: Callable[..., typing.Any], source: typing.Any) -> AsyncIterator[typing.Any]:
    async with contextlib.aclosing(pull(source)) as chunks:
        async for chunk, index in chunks:
            yield await resolve(call(chunk, index, source))


__all__ = ("map",)
