"""
Filter
======

Keep the entries whose callback verdict is truthy. Kind is preserved: sets
stay sets, associations keep their key/value pairing, streams give a new
stream.
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
def filter(callback: Callback[typing.Any, typing.Any], container: typing.Any) -> typing.Any:
    """
    filter(callback, container) -> container of the same kind

    Any truthy verdict keeps the entry, so match specs work as callbacks:
        filter({"active": True}, users)
        filter(lambda value: value < 0, {"a": -1, "b": 2})  # {"a": -1}
    """
    call = spread(as_callback(callback))
    kind = classify(container)
    if kind is ContainerKind.STREAM:
        return Stream(_filter_chunks(call, container))

    def finish(pairs: list[Pair], verdicts: list[typing.Any]) -> typing.Any:
        return rebuild(container, (pair for pair, verdict in zip(pairs, verdicts) if verdict), kind)

    return settle_each(call, container, kind, finish)


async def _filter_chunks(call: Callable[..., typing.Any], source: typing.Any) -> AsyncIterator[typing.Any]:
    async with contextlib.aclosing(pull(source)) as chunks:
        async for chunk, index in chunks:
            if await resolve(call(chunk, index, source)):
                yield chunk


__all__ = ("filter",)
