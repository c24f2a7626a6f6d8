"""
Eager traversal
===============

map, filter and for_each over in-memory containers call the callback for
every entry up front and only wait when assembling the result. Over a
stream, for_each just subscribes and leaves.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable

from .._helpers import spread
from .._types import Callback
from ..container import ContainerKind, as_subscribable, classify, entries
from ..control.curry import curry
from ..lift import Deferred, abandon, chain, is_pending, settle
from ..match import as_callback

logger = logging.getLogger(__name__)

type Pair = tuple[typing.Any, typing.Any]

# subscriptions started by for_each, held until their pump task finishes
_running: set[asyncio.Task[None]] = set()


def settle_each[R](
    call: Callable[..., typing.Any],
    container: typing.Any,
    kind: ContainerKind,
    finish: Callable[[list[Pair], list[typing.Any]], R],
) -> R | Deferred[R]:
    """
    Call call(value, key, container) for every entry, then finish(pairs, results)
    once all results are settled. pairs holds (key, value) in enumeration order.

    A synchronous exception is re-raised unless some earlier callback already
    went pending; then the remaining pending results are abandoned and the
    failure comes back as a failed Deferred.
    """
    pairs: list[Pair] = []
    results: list[typing.Any] = []
    for value, key in entries(container, kind):
        try:
            result = call(value, key, container)
        except Exception as exc:
            if not any(is_pending(earlier) for earlier in results):
                raise
            abandon(results)
            return Deferred.rejected(exc)
        pairs.append((key, value))
        results.append(result)
    return chain(settle(results), lambda settled: finish(pairs, settled))


def _nothing(pairs: list[Pair], results: list[typing.Any]) -> None:
    _ = pairs, results


@curry
def for_each(callback: Callback[typing.Any, typing.Any], container: typing.Any) -> None | Deferred[None]:
    """
    Call callback(value, key, container) for every entry, for its side effects.

    Returns None, or a Deferred resolving to None when some callback went
    pending. Over a stream the subscription is fire-and-forget and None is
    returned right away; a failing callback fails the stream's pump task.
    """
    call = spread(as_callback(callback))
    kind = classify(container)
    if kind is ContainerKind.STREAM:
        _subscribe(call, container)
        return None
    return settle_each(call, container, kind, _nothing)


def _subscribe(call: Callable[..., typing.Any], container: typing.Any) -> None:
    def on_error(exc: Exception) -> None:
        raise exc

    handle = as_subscribable(container).subscribe(
        lambda chunk, index: call(chunk, index, container),
        lambda: None,
        on_error,
    )
    if isinstance(handle, asyncio.Task):
        _running.add(handle)
        handle.add_done_callback(_running.discard)
    logger.debug("for_each subscribed to %r", container)


__all__ = ("for_each", "settle_each")
