"""
Pending values
==============

The one place that decides whether something is "not yet available".

Any awaitable counts as pending: coroutines, asyncio futures and tasks,
kungfu's LazyCoroResult or our own Deferred. Deferred is what every
combinator hands back when it could not finish synchronously.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import typing
from collections.abc import Callable, Coroutine, Iterable

logger = logging.getLogger(__name__)


def is_pending(value: typing.Any) -> bool:
    """True iff value is awaitable. None and every plain value are settled."""
    return inspect.isawaitable(value)


class Deferred[T]:
    """
    Pending value produced by the kernel.

    Wraps a zero-argument coroutine function. The computation starts on the
    first await and its outcome (value or exception) is replayed to every
    awaiter after that, so it settles exactly once no matter how many
    continuations observe it.
    """

    __slots__ = ("_thunk", "_future")

    def __init__(self, thunk: Callable[[], Coroutine[typing.Any, typing.Any, T]], /) -> None:
        self._thunk = thunk
        self._future: asyncio.Future[T] | None = None

    @staticmethod
    def resolved[V](value: V) -> Deferred[V]:
        """Pending value that succeeds with value."""

        async def run() -> V:
            return value

        return Deferred(run)

    @staticmethod
    def rejected(error: BaseException) -> Deferred[typing.Never]:
        """Pending value that fails with error."""

        async def run() -> typing.Never:
            raise error

        return Deferred(run)

    @property
    def started(self) -> bool:
        """Whether some awaiter already started the computation."""
        return self._future is not None

    def __await__(self) -> typing.Generator[typing.Any, None, T]:
        if self._future is None:
            self._future = asyncio.ensure_future(self._thunk())
        return self._future.__await__()

    def __repr__(self) -> str:
        if self._future is None:
            state = "lazy"
        elif not self._future.done():
            state = "running"
        elif self._future.cancelled():
            state = "cancelled"
        elif self._future.exception() is not None:
            state = "failed"
        else:
            state = "done"
        return f"Deferred<{state}>"


async def resolve[T](value: T | typing.Awaitable[T]) -> T:
    """Await value until it is no longer pending."""
    while is_pending(value):
        value = await typing.cast(typing.Awaitable[T], value)
    return typing.cast(T, value)


def abandon(values: Iterable[typing.Any]) -> None:
    """
    Close coroutines that will never be awaited.

    Used when a synchronous failure aborts a traversal after some callbacks
    already returned coroutines.
    """
    for value in values:
        if inspect.iscoroutine(value):
            logger.debug("abandoning %r after an earlier failure", value)
            value.close()


__all__ = ("Deferred", "abandon", "is_pending", "resolve")
