"""
Push streams
============

The only thing the operators need from a stream is one subscription:

    subscribe(on_chunk, on_end, on_error)

on_chunk(chunk, index) is called once per chunk, then exactly one of
on_end() / on_error(exc). Nothing is delivered after end or error.

Stream is the reference implementation over any async iterable. pull()
turns a subscription back into an async iterator for the operators that
consume a stream in order (reduce, find, some, every, derived streams).
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import typing
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable

from kungfu import Error, Ok, Result

from .._errors import StreamConsumedError
from ..lift import Deferred, is_pending, resolve

logger = logging.getLogger(__name__)

type ChunkHandler[T] = Callable[[T, int], typing.Any]
type EndHandler = Callable[[], typing.Any]
type ErrorHandler = Callable[[Exception], typing.Any]


@typing.runtime_checkable
class Subscribable[T](typing.Protocol):
    """Anything with the push-source subscription capability."""

    def subscribe(
        self,
        on_chunk: ChunkHandler[T],
        on_end: EndHandler,
        on_error: ErrorHandler,
    ) -> typing.Any: ...


class Stream[T]:
    """
    Push source over an async iterable, consumed once.

    Chunks are pumped by a task on the running loop once somebody
    subscribes. If on_chunk raises, or returns a pending value that fails,
    the pump stops and reports that failure through on_error.
    """

    __slots__ = ("_source", "_task")

    def __init__(self, source: AsyncIterable[T], /) -> None:
        self._source = source
        self._task: asyncio.Task[None] | None = None

    @classmethod
    def of(cls, items: Iterable[T]) -> Stream[T]:
        """Stream the items of a plain iterable, yielding to the loop between chunks."""

        async def chunks() -> AsyncIterator[T]:
            for item in items:
                await asyncio.sleep(0)
                yield item

        return cls(chunks())

    @property
    def subscribed(self) -> bool:
        return self._task is not None

    def subscribe(
        self,
        on_chunk: ChunkHandler[T],
        on_end: EndHandler,
        on_error: ErrorHandler,
    ) -> asyncio.Task[None]:
        """Start pumping chunks. Returns the pump task; cancelling it stops the stream."""
        if self._task is not None:
            raise StreamConsumedError(self)
        logger.debug("subscribing to %r", self)
        self._task = asyncio.get_running_loop().create_task(self._pump(on_chunk, on_end, on_error))
        return self._task

    async def _pump(self, on_chunk: ChunkHandler[T], on_end: EndHandler, on_error: ErrorHandler) -> None:
        index = 0
        try:
            async for chunk in self._source:
                outcome = on_chunk(chunk, index)
                if is_pending(outcome):
                    await resolve(outcome)
                index += 1
        except Exception as exc:
            logger.debug("%r failed at chunk %d: %r", self, index, exc)
            on_error(exc)
            return
        logger.debug("%r ended after %d chunks", self, index)
        on_end()

    def __aiter__(self) -> AsyncIterator[T]:
        return _chunks_only(pull(self))

    def __repr__(self) -> str:
        return f"Stream({self._source!r})"


def as_subscribable[T](source: Subscribable[T] | AsyncIterable[T]) -> Subscribable[T]:
    """Plain async iterables get wrapped into a Stream."""
    if isinstance(source, Subscribable):
        return source
    return Stream(source)


async def pull[T](source: Subscribable[T] | AsyncIterable[T]) -> AsyncIterator[tuple[T, int]]:
    """
    Subscribe once and yield (chunk, index) pairs in arrival order.

    The chunk handler returns a Deferred that settles once the consumer asks
    for the next chunk, so a source that awaits it (Stream does) runs at most
    one chunk ahead. A failure reported by the source is raised from the
    iterator. Leaving the iterator early cancels the subscription when the
    source returned a cancellable handle (Stream does).
    """
    queue: asyncio.Queue[Result[tuple[T, int], Exception] | None] = asyncio.Queue()

    def on_chunk(chunk: T, index: int) -> Deferred[None]:
        queue.put_nowait(Ok((chunk, index)))
        return Deferred(queue.join)

    handle = as_subscribable(source).subscribe(
        on_chunk,
        lambda: queue.put_nowait(None),
        lambda exc: queue.put_nowait(Error(exc)),
    )
    try:
        while True:
            match await queue.get():
                case None:
                    return
                case Ok(item):
                    yield item
                    queue.task_done()
                case Error(exc):
                    raise exc
    finally:
        cancel = getattr(handle, "cancel", None)
        if callable(cancel):
            cancel()


async def _chunks_only[T](pairs: AsyncIterator[tuple[T, int]]) -> AsyncIterator[T]:
    async with contextlib.aclosing(pairs) as chunks:
        async for chunk, _ in chunks:
            yield chunk


__all__ = ("Stream", "Subscribable", "as_subscribable", "pull")
