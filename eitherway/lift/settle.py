"""
Settle
======

Turn a collection of possibly pending values into either the same plain
collection or one pending value for the whole collection.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Mapping, Sequence

from .pending import Deferred, is_pending, resolve


@typing.overload
def settle[K, V](values: Mapping[K, V]) -> Mapping[K, V] | Deferred[Mapping[K, V]]: ...


@typing.overload
def settle[T](values: Sequence[T]) -> Sequence[T] | Deferred[Sequence[T]]: ...


def settle(values: typing.Any) -> typing.Any:
    """
    Wait for every pending element, keep order.

    - Nothing pending: values is returned unchanged (same object).
    - Otherwise: a Deferred resolving to a list/tuple or mapping (matching
      the input) with every element settled. Mappings keep their class when
      it can be built from a dict, other ones settle to a plain dict.
      Elements run concurrently; the first failure to arrive fails the
      whole thing.
    """
    if isinstance(values, Mapping):
        kind = type(values)
        keys = list(values)
        items = [values[key] for key in keys]
        if not any(is_pending(item) for item in items):
            return values

        async def run_mapping() -> Mapping[typing.Any, typing.Any]:
            settled = await asyncio.gather(*(resolve(item) for item in items))
            data = dict(zip(keys, settled))
            if kind is dict:
                return data
            try:
                return kind(data)  # type: ignore[call-arg]
            except TypeError:
                return data

        return Deferred(run_mapping)

    items = list(values)
    if not any(is_pending(item) for item in items):
        return values
    rebuild = tuple if isinstance(values, tuple) else list

    async def run() -> typing.Any:
        settled = await asyncio.gather(*(resolve(item) for item in items))
        return rebuild(settled)

    return Deferred(run)


__all__ = ("settle",)
