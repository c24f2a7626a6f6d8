"""
Container adapters
==================

Capability table indexed by ContainerKind:

    entries(container)                -> iterator of (value, key)
    rebuild(container, [(key, value)]) -> new container of the same kind

Operators never look at concrete container types; they classify once and
go through ADAPTERS.
"""

from __future__ import annotations

import collections
import itertools
import typing
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass

from .._errors import StreamRebuildError
from .kinds import ContainerKind, classify
from .range import Range

type Entries = Iterator[tuple[typing.Any, typing.Any]]
type Pairs = Iterable[tuple[typing.Any, typing.Any]]


@dataclass(frozen=True, slots=True)
class Adapter:
    """Enumerate/rebuild pair for one container kind."""

    entries: Callable[[typing.Any], Entries]
    rebuild: Callable[[typing.Any, Pairs], typing.Any]


# ============================================================================
# entries
# ============================================================================


def _indexed(container: Iterable[typing.Any]) -> Entries:
    return ((value, index) for index, value in enumerate(container))


def _keyed(container: typing.Any) -> Entries:
    source = container if isinstance(container, Mapping) else vars(container)
    return ((value, key) for key, value in source.items())


def _members(container: Iterable[typing.Any]) -> Entries:
    # sets have no independent key
    return ((value, value) for value in container)


def _no_entries(container: typing.Any) -> Entries:
    raise StreamRebuildError(container)


# ============================================================================
# rebuild
# ============================================================================


def _rebuild_sequence(container: typing.Any, pairs: Pairs) -> list[typing.Any] | tuple[typing.Any, ...]:
    values = [value for _, value in pairs]
    return tuple(values) if isinstance(container, tuple) else values


def _rebuild_mapping(container: typing.Any, pairs: Pairs) -> dict[typing.Any, typing.Any]:
    _ = container
    return dict(pairs)


def _rebuild_association(container: Mapping[typing.Any, typing.Any], pairs: Pairs) -> Mapping[typing.Any, typing.Any]:
    """
    Fresh instance of the container's class holding only pairs.

    Layered mappings such as ChainMap come back with a single layer; classes
    that cannot be built empty or from a dict give a plain dict.
    """
    data = dict(pairs)
    if isinstance(container, collections.defaultdict):
        return type(container)(container.default_factory, data)
    try:
        rebuilt = type(container)()
    except TypeError:
        rebuilt = None
    if isinstance(rebuilt, MutableMapping):
        for key, value in data.items():
            rebuilt[key] = value
        return rebuilt
    try:
        return type(container)(data)  # type: ignore[call-arg]
    except TypeError:
        return data


def _rebuild_set(container: typing.Any, pairs: Pairs) -> set[typing.Any] | frozenset[typing.Any]:
    values = (value for _, value in pairs)
    return frozenset(values) if isinstance(container, frozenset) else set(values)


def _rebuild_range(container: Range, pairs: Pairs) -> Range | list[typing.Any]:
    """
    Still a Range when the values form a unit-step integer run, list otherwise.
    """
    _ = container
    values = [value for _, value in pairs]
    if not values or not all(type(value) is int for value in values):
        return values
    if len(values) > 1:
        step = values[1] - values[0]
        if step not in (1, -1):
            return values
        if any(right - left != step for left, right in itertools.pairwise(values)):
            return values
    return Range(values[0], values[-1])


def _rebuild_stream(container: typing.Any, pairs: Pairs) -> typing.Never:
    _ = pairs
    raise StreamRebuildError(container)


ADAPTERS: dict[ContainerKind, Adapter] = {
    ContainerKind.SEQUENCE: Adapter(entries=_indexed, rebuild=_rebuild_sequence),
    ContainerKind.MAPPING: Adapter(entries=_keyed, rebuild=_rebuild_mapping),
    ContainerKind.SET: Adapter(entries=_members, rebuild=_rebuild_set),
    ContainerKind.ASSOCIATION: Adapter(entries=_keyed, rebuild=_rebuild_association),
    ContainerKind.RANGE: Adapter(entries=_indexed, rebuild=_rebuild_range),
    ContainerKind.STREAM: Adapter(entries=_no_entries, rebuild=_rebuild_stream),
}


def entries(container: typing.Any, kind: ContainerKind | None = None) -> Entries:
    """(value, key) pairs in enumeration order. Keys: index, mapping key, offset, or the member itself for sets."""
    return ADAPTERS[kind or classify(container)].entries(container)


def rebuild(container: typing.Any, pairs: Pairs, kind: ContainerKind | None = None) -> typing.Any:
    """New container of the same kind as container from (key, value) pairs. Later keys win."""
    return ADAPTERS[kind or classify(container)].rebuild(container, pairs)


__all__ = ("ADAPTERS", "Adapter", "entries", "rebuild")
