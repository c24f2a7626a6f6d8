"""
Object helpers
==============

Small curried helpers around keyed lookup and shallow dict building.
Pending arguments are settled by curry() before any of them run.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping, Sequence

from ..control.curry import curry
from ..lift import Deferred, chain, settle


@curry
def param(key: str | int, obj: typing.Any) -> typing.Any:
    """
    Read key from obj: mapping key, sequence index or attribute.

    Missing keys and None objects give None.

    Example:
        param("name")({"name": "ann"})  # "ann"
        param(1, ["a", "b"])             # "b"
    """
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    if isinstance(key, int):
        if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)) and -len(obj) <= key < len(obj):
            return obj[key]
        return None
    return getattr(obj, key, None)


@curry
def assoc(key: typing.Any, value: typing.Any, obj: typing.Any) -> dict[typing.Any, typing.Any] | Deferred[dict[typing.Any, typing.Any]]:
    """
    New dict with key set. A callable value is computed from obj.

    Example:
        assoc("full", lambda u: f"{u['first']} {u['last']}")(user)
    """
    if callable(value):
        value = value(obj)
    return chain(value, lambda settled: {**_as_dict(obj), key: settled})


@curry
def merge(left: typing.Any, right: typing.Any) -> dict[typing.Any, typing.Any] | Deferred[dict[typing.Any, typing.Any]]:
    """Shallow union, right wins. Callable operands are called first."""
    operands = [operand() if callable(operand) else operand for operand in (left, right)]
    return chain(settle(operands), lambda settled: {**_as_dict(settled[0]), **_as_dict(settled[1])})


def args(*values: typing.Any) -> list[typing.Any] | Deferred[list[typing.Any]]:
    """Collect arguments into a list, settling pending ones."""
    return settle(list(values))


def _as_dict(obj: typing.Any) -> dict[typing.Any, typing.Any]:
    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return dict(obj)
    return dict(vars(obj))


__all__ = ("args", "assoc", "merge", "param")
