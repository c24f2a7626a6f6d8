"""
Curry
=====

Arity-aware currying with placeholders. Every partial application is a new
closure over an immutable tuple of filled slots; nothing is shared between
calls. Once all slots are filled, pending arguments are settled before the
target runs.
"""

from __future__ import annotations

import functools
import inspect
import typing
from collections.abc import Callable

from .._errors import UsageError
from .._helpers import arity
from ..lift import chain, settle


class Placeholder:
    """Marks a slot to be filled by a later call: push(_, [1, 2, 3])(4)."""

    __slots__ = ()
    _instance: typing.ClassVar[Placeholder | None] = None

    def __new__(cls) -> Placeholder:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "_"

    def __reduce__(self) -> str:
        return "placeholder"


placeholder = Placeholder()

_END = object()


def curry[R](fn: Callable[..., R]) -> Callable[..., typing.Any]:
    """
    Curry fn over its required positional parameters.

    Example:
        add_mul = curry(lambda a, b, c: (a + b) * c)
        add_mul(2)(3)(5)       # 25
        add_mul(2, 3)(5)       # 25
        await add_mul(2, asyncio.sleep(0, result=3))(5)  # 25
    """
    if not callable(fn):
        raise UsageError(f"curry() needs a callable, got {type(fn).__name__!r}", fn)
    return curry_n(arity(fn, required=True) or 0, fn)


def curry_n[R](n: int, fn: Callable[..., R]) -> Callable[..., typing.Any]:
    """Curry fn over exactly n positional slots."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise UsageError(f"curry_n() count must be a non-negative integer, got {n!r}", n)
    if not callable(fn):
        raise UsageError(f"curry_n() needs a callable, got {type(fn).__name__!r}", fn)
    return _curried(fn, n, _parameter_names(fn, n), ())


def _curried[R](
    fn: Callable[..., R],
    n: int,
    names: tuple[str, ...],
    filled: tuple[typing.Any, ...],
) -> Callable[..., typing.Any]:
    @functools.wraps(fn)
    def curried(*args: typing.Any) -> typing.Any:
        merged = _merge(filled, args)
        if _open_slots(merged, n):
            return _curried(fn, n, names, merged)
        return chain(settle(merged), lambda resolved: fn(*resolved))

    curried.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
        [inspect.Parameter(names[slot], inspect.Parameter.POSITIONAL_ONLY) for slot in _open_slots(filled, n)]
    )
    return curried


def _merge(filled: tuple[typing.Any, ...], args: tuple[typing.Any, ...]) -> tuple[typing.Any, ...]:
    """New arguments fill placeholder slots first, left to right, then append."""
    incoming = iter(args)
    merged = list(filled)
    for slot, value in enumerate(merged):
        if value is placeholder:
            next_value = next(incoming, _END)
            if next_value is _END:
                break
            merged[slot] = next_value
    merged.extend(incoming)
    return tuple(merged)


def _open_slots(filled: tuple[typing.Any, ...], n: int) -> list[int]:
    return [slot for slot in range(n) if slot >= len(filled) or filled[slot] is placeholder]


def _parameter_names(fn: Callable[..., typing.Any], n: int) -> tuple[str, ...]:
    try:
        parameters = list(inspect.signature(fn).parameters.values())
    except (TypeError, ValueError):
        parameters = []
    names = [
        parameter.name
        for parameter in parameters
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    return tuple(names[slot] if slot < len(names) else f"arg{slot}" for slot in range(n))


__all__ = ("Placeholder", "curry", "curry_n", "placeholder")
