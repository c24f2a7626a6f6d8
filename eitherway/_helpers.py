"""Internal helpers for eitherway.

Common functions used across multiple modules: identity, argument trimming
for callbacks and the strict equality used by matchers and eq()."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def arity(fn: Callable[..., typing.Any], *, required: bool = False) -> int | None:
    """
    Count positional parameters of fn. None means it takes *args.

    With required=True parameters that have defaults are not counted,
    which is the arity curry() waits for.
    Callables without an introspectable signature count as unary.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None if not required else count
        if parameter.kind not in _POSITIONAL:
            continue
        if required and parameter.default is not inspect.Parameter.empty:
            break
        count += 1
    return count


def spread[R](fn: Callable[..., R]) -> Callable[..., R]:
    """
    Adapt fn so it can be called with more positional arguments than it takes.

    Traversal callbacks get (value, key, container); `lambda x: x * 2`
    only sees the value.
    """
    width = arity(fn)
    if width is None:
        return fn

    def call(*args: typing.Any) -> R:
        return fn(*args[:width])

    return call


def same(left: typing.Any, right: typing.Any) -> bool:
    """Strict equality: booleans only ever equal booleans."""
    if isinstance(left, bool) or isinstance(right, bool):
        return left is right
    return bool(left == right)


__all__ = (
    "arity",
    "identity",
    "same",
    "spread",
)
