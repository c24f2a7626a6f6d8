"""
Logic operators
===============

Boolean combinators that accept pending values and match specs.
and_/or_ test left to right and stop as soon as the answer is known.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import same, spread
from .._types import Spec
from ..lift import Deferred, chain, scan
from ..match import as_callback
from .curry import curry


def _tests(predicates: tuple[Spec, ...]) -> list[Callable[..., typing.Any]]:
    return [spread(as_callback(predicate)) for predicate in predicates]


def and_(*predicates: Spec) -> Callable[..., bool | Deferred[bool]]:
    """All predicates hold: and_(re.compile("^[a-z]+$"), lambda s: "oo" in s)."""
    tests = _tests(predicates)

    def all_hold(*args: typing.Any) -> bool | Deferred[bool]:
        return scan(tests, lambda test: test(*args), stop_on=False, hit=lambda _: False, miss=True)

    return all_hold


def or_(*predicates: Spec) -> Callable[..., bool | Deferred[bool]]:
    """Some predicate holds."""
    tests = _tests(predicates)

    def any_holds(*args: typing.Any) -> bool | Deferred[bool]:
        return scan(tests, lambda test: test(*args), stop_on=True, hit=lambda _: True, miss=False)

    return any_holds


def not_(value: typing.Any) -> bool | Deferred[bool]:
    """Negate a possibly pending value."""
    return chain(value, lambda settled: not settled)


@curry
def eq(left: typing.Any, right: typing.Any) -> bool:
    """Strict equality: eq(1, "1") and eq(1, True) are both False."""
    return same(left, right)


@curry
def eqv(left: typing.Any, right: typing.Any) -> bool:
    """Loose equality: numbers, numeric strings and booleans compare by value."""
    if same(left, right) or left == right:
        return True
    try:
        return float(left) == float(right)
    except (TypeError, ValueError):
        return False


__all__ = ("and_", "eq", "eqv", "not_", "or_")
