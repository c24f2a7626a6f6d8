"""
Pattern matcher
===============

Compile a declarative spec into a predicate. Compilation happens once in
match(); the returned predicate can be called any number of times.

Spec shapes, checked in this order:

    None                 -> value is None (also how a missing key looks)
    re.Pattern           -> pattern found somewhere in str(value)
    list                 -> any alternative matches (ordered, short-circuit)
    class                -> kind test (bool/int/float/str/list/dict special-cased)
    Mapping              -> every spec key matches (strict: no extra keys)
    other callables      -> user predicate, verdict may be pending
    anything else        -> equality, booleans only equal booleans

A pending leaf verdict makes the whole result a pending bool; alternatives
and keys are still tested strictly in spec order.
"""

from __future__ import annotations

import numbers
import re
import typing
from collections.abc import Callable, Mapping

from .._helpers import same
from .._types import Spec
from ..lift import Deferred, chain, scan
from .policy import LOOSE, STRICT, MatchPolicy

type Matcher = Callable[[typing.Any], bool | Deferred[bool]]

_KIND_TESTS: dict[type, Callable[[typing.Any], bool]] = {
    bool: lambda value: isinstance(value, bool),
    int: lambda value: isinstance(value, int) and not isinstance(value, bool),
    float: lambda value: isinstance(value, float),
    numbers.Number: lambda value: isinstance(value, numbers.Number) and not isinstance(value, bool),
    str: lambda value: isinstance(value, str),
    list: lambda value: isinstance(value, list),
    dict: lambda value: isinstance(value, Mapping),
    object: lambda value: True,
}


def match(spec: Spec, *, policy: MatchPolicy = STRICT) -> Matcher:
    """
    Compile spec into a predicate returning bool, or a pending bool when
    some part of the spec answered asynchronously.

    Example:
        is_user = match({"id": int, "email": str, "admin": [True, False]})
        is_user({"id": 3, "email": "a@b.c", "admin": False})  # True
    """
    return _compile(spec, policy)


def match_loose(spec: Spec) -> Matcher:
    """Like match(), but candidates may carry keys the spec does not name."""
    return _compile(spec, LOOSE)


def match_keys(spec: Spec) -> Matcher:
    """Every key of the candidate must match spec."""
    test = _compile(spec, STRICT)

    def keys_match(candidate: typing.Any) -> bool | Deferred[bool]:
        fields = _fields_of(candidate)
        if fields is None:
            return False
        return scan(list(fields), test, stop_on=False, hit=_false, miss=True)

    return keys_match


def as_callback(spec: Spec) -> Callable[..., typing.Any]:
    """Functions pass through; classes and every other spec go through match()."""
    if callable(spec) and not isinstance(spec, type):
        return spec
    return match(spec)


# ============================================================================
# Compilation
# ============================================================================


def _compile(spec: Spec, policy: MatchPolicy) -> Matcher:
    if spec is None:
        return _is_none
    if isinstance(spec, re.Pattern):
        return _pattern(spec)
    if isinstance(spec, list):
        return _any_of([_compile(alternative, policy) for alternative in spec])
    if isinstance(spec, type):
        return _kind(spec)
    if isinstance(spec, Mapping):
        return _fields(spec, policy)
    if callable(spec):
        return _predicate(spec)
    return _literal(spec)


def _is_none(value: typing.Any) -> bool:
    return value is None


def _false(_: typing.Any) -> bool:
    return False


def _true(_: typing.Any) -> bool:
    return True


def _pattern(pattern: re.Pattern[str]) -> Matcher:
    def test(value: typing.Any) -> bool:
        return pattern.search(str(value)) is not None

    return test


def _any_of(alternatives: list[Matcher]) -> Matcher:
    def test(value: typing.Any) -> bool | Deferred[bool]:
        return scan(alternatives, lambda alternative: alternative(value), stop_on=True, hit=_true, miss=False)

    return test


def _kind(cls: type) -> Matcher:
    kind_test = _KIND_TESTS.get(cls)
    if kind_test is not None:
        return kind_test

    def test(value: typing.Any) -> bool:
        return isinstance(value, cls)

    return test


def _fields_of(candidate: typing.Any) -> Mapping[typing.Any, typing.Any] | None:
    if isinstance(candidate, Mapping):
        return candidate
    if isinstance(candidate, (str, bytes, numbers.Number, type)) or candidate is None:
        return None
    try:
        return vars(candidate)
    except TypeError:
        return None


def _fields(spec: Mapping[typing.Any, Spec], policy: MatchPolicy) -> Matcher:
    checks = [(key, _compile(sub_spec, policy)) for key, sub_spec in spec.items()]

    def test(candidate: typing.Any) -> bool | Deferred[bool]:
        fields = _fields_of(candidate)
        if fields is None:
            return False
        if policy.strict and any(key not in spec for key in fields):
            return False
        return scan(
            checks,
            lambda check: check[1](fields.get(check[0])),
            stop_on=False,
            hit=_false,
            miss=True,
        )

    return test


def _predicate(fn: Callable[[typing.Any], typing.Any]) -> Matcher:
    def test(value: typing.Any) -> bool | Deferred[bool]:
        return chain(fn(value), bool)

    return test


def _literal(expected: typing.Any) -> Matcher:
    def test(value: typing.Any) -> bool:
        return same(value, expected)

    return test


__all__ = ("Matcher", "as_callback", "match", "match_keys", "match_loose")
