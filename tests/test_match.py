import asyncio
import numbers
import re
from types import SimpleNamespace

import pytest

from eitherway import Deferred, MatchPolicy, match, match_keys, match_loose
from eitherway.match import as_callback


def later(value):
    return asyncio.sleep(0, result=value)


class Animal:
    pass


class Dog(Animal):
    pass


def test_literals():
    assert match(1)(1)
    assert not match(1)("1")
    assert match("a")("a")
    assert match((1, 2))((1, 2))
    # booleans only equal booleans
    assert not match(1)(True)
    assert not match(True)(1)
    assert match(False)(False)


def test_none():
    assert match(None)(None)
    assert not match(None)(0)


def test_pattern_searches_stringified_value():
    assert match(re.compile("^a"))("abc")
    assert not match(re.compile("^a"))("bca")
    assert match(re.compile(r"\d"))(42)


def test_classes():
    assert match(int)(1)
    assert not match(int)(True)
    assert match(bool)(True)
    assert match(float)(1.5)
    assert match(numbers.Number)(1.5)
    assert not match(numbers.Number)(False)
    assert match(str)("s")
    assert match(list)([])
    assert not match(list)(())
    assert match(dict)({"a": 1})
    assert match(Animal)(Dog())
    assert not match(Dog)(Animal())
    assert match(object)(None)


def test_alternatives():
    spec = match([int, None, "n/a"])
    assert spec(1)
    assert spec(None)
    assert spec("n/a")
    assert not spec("other")


def test_mapping_strict():
    is_user = match({"id": int, "email": str, "admin": [True, False]})
    assert is_user({"id": 3, "email": "a@b.c", "admin": False})
    assert not is_user({"id": 3, "email": "a@b.c", "admin": False, "extra": 1})
    assert not is_user({"id": "3", "email": "a@b.c", "admin": False})
    assert not is_user([1, 2])
    assert not is_user("id")


def test_mapping_loose_and_optional_keys():
    spec = {"id": int, "nick": [str, None]}
    assert match_loose(spec)({"id": 1, "extra": True})
    assert match(spec)({"id": 1})
    assert not match(spec)({"nick": "x"})
    assert match(spec, policy=MatchPolicy(strict=False))({"id": 1, "other": 2})


def test_nested_mapping_and_objects():
    spec = match({"user": {"name": str}, "tags": list})
    assert spec({"user": {"name": "ann"}, "tags": []})
    assert not spec({"user": {"name": 1}, "tags": []})
    assert match({"name": "ann"})(SimpleNamespace(name="ann"))


def test_predicate_spec():
    assert match(lambda value: value > 1)(2)
    assert match({"age": lambda age: age >= 18})({"age": 20})
    assert match(lambda value: value)(1) is True


@pytest.mark.asyncio
async def test_pending_predicate():
    result = match(lambda value: later(value > 1))(2)
    assert isinstance(result, Deferred)
    assert await result is True

    assert await match({"a": lambda value: later(value), "b": int})({"a": 1, "b": 2}) is True
    assert await match({"a": lambda value: later(value), "b": int})({"a": 1, "b": "2"}) is False


@pytest.mark.asyncio
async def test_alternatives_keep_order_with_pending_branch():
    tested = []

    def slow(value):
        tested.append("slow")
        return asyncio.sleep(0.01, result=False)

    def fast(value):
        tested.append("fast")
        return True

    assert await match([slow, fast])(1) is True
    assert tested == ["slow", "fast"]


def test_match_keys():
    lower = match_keys(re.compile("^[a-z]+$"))
    assert lower({"abc": 1, "xyz": 2})
    assert not lower({"abc": 1, "Xyz": 2})
    assert lower({})
    assert not lower(5)
    assert match_keys(str)(SimpleNamespace(a=1))


def test_match_policy_is_validated():
    with pytest.raises(ValueError):
        MatchPolicy(strict="yes")


def test_as_callback():
    def check(value):
        return value

    assert as_callback(check) is check
    assert as_callback(int)(1)
    assert not as_callback({"a": 1})({"a": 2})
