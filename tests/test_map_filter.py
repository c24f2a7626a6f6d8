import asyncio
from collections import ChainMap, OrderedDict, UserDict
from types import SimpleNamespace

import pytest

from eitherway import Deferred, Stream, filter, identity, irange, map, reduce


def later(value):
    return asyncio.sleep(0, result=value)


def collect(stream):
    return reduce(lambda acc, chunk: [*acc, chunk], [], stream)


class Boom(Exception):
    pass


# ============================================================================
# map
# ============================================================================


def test_map_sequence():
    assert map(lambda x: x * 2, [1, 2, 3, 4, 5]) == [2, 4, 6, 8, 10]
    assert map(lambda value, key: value * key, [1, 2, 3, 4, 5]) == [0, 2, 6, 12, 20]
    assert map(lambda x: x + 1, (1, 2)) == (2, 3)


def test_map_mapping():
    assert map(lambda x: x * 2, {"one": 1, "two": 2}) == {"one": 2, "two": 4}
    assert map(lambda value, key: key, {"one": 1, "two": 2}) == {"one": "one", "two": "two"}
    assert map(lambda x: x.upper(), SimpleNamespace(name="ann")) == {"name": "ANN"}


def test_map_set_and_association():
    assert map(lambda x: x * 2, {1, 2, 3}) == {2, 4, 6}

    result = map(lambda x: x * 2, OrderedDict([(1, 1), ("two", 2)]))
    assert isinstance(result, OrderedDict)
    assert list(result.items()) == [(1, 2), ("two", 4)]


def test_map_passes_container_as_third_argument():
    source = [1, 2]
    assert map(lambda value, key, container: container is source, source) == [True, True]


@pytest.mark.parametrize(
    "container",
    [[1, 2, 3], (1, 2), {"a": 1}, {1, 2}, frozenset({3}), OrderedDict(b=2, a=1), irange(3, -1)],
)
def test_map_identity_keeps_kind_and_order(container):
    result = map(identity, container)
    assert type(result) is type(container)
    assert list(result) == list(container)
    assert result == container


def test_map_is_curried():
    double = map(lambda x: x * 2)
    assert double([1, 2]) == [2, 4]
    assert double({"a": 1}) == {"a": 2}


@pytest.mark.asyncio
async def test_map_async_callback():
    result = map(lambda x: later(x * 2), [1, 2, 3])
    assert isinstance(result, Deferred)
    assert await result == [2, 4, 6]
    assert await map(lambda x: later(x * 2), {"one": 1, "three": 3}) == {"one": 2, "three": 6}
    assert await map(lambda x: later(x * 2), {1, 2}) == {2, 4}


@pytest.mark.asyncio
async def test_map_pending_elements_and_container():
    assert await map(identity, [1, later(2)]) == [1, 2]
    assert await map(lambda x: x + 1, later([1, 2])) == [2, 3]


def test_map_sync_failure_is_synchronous():
    with pytest.raises(ZeroDivisionError):
        map(lambda x: 1 / x, [1, 0])


@pytest.mark.asyncio
async def test_map_sync_failure_after_pending_is_deferred():
    result = map(lambda x: later(x) if x else 1 / x, [1, 0])
    assert isinstance(result, Deferred)
    with pytest.raises(ZeroDivisionError):
        await result


@pytest.mark.asyncio
async def test_map_stream():
    doubled = map(lambda x: str(int(x) * 2), Stream.of(["1", "2", "3"]))
    assert isinstance(doubled, Stream)
    assert await collect(doubled) == ["2", "4", "6"]

    doubled = map(lambda x: later(x * 2), Stream.of([1, 2, 3]))
    assert [chunk async for chunk in doubled] == [2, 4, 6]


@pytest.mark.asyncio
async def test_map_stream_failure_fails_the_consumer():
    error = Boom()
    mapped = map(lambda _: Deferred.rejected(error), Stream.of(["1", "2", "3"]))
    with pytest.raises(Boom) as info:
        await collect(mapped)
    assert info.value is error


# ============================================================================
# filter
# ============================================================================


def test_filter_sequence_and_mapping():
    assert filter(lambda x: x < 0, [1, -2, 3, -4]) == [-2, -4]
    assert filter(lambda x: x < 0, (1, -1)) == (-1,)
    assert filter(lambda value: "s" in value, {"one": "uno", "two": "dos"}) == {"two": "dos"}
    assert filter(lambda value, key: key > 1, ["a", "b", "c"]) == ["c"]


def test_filter_uses_truthiness():
    assert filter(identity, [0, 1, "", "a", None, [1]]) == [1, "a", [1]]


def test_filter_keeps_set_and_association_kind():
    kept = filter(lambda x: x >= 0, {-1, 0, 1})
    assert isinstance(kept, set)
    assert kept == {0, 1}

    source = OrderedDict([("one", 1), ("minus", -1), ("two", 2)])
    kept = filter(lambda x: x >= 0, source)
    assert isinstance(kept, OrderedDict)
    assert list(kept.items()) == [("one", 1), ("two", 2)]


def test_filter_association_does_not_touch_input():
    source = UserDict({"a": 1, "b": -1, "c": 2})
    kept = filter(lambda x: x > 0, source)
    assert isinstance(kept, UserDict)
    assert dict(kept) == {"a": 1, "c": 2}
    assert dict(source) == {"a": 1, "b": -1, "c": 2}


def test_filter_chain_map_drops_parent_entries():
    kept = filter(lambda x: x > 0, ChainMap({}, {"keep": 1, "drop": -1}))
    assert "drop" not in kept
    assert dict(kept) == {"keep": 1}


def test_filter_range():
    assert filter(lambda n: n > 3, irange(1, 6)) == irange(4, 6)
    assert filter(lambda n: n % 2, irange(1, 6)) == [1, 3, 5]


def test_filter_with_match_spec():
    users = [
        {"name": "ann", "active": True},
        {"name": "bob", "active": False},
        {"name": "eve", "active": True, "admin": True},
    ]
    assert filter({"name": str, "active": True}, users) == [users[0]]
    assert filter(int, [1, "1", 2.0, True, 3]) == [1, 3]


@pytest.mark.asyncio
async def test_filter_async_callback():
    assert await filter(lambda x: later(x < 0), [1, -2, 3]) == [-2]
    assert await filter(lambda x: x < 0 or later(False), [1, -2, 3]) == [-2]
    assert await filter(lambda x: later(x >= 0), {-1, 2}) == {2}


@pytest.mark.asyncio
async def test_filter_stream_then_reduce():
    evens = filter(lambda x: (int(x) + 1) % 2, Stream.of(["1", "2", "3", "4", "5", "6"]))
    assert await collect(evens) == ["2", "4", "6"]

    evens = filter(lambda x: later((int(x) + 1) % 2), Stream.of(["1", "2", "3", "4", "5", "6"]))
    assert await collect(evens) == ["2", "4", "6"]


@pytest.mark.asyncio
async def test_filter_stream_failure_stops_processing():
    error = Boom()
    seen = []

    def keep(chunk):
        seen.append(chunk)
        if int(chunk) > 4:
            raise error
        return True

    kept = filter(keep, Stream.of(["1", "2", "3", "4", "5", "6"]))
    with pytest.raises(Boom) as info:
        await collect(kept)
    assert info.value is error
    assert seen == ["1", "2", "3", "4", "5"]
