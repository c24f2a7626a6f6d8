import asyncio
import inspect

import pytest

from eitherway import Deferred, UsageError, _, catch, compose, curry, curry_n, feed, flow, placeholder


def later(value):
    return asyncio.sleep(0, result=value)


def add(a):
    return lambda b: a + b


def mul(a):
    return lambda b: a * b


# ============================================================================
# curry
# ============================================================================


def test_curry_any_grouping():
    add_mul = curry(lambda a, b, c: (a + b) * c)
    assert add_mul(2)(3)(5) == 25
    assert add_mul(2, 3)(5) == 25
    assert add_mul(2)(3, 5) == 25
    assert add_mul(2, 3, 5) == 25


def test_curry_partials_are_independent():
    add_mul = curry(lambda a, b, c: (a + b) * c)
    two = add_mul(2)
    assert two(3)(5) == 25
    assert two(4)(5) == 30
    assert two(3)(1) == 5


@pytest.mark.asyncio
async def test_curry_settles_pending_arguments():
    add_mul = curry(lambda a, b, c: (a + b) * c)
    result = add_mul(2, later(3))(5)
    assert isinstance(result, Deferred)
    assert await result == 25


def test_placeholder():
    push = curry(lambda item, items: [*items, item])
    assert push(_, [1, 2])(3) == [1, 2, 3]
    assert _ is placeholder
    assert repr(_) == "_"

    subtract = curry(lambda a, b, c: a - b - c)
    assert subtract(_, 1, _)(10)(2) == 7
    assert subtract(_, _, 1)(10, 2) == 7


def test_curry_signature_and_name():
    def volume(width, height, depth):
        return width * height * depth

    curried = curry(volume)
    assert curried.__name__ == "volume"
    assert list(inspect.signature(curried).parameters) == ["width", "height", "depth"]
    assert list(inspect.signature(curried(1)).parameters) == ["height", "depth"]
    assert list(inspect.signature(curried(_, 2)).parameters) == ["width", "depth"]


def test_curry_ignores_defaults():
    assert curry(lambda a, b=10: a + b)(1) == 11


def test_curry_n():
    total = curry_n(3, lambda *values: sum(values))
    assert total(1)(2)(3) == 6
    assert total(1, 2, 3) == 6
    assert curry_n(0, lambda: "now")() == "now"


@pytest.mark.parametrize("count", ["2", 2.0, -1, True])
def test_curry_n_count_validation(count):
    with pytest.raises(UsageError):
        curry_n(count, lambda *values: values)


def test_curry_needs_callable():
    with pytest.raises(UsageError) as info:
        curry(5)
    assert info.value.value == 5
    # usage errors are type errors
    assert isinstance(info.value, TypeError)


# ============================================================================
# compose
# ============================================================================


def test_compose():
    assert compose(add(10), mul(2), add(3))(10) == 43


def test_compose_first_step_takes_all_arguments():
    assert compose(lambda a, b: a + b, str)(3, 5) == "8"
    assert list(inspect.signature(compose(lambda a, b: a, str)).parameters) == ["a", "b"]


@pytest.mark.asyncio
async def test_compose_pending_argument_and_steps():
    assert await compose(add(10), mul(2), add(3))(later(10)) == 43
    assert await compose(add(10), lambda b: later(b * 2), add(3))(10) == 43
    assert await compose(lambda a, b: a + b)(3, later(5)) == 8


def test_compose_catch_sync():
    to_int = compose(int, catch(lambda exc: type(exc).__name__))
    assert to_int("12") == 12
    assert to_int("not a number") == "ValueError"


def test_compose_continues_after_catch():
    assert compose(int, catch(lambda exc: 0), add(1))("x") == 1
    # catch steps are skipped when nothing failed
    assert compose(int, catch(lambda exc: 0), add(1))("4") == 5


@pytest.mark.asyncio
async def test_compose_catch_async():
    parse = compose(lambda value: later(value), int, catch(lambda exc: "bad"))
    assert await parse("nope") == "bad"
    assert await parse(later("7")) == 7

    rejected = compose(lambda value: Deferred.rejected(KeyError(value)), catch(lambda exc: exc.args[0]))
    assert await rejected("k") == "k"


def test_compose_without_catch_raises():
    with pytest.raises(ValueError):
        compose(int, add(1))("x")


@pytest.mark.asyncio
async def test_compose_without_catch_fails_pending():
    with pytest.raises(ValueError):
        await compose(int, add(1))(later("x"))


def test_compose_key_steps():
    assert compose("user", "name")({"user": {"name": "ann"}}) == "ann"
    assert compose("items", 0)({"items": ["first"]}) == "first"
    assert compose("missing", "name")({}) is None


def test_compose_rejects_bad_steps():
    with pytest.raises(UsageError):
        compose()
    with pytest.raises(UsageError):
        compose(add(1), 1.5)
    with pytest.raises(UsageError):
        catch("nope")


def test_flow():
    assert flow(lambda a, b: a * b)(2)(3) == 6
    assert flow("a", add(1))({"a": 1}) == 2
    assert flow(add(1), mul(3))(1) == 6


def test_feed():
    assert feed(1, 2, 3)(lambda a, b, c: a + b + c, mul(2)) == 12
