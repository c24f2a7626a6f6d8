"""
Compose
=======

Left-to-right pipelines. The first step receives the call arguments, every
later step the single result of the one before it.

The pipeline state is a kungfu Result: normal steps run on Ok, catch steps
on Error. A catch step turns the failure back into Ok and the pipeline
carries on after it. Without a catch step the failure is re-raised, either
synchronously or from the returned Deferred, depending on whether anything
pending was met on the way.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._errors import UsageError
from ..lift import Deferred, is_pending, resolve, settle
from .curry import curry


@dataclass(frozen=True, slots=True)
class Catch:
    """Pipeline step that only runs when an earlier step failed."""

    handler: Callable[[Exception], typing.Any]


def catch(handler: Callable[[Exception], typing.Any]) -> Catch:
    """Build a catch step: compose(parse, validate, catch(lambda exc: default))."""
    if not callable(handler):
        raise UsageError(f"catch() needs a callable, got {type(handler).__name__!r}", handler)
    return Catch(handler)


type Step = Callable[..., typing.Any] | Catch | str | int


def compose(*steps: Step) -> Callable[..., typing.Any]:
    """
    Chain steps left to right.

    Steps are callables, catch() steps, or str/int keys (shorthand for
    param(key)). The pipeline's signature is the first step's.

    Example:
        add = lambda a: lambda b: a + b
        mul = lambda a: lambda b: a * b
        compose(add(10), mul(2), add(3))(10)  # 43
    """
    if not steps:
        raise UsageError("compose() needs at least one step")
    head, *rest = (_normalize(step) for step in steps)

    if isinstance(head, Catch):
        first: Callable[[typing.Any], typing.Any] | Catch = head
    else:
        def first(resolved: Sequence[typing.Any]) -> typing.Any:
            return head(*resolved)

    ordered = (first, *rest)

    def pipeline(*args: typing.Any) -> typing.Any:
        return _run(Ok(settle(args)), ordered)

    pipeline.__signature__ = _signature_of(head)  # type: ignore[attr-defined]
    return pipeline


def flow(*steps: Step) -> Callable[..., typing.Any]:
    """
    Swiss-army entry point.

    - one function   -> curry(fn)
    - anything else  -> compose(*steps), strings and ints extract keys
    """
    if len(steps) == 1 and callable(steps[0]) and not isinstance(steps[0], Catch):
        return curry(steps[0])
    return compose(*steps)


def feed(*args: typing.Any) -> Callable[..., typing.Any]:
    """Compose and apply at once: feed(1, 2, 3)(add3, double) == 12."""

    def apply(*steps: Step) -> typing.Any:
        return compose(*steps)(*args)

    return apply


# ============================================================================
# Running
# ============================================================================


def _normalize(step: Step) -> Callable[..., typing.Any] | Catch:
    from ..transform.objects import param

    if isinstance(step, Catch):
        return step
    if isinstance(step, (str, int)) and not isinstance(step, bool):
        return param(step)
    if callable(step):
        return step
    raise UsageError(f"compose() step must be callable, catch() or a key, got {type(step).__name__!r}", step)


def _signature_of(step: Callable[..., typing.Any] | Catch) -> inspect.Signature:
    target = step.handler if isinstance(step, Catch) else step
    try:
        return inspect.signature(target)
    except (TypeError, ValueError):
        return inspect.Signature([inspect.Parameter("args", inspect.Parameter.VAR_POSITIONAL)])


def _attempt(fn: Callable[[typing.Any], typing.Any], value: typing.Any) -> Result[typing.Any, Exception]:
    try:
        return Ok(fn(value))
    except Exception as exc:
        return Error(exc)


async def _attempt_async(fn: Callable[[typing.Any], typing.Any], value: typing.Any) -> Result[typing.Any, Exception]:
    try:
        return Ok(await resolve(fn(value)))
    except Exception as exc:
        return Error(exc)


def _unwrap(outcome: Result[typing.Any, Exception]) -> typing.Any:
    match outcome:
        case Ok(value):
            return value
        case Error(exc):
            raise exc


def _run(outcome: Result[typing.Any, Exception], steps: Sequence[Callable[..., typing.Any] | Catch]) -> typing.Any:
    for index, step in enumerate(steps):
        match outcome:
            case Ok(value) if is_pending(value):
                return Deferred(lambda: _run_async(value, steps[index:]))
            case Ok(value):
                if not isinstance(step, Catch):
                    outcome = _attempt(step, value)
            case Error(exc):
                if isinstance(step, Catch):
                    outcome = _attempt(step.handler, exc)
    return _unwrap(outcome)


async def _run_async(pending: typing.Any, steps: Sequence[Callable[..., typing.Any] | Catch]) -> typing.Any:
    try:
        outcome: Result[typing.Any, Exception] = Ok(await resolve(pending))
    except Exception as exc:
        outcome = Error(exc)
    for step in steps:
        match outcome:
            case Ok(value):
                if not isinstance(step, Catch):
                    outcome = await _attempt_async(step, value)
            case Error(exc):
                if isinstance(step, Catch):
                    outcome = await _attempt_async(step.handler, exc)
    return _unwrap(outcome)


__all__ = ("Catch", "catch", "compose", "feed", "flow")
