"""Conditional branching over maybe-pending conditions."""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from .._errors import UsageError
from .._helpers import spread
from ..lift import chain, scan, settle
from ..match import as_callback


def _always(*_: typing.Any) -> bool:
    return True


def if_else(*clauses: typing.Any) -> Callable[..., typing.Any]:
    """
    if_else(cond, then, [cond, then, ...], [otherwise])

    Conditions are tested in order with the call arguments; the first one
    that holds picks its branch. Conditions may be predicates or match
    specs and may answer asynchronously. Callable branches are called with
    the arguments, anything else is returned as-is. No otherwise -> None.

    Example:
        sign = if_else(lambda n: n > 0, 1, lambda n: n < 0, -1, 0)
    """
    if len(clauses) < 2:
        raise UsageError("if_else() needs at least a condition and a branch")
    otherwise = clauses[-1] if len(clauses) % 2 else None
    branches = [
        (spread(as_callback(clauses[index])), clauses[index + 1])
        for index in range(0, len(clauses) - 1, 2)
    ]
    branches.append((_always, otherwise))

    def take(branch: typing.Any, args: Sequence[typing.Any]) -> typing.Any:
        if callable(branch):
            return spread(branch)(*args)
        return branch

    def decide(*args: typing.Any) -> typing.Any:
        return chain(
            settle(args),
            lambda resolved: scan(
                branches,
                lambda clause: clause[0](*resolved),
                stop_on=True,
                hit=lambda clause: take(clause[1], resolved),
                miss=None,
            ),
        )

    return decide


__all__ = ("if_else",)
