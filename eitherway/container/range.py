"""Inclusive integer ranges, ascending or descending."""

from __future__ import annotations

import builtins
from collections.abc import Iterator
from dataclasses import dataclass

from .._errors import UsageError


@dataclass(frozen=True, slots=True)
class Range:
    """
    Lazily generated integers from start to stop, both ends included.

    Direction follows the bounds: Range(5, 1) counts down.
    """

    start: int
    stop: int

    def __post_init__(self) -> None:
        for bound in (self.start, self.stop):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise UsageError(f"Range bounds must be integers, got {bound!r}", bound)

    @property
    def step(self) -> int:
        return 1 if self.stop >= self.start else -1

    def __iter__(self) -> Iterator[int]:
        return iter(builtins.range(self.start, self.stop + self.step, self.step))

    def __len__(self) -> int:
        return abs(self.stop - self.start) + 1

    def __contains__(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        low, high = sorted((self.start, self.stop))
        return low <= value <= high


def irange(start: int, stop: int | None = None) -> Range:
    """
    Inclusive range. One argument counts from 0: irange(-3) is 0, -1, -2, -3.
    """
    if stop is None:
        return Range(0, start)
    return Range(start, stop)


__all__ = ("Range", "irange")
