from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchPolicy:
    """How mapping specs treat candidate keys the spec does not mention."""

    strict: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise ValueError("MatchPolicy.strict must be a bool")


STRICT = MatchPolicy()
LOOSE = MatchPolicy(strict=False)

__all__ = ("LOOSE", "STRICT", "MatchPolicy")
