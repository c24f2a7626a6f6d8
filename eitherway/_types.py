"""
Core type definitions for eitherway.

Aliases shared by the kernel, the adapters and the operators.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# MaybePending = value that is either settled already or will be after await
type MaybePending[T] = T | Awaitable[T]

# Predicate = function that tests a value (the verdict may be pending)
type Predicate[T] = Callable[[T], MaybePending[bool]]

# Callback = traversal callback, called as (value, key, container) trimmed
# to the number of positional parameters it accepts
type Callback[T, R] = Callable[..., MaybePending[R]]

# Spec = anything match() can compile: literal, pattern, class, list, mapping
# or predicate
type Spec = typing.Any

__all__ = (
    "Callback",
    "MaybePending",
    "Predicate",
    "Spec",
)
