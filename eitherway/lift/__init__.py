"""
Resolution kernel.

Everything that needs to know whether a value is pending goes through here:
    is_pending(v)         - awaitable or not
    settle(values)        - plain collection or one Deferred for all of it
    guard(fn, *args)      - sync exception -> failed Deferred
    chain(v, ok, err)     - continue after v, sync when v is sync
    scan(items, test,...) - ordered short-circuit over maybe-pending verdicts
    to_result / to_lazy   - hand outcomes to kungfu
"""

from __future__ import annotations

from .call import chain, guard
from .down import to_lazy, to_result
from .pending import Deferred, abandon, is_pending, resolve
from .scan import scan
from .settle import settle

__all__ = (
    "Deferred",
    "abandon",
    "chain",
    "guard",
    "is_pending",
    "resolve",
    "scan",
    "settle",
    "to_lazy",
    "to_result",
)
