"""
Functional combinators that do not care whether anything is async.

Every operator returns a plain value when all of its inputs are settled and
a single awaitable Deferred as soon as one of them is pending, so the same
pipeline serves synchronous and asynchronous callers.

Architecture:
- lift: the resolution kernel (is_pending, settle, chain, guard, scan)
- container: classification plus enumerate/rebuild per container kind
- collection: map, filter, reduce, find, some, every, for_each
- match: declarative specs compiled into predicates
- control: curry, compose, if_else and the boolean helpers
"""

import logging

# Core types
from ._types import Callback, MaybePending, Predicate, Spec

# Errors
from ._errors import StreamConsumedError, StreamRebuildError, UnsupportedContainerError, UsageError

# Internal helpers
from . import _helpers
from ._helpers import identity

# Resolution kernel
from . import lift
from .lift import Deferred, chain, guard, is_pending, resolve, settle, to_lazy, to_result

# Containers
from . import container
from .container import ContainerKind, Range, Stream, Subscribable, classify, irange

# Pattern matching
from .match import LOOSE, STRICT, MatchPolicy, as_callback, match, match_keys, match_loose

# Control flow
from . import control
from .control import (
    Catch,
    Placeholder,
    and_,
    catch,
    compose,
    curry,
    curry_n,
    eq,
    eqv,
    feed,
    flow,
    if_else,
    not_,
    or_,
    placeholder,
)

# Traversal
from . import collection
from .collection import every, filter, find, for_each, map, reduce, some

# Object helpers
from . import transform
from .transform import args, assoc, merge, param

_ = placeholder
sync = settle

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Callback",
    "MaybePending",
    "Predicate",
    "Spec",
    # Errors
    "StreamConsumedError",
    "StreamRebuildError",
    "UnsupportedContainerError",
    "UsageError",
    # Kernel
    "Deferred",
    "chain",
    "guard",
    "is_pending",
    "resolve",
    "settle",
    "sync",
    "to_lazy",
    "to_result",
    # Containers
    "ContainerKind",
    "Range",
    "Stream",
    "Subscribable",
    "classify",
    "irange",
    # Matching
    "LOOSE",
    "STRICT",
    "MatchPolicy",
    "as_callback",
    "match",
    "match_keys",
    "match_loose",
    # Control
    "Catch",
    "Placeholder",
    "_",
    "and_",
    "catch",
    "compose",
    "curry",
    "curry_n",
    "eq",
    "eqv",
    "feed",
    "flow",
    "if_else",
    "not_",
    "or_",
    "placeholder",
    # Traversal
    "every",
    "filter",
    "find",
    "for_each",
    "map",
    "reduce",
    "some",
    # Objects
    "args",
    "assoc",
    "identity",
    "merge",
    "param",
    # Submodules
    "collection",
    "container",
    "control",
    "lift",
    "transform",
)
