"""
Container classification
========================

Every traversal starts by putting its input into exactly one ContainerKind.
The checks are structural and run in a fixed order.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import AsyncIterable, Iterable, Mapping, Sequence, Set

from .._errors import UnsupportedContainerError
from .range import Range
from .stream import Subscribable


class ContainerKind(enum.Enum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    ASSOCIATION = "association"
    RANGE = "range"
    STREAM = "stream"


def classify(container: typing.Any) -> ContainerKind:
    """
    Decide the kind of container.

    - subscribe() or async iteration  -> STREAM
    - Range                           -> RANGE
    - Set                             -> SET
    - dict                            -> MAPPING
    - any other Mapping               -> ASSOCIATION
    - str / bytes                     -> rejected
    - Sequence or other iterable      -> SEQUENCE
    - object with attributes          -> MAPPING (over vars())

    Only Range is the range kind; a builtin range is a plain SEQUENCE and
    rebuilds to a list.

    Raises UnsupportedContainerError for anything else.
    """
    if isinstance(container, Subscribable) or isinstance(container, AsyncIterable):
        return ContainerKind.STREAM
    if isinstance(container, Range):
        return ContainerKind.RANGE
    if isinstance(container, Set):
        return ContainerKind.SET
    if type(container) is dict:
        return ContainerKind.MAPPING
    if isinstance(container, Mapping):
        return ContainerKind.ASSOCIATION
    if isinstance(container, (str, bytes, bytearray)):
        raise UnsupportedContainerError(container)
    if isinstance(container, (Sequence, Iterable)):
        return ContainerKind.SEQUENCE
    if hasattr(container, "__dict__") and not callable(container):
        return ContainerKind.MAPPING
    raise UnsupportedContainerError(container)


__all__ = ("ContainerKind", "classify")
