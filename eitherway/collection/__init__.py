from .each import for_each
from .filter import filter
from .find import every, find, some
from .fold import reduce
from .map import map

__all__ = (
    "every",
    "filter",
    "find",
    "for_each",
    "map",
    "reduce",
    "some",
)
