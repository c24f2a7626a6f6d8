from .branch import if_else
from .compose import Catch, catch, compose, feed, flow
from .curry import Placeholder, curry, curry_n, placeholder
from .logic import and_, eq, eqv, not_, or_

__all__ = (
    "Catch",
    "Placeholder",
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
)
