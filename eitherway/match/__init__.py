from .compile import Matcher, as_callback, match, match_keys, match_loose
from .policy import LOOSE, STRICT, MatchPolicy

__all__ = (
    "LOOSE",
    "STRICT",
    "MatchPolicy",
    "Matcher",
    "as_callback",
    "match",
    "match_keys",
    "match_loose",
)
