from .objects import args, assoc, merge, param

__all__ = (
    "args",
    "assoc",
    "merge",
    "param",
)
