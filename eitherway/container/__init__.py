from .adapters import ADAPTERS, Adapter, entries, rebuild
from .kinds import ContainerKind, classify
from .range import Range, irange
from .stream import Stream, Subscribable, as_subscribable, pull

__all__ = (
    "ADAPTERS",
    "Adapter",
    "ContainerKind",
    "Range",
    "Stream",
    "Subscribable",
    "as_subscribable",
    "classify",
    "entries",
    "irange",
    "pull",
    "rebuild",
)
