from .filter import filter_seq
from .map import flat_map, map_seq
from .slice import drop, take

__all__ = (
    "drop",
    "filter_seq",
    "flat_map",
    "map_seq",
    "take",
)
