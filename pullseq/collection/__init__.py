from .effects import for_each
from .fold import reduce, to_list
from .search import every, find, some

__all__ = (
    "every",
    "find",
    "for_each",
    "reduce",
    "some",
    "to_list",
)
