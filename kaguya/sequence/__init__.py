from .access import head, init, last, tail
from .effects import tap
from .fold import foldl, foldr, sum, sum_of, sum_range
from .slicing import skip, take
from .transform import filter, filter_not, map

__all__ = (
    # Transform (lazy)
    "map",
    "filter",
    "filter_not",
    "tap",
    # Slicing (lazy)
    "skip",
    "take",
    # Folds (eager)
    "foldl",
    "foldr",
    "sum",
    "sum_range",
    "sum_of",
    # Accessors (Option)
    "head",
    "tail",
    "init",
    "last",
)
