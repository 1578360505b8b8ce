"""
Curried (partial application) forms.

Every combinator whose leading argument is not the sequence gets a
constructor here that fixes the leading argument(s) and returns a
function awaiting the rest.

Examples:
    from kaguya import curried as C

    inc_all = C.map(lambda x: x + 1)
    evens = C.filter(lambda x: x % 2 == 0)
    first_two = C.take(2)

    list(first_two(evens(inc_all([1, 2, 3, 4, 5]))))  # [2, 4]

    # Curried forms are unary, so they compose:
    from kaguya import pipe
    pipeline = pipe(inc_all, evens, first_two, list)

    # Folds support three shapes
    C.foldl(5)(lambda acc, x: acc * x, [1, 2, 3])   # 30
    C.foldl(6, lambda acc, x: acc - x)([1, 2, 3])   # 0
    C.foldl_step(0)(lambda acc, x: acc + x)([1, 2, 3])  # 6
"""

from .fold import foldl, foldl_step, foldr, foldr_step
from .slicing import skip, take
from .transform import filter, filter_not, map, tap

__all__ = (
    # Transform
    "map",
    "filter",
    "filter_not",
    "tap",
    # Slicing
    "skip",
    "take",
    # Folds
    "foldl",
    "foldl_step",
    "foldr",
    "foldr_step",
)
