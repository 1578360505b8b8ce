"""
Fold combinators
================

Eager folds. Both directions call fn(acc, item): аккумулятор первым,
элемент вторым. foldl идёт слева направо, foldr справа налево.

NOTE: Source must be finite. A fold over itertools.count() never returns;
      bound it with take() first.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable

from .._helpers import ensure_callable
from .._types import Folder


# ============================================================================
# Folds
# ============================================================================


def foldl[A, T](init: A, fn: Folder[A, T], items: Iterable[T]) -> A:
    """
    Left fold: fn(...fn(fn(init, x1), x2)..., xn).

    Empty input returns init unchanged.

    Example:
        foldl(4, lambda acc, x: acc * x, [1, 2, 3])  # 24
        foldl(6, lambda acc, x: acc - x, [1, 2, 3])  # 0
    """
    ensure_callable(fn, role="foldl function")
    acc = init
    for item in items:
        acc = fn(acc, item)
    return acc


def foldr[A, T](init: A, fn: Folder[A, T], items: Iterable[T]) -> A:
    """
    Right fold: fn(...fn(fn(init, xn), xn-1)..., x1).

    Items are visited from the last one back to the first; fn still gets
    the accumulator first. Order matters for non-commutative fn:

        foldr("", lambda acc, x: acc + "<|>" + x, ["Houraisan", "Kaguya"])
        # "<|>Kaguya<|>Houraisan"

    Empty input returns init unchanged.
    """
    ensure_callable(fn, role="foldr function")
    acc = init
    for item in reversed(list(items)):
        acc = fn(acc, item)
    return acc


# ============================================================================
# Sums
# ============================================================================


def sum[T](items: Iterable[T]) -> T | int:
    """Numeric sum, foldl(0, +, items). Empty input gives 0."""
    return foldl(0, operator.add, items)


def sum_range(start: int, end: int) -> int:
    """
    Sum of the inclusive range start..=end.

    sum_range(1, 4) == 1 + 2 + 3 + 4 == 10. start > end is an empty range (0).
    """
    return sum(range(start, end + 1))


def sum_of[T](*values: T) -> T | int:
    """Sum of explicitly listed values: sum_of(1, 2, 3, 4) == 10."""
    return sum(values)


__all__ = ("foldl", "foldr", "sum", "sum_range", "sum_of")
