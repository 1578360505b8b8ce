"""Slicing combinators

skip/take by count, built on itertools.islice. Both are lazy and pull
only what they need."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator

from .._helpers import ensure_count


def skip[T](n: int, items: Iterable[T]) -> Iterator[T]:
    """
    Lazy sequence without the first n items.

    Fewer than n items gives an empty sequence. Infinite-safe: the first
    n items are dropped on the first pull, the rest stream through.
    """
    count = ensure_count(n, operation="skip")
    return itertools.islice(items, count, None)


def take[T](n: int, items: Iterable[T]) -> Iterator[T]:
    """
    Lazy sequence of at most the first n items.

    Stops pulling right after the n-th item, so take() is the way to make
    an infinite source finite:

        list(take(3, itertools.count()))  # [0, 1, 2]
    """
    count = ensure_count(n, operation="take")
    return itertools.islice(items, count)


__all__ = ("skip", "take")
