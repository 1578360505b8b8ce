"""Curried transform combinators

Fix the function/predicate now, pass the sequence later:

    inc_all = curried.map(lambda x: x + 1)
    list(inc_all([1, 2, 3]))  # [2, 3, 4]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .._helpers import ensure_callable
from .._types import Predicate
from ..sequence import effects as _effects
from ..sequence import transform as _transform


def map[T, R](fn: Callable[[T], R]) -> Callable[[Iterable[T]], Iterator[R]]:
    """Curried map(): map(fn)(items) == sequence.map(fn, items)."""
    ensure_callable(fn, role="map function")

    def awaiting_items(items: Iterable[T]) -> Iterator[R]:
        return _transform.map(fn, items)

    return awaiting_items


def filter[T](predicate: Predicate[T]) -> Callable[[Iterable[T]], Iterator[T]]:
    """Curried filter(): filter(predicate)(items) == sequence.filter(predicate, items)."""
    ensure_callable(predicate, role="filter predicate")

    def awaiting_items(items: Iterable[T]) -> Iterator[T]:
        return _transform.filter(predicate, items)

    return awaiting_items


def filter_not[T](predicate: Predicate[T]) -> Callable[[Iterable[T]], Iterator[T]]:
    """Curried filter_not()."""
    ensure_callable(predicate, role="filter_not predicate")

    def awaiting_items(items: Iterable[T]) -> Iterator[T]:
        return _transform.filter_not(predicate, items)

    return awaiting_items


def tap[T](effect: Callable[[T], None]) -> Callable[[Iterable[T]], Iterator[T]]:
    """Curried tap()."""
    ensure_callable(effect, role="tap effect")

    def awaiting_items(items: Iterable[T]) -> Iterator[T]:
        return _effects.tap(effect, items)

    return awaiting_items


__all__ = ("map", "filter", "filter_not", "tap")
