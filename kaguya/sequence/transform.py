"""Transform combinators

Lazy map/filter over any iterable. Nothing is pulled from the source
until the returned iterator is consumed, so infinite sources are fine."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .._helpers import ensure_callable, negate
from .._types import Predicate


def map[T, R](fn: Callable[[T], R], items: Iterable[T]) -> Iterator[R]:
    """
    Lazy sequence of fn(item) for every item, in input order.

    Example:
        from kaguya import map

        list(map(lambda x: x + 1, [1, 2, 3]))  # [2, 3, 4]
    """
    ensure_callable(fn, role="map function")

    def run() -> Iterator[R]:
        for item in items:
            yield fn(item)

    return run()


def filter[T](predicate: Predicate[T], items: Iterable[T]) -> Iterator[T]:
    """
    Lazy sequence of items for which predicate holds, in input order.

    Example:
        from kaguya import filter

        list(filter(lambda x: x % 2 == 1, [1, 2, 3]))  # [1, 3]
    """
    ensure_callable(predicate, role="filter predicate")

    def run() -> Iterator[T]:
        for item in items:
            if predicate(item):
                yield item

    return run()


def filter_not[T](predicate: Predicate[T], items: Iterable[T]) -> Iterator[T]:
    """Lazy sequence of items for which predicate does NOT hold. Dual of filter()."""
    ensure_callable(predicate, role="filter_not predicate")
    return filter(negate(predicate), items)


__all__ = ("map", "filter", "filter_not")
