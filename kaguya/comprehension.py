"""
List comprehension builders
===========================

Four named shapes of one "transform + source + condition" expression.
Unlike the sequence combinators these are terminal: the result is
always a fully built list.

    ls_map_where(f, source, p)  ->  [f(x) for x in source if p(x)]
    ls_where(source, p)         ->  [x for x in source if p(x)]
    ls_map(f, source)           ->  [f(x) for x in source]
    ls(source)                  ->  [x for x in source]

The predicate always sees the untransformed item:

    ls_map_where(lambda x: x + 1, range(1, 6), lambda x: x % 2 == 0)  # [3, 5]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ._helpers import ensure_callable
from ._types import Predicate


def ls_map_where[T, R](
    transform: Callable[[T], R],
    source: Iterable[T],
    predicate: Predicate[T],
) -> list[R]:
    """Transform every item that passes predicate (tested before transform)."""
    ensure_callable(transform, role="comprehension transform")
    ensure_callable(predicate, role="comprehension predicate")
    return [transform(item) for item in source if predicate(item)]


def ls_where[T](source: Iterable[T], predicate: Predicate[T]) -> list[T]:
    """Items that pass predicate."""
    ensure_callable(predicate, role="comprehension predicate")
    return [item for item in source if predicate(item)]


def ls_map[T, R](transform: Callable[[T], R], source: Iterable[T]) -> list[R]:
    """Every item transformed."""
    ensure_callable(transform, role="comprehension transform")
    return [transform(item) for item in source]


def ls[T](source: Iterable[T]) -> list[T]:
    """Plain materialized copy of source."""
    return list(source)


__all__ = ("ls", "ls_map", "ls_map_where", "ls_where")
