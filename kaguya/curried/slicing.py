"""Curried slicing combinators"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .._helpers import ensure_count
from ..sequence import slicing as _slicing


def skip[T](n: int) -> Callable[[Iterable[T]], Iterator[T]]:
    """Curried skip(): skip(n)(items) == sequence.skip(n, items)."""
    count = ensure_count(n, operation="skip")

    def awaiting_items(items: Iterable[T]) -> Iterator[T]:
        return _slicing.skip(count, items)

    return awaiting_items


def take[T](n: int) -> Callable[[Iterable[T]], Iterator[T]]:
    """Curried take(): take(n)(items) == sequence.take(n, items)."""
    count = ensure_count(n, operation="take")

    def awaiting_items(items: Iterable[T]) -> Iterator[T]:
        return _slicing.take(count, items)

    return awaiting_items


__all__ = ("skip", "take")
