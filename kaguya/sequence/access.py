"""
Accessor combinators
====================

head/tail/init/last. Пустой вход даёт Nothing(), а не исключение.
"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Nothing, Option, Some

# Sentinel for exhausted iterators (items may legitimately be None)
_END = object()


def head[T](items: Iterable[T]) -> Option[T]:
    """
    First item, or Nothing() for empty input.

    Pulls at most one item, so head() of an infinite source is fine.

    Example:
        head([1, 2, 3])  # Some(1)
        head([])         # Nothing()
    """
    first = next(iter(items), _END)
    if first is _END:
        return Nothing()
    return Some(first)  # type: ignore[arg-type]


def tail[T](items: Iterable[T]) -> Option[list[T]]:
    """
    Every item but the first, as a list, or Nothing() for empty input.

    A single-item input gives Some([]). Requires finite input.
    """
    it = iter(items)
    if next(it, _END) is _END:
        return Nothing()
    return Some(list(it))


def init[T](items: Iterable[T]) -> Option[list[T]]:
    """
    Every item but the last, as a list, or Nothing() for empty input.

    Requires finite input: the last item is only known at exhaustion.
    """
    collected = list(items)
    if not collected:
        return Nothing()
    return Some(collected[:-1])


def last[T](items: Iterable[T]) -> Option[T]:
    """Final item, or Nothing() for empty input. Requires finite input."""
    found: object = _END
    for item in items:
        found = item
    if found is _END:
        return Nothing()
    return Some(found)  # type: ignore[arg-type]


__all__ = ("head", "tail", "init", "last")
