"""Side effects over sequences

Effects execute for observation only (logging, metrics, debugging)
and don't change the items flowing through."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .._helpers import ensure_callable


def tap[T](effect: Callable[[T], None], items: Iterable[T]) -> Iterator[T]:
    """
    Lazy pass-through: call effect(item), then yield item unchanged.

    The effect runs when the item is pulled, not before, so
    tap(print, count()) under take(3) prints exactly three lines.

    Example:
        seen: list[int] = []
        list(tap(seen.append, [1, 2]))  # [1, 2]; seen == [1, 2]
    """
    ensure_callable(effect, role="tap effect")

    def run() -> Iterator[T]:
        for item in items:
            effect(item)
            yield item

    return run()


__all__ = ("tap",)
