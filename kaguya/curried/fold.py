"""
Curried fold combinators
========================

Три формы каррирования для каждой свёртки:

    foldl(init)(fn, items)        # seed only
    foldl(init, fn)(items)        # seed + function
    foldl_step(init)(fn)(items)   # step: one argument per call

Same shapes for foldr / foldr_step.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._helpers import ensure_callable
from .._types import Folder
from ..sequence import fold as _fold

type Fold = Callable[[Folder[typing.Any, typing.Any], Iterable[typing.Any]], typing.Any]
type FoldItems[A, T] = Callable[[Iterable[T]], A]


def _curry[A, T](
    run: Callable[[A, Folder[A, T], Iterable[T]], A],
    init: A,
    fn: Folder[A, T] | None,
    *,
    role: str,
) -> Fold | FoldItems[A, T]:
    if fn is None:

        def awaiting_fn_and_items(fn: Folder[A, T], items: Iterable[T]) -> A:
            return run(init, fn, items)

        return awaiting_fn_and_items

    ensure_callable(fn, role=role)

    def awaiting_items(items: Iterable[T]) -> A:
        return run(init, fn, items)

    return awaiting_items


def _step[A, T](
    run: Callable[[A, Folder[A, T], Iterable[T]], A],
    init: A,
    *,
    role: str,
) -> Callable[[Folder[A, T]], FoldItems[A, T]]:
    def awaiting_fn(fn: Folder[A, T]) -> FoldItems[A, T]:
        ensure_callable(fn, role=role)

        def awaiting_items(items: Iterable[T]) -> A:
            return run(init, fn, items)

        return awaiting_items

    return awaiting_fn


# ============================================================================
# foldl
# ============================================================================


@typing.overload
def foldl[A](init: A, /) -> Callable[[Folder[A, typing.Any], Iterable[typing.Any]], A]: ...


@typing.overload
def foldl[A, T](init: A, fn: Folder[A, T], /) -> FoldItems[A, T]: ...


def foldl[A, T](init: A, fn: Folder[A, T] | None = None, /) -> Fold | FoldItems[A, T]:
    """
    Curried foldl().

    Example:
        product_from_5 = foldl(5)
        product_from_5(lambda acc, x: acc * x, [1, 2, 3])  # 30

        countdown = foldl(6, lambda acc, x: acc - x)
        countdown([1, 2, 3])  # 0
    """
    return _curry(_fold.foldl, init, fn, role="foldl function")


def foldl_step[A](init: A) -> Callable[[Folder[A, typing.Any]], FoldItems[A, typing.Any]]:
    """
    Three-stage curried foldl(): foldl_step(init)(fn)(items).

    Example:
        total = foldl_step(0)(lambda acc, x: acc + x)
        total([1, 2, 3])  # 6
    """
    return _step(_fold.foldl, init, role="foldl function")


# ============================================================================
# foldr
# ============================================================================


@typing.overload
def foldr[A](init: A, /) -> Callable[[Folder[A, typing.Any], Iterable[typing.Any]], A]: ...


@typing.overload
def foldr[A, T](init: A, fn: Folder[A, T], /) -> FoldItems[A, T]: ...


def foldr[A, T](init: A, fn: Folder[A, T] | None = None, /) -> Fold | FoldItems[A, T]:
    """
    Curried foldr(). Accumulator first, items right to left.

    Example:
        join = foldr("This is:", lambda acc, x: acc + " " + x)
        join(["Houraisan", "Kaguya"])  # "This is: Kaguya Houraisan"
    """
    return _curry(_fold.foldr, init, fn, role="foldr function")


def foldr_step[A](init: A) -> Callable[[Folder[A, typing.Any]], FoldItems[A, typing.Any]]:
    """Three-stage curried foldr(): foldr_step(init)(fn)(items)."""
    return _step(_fold.foldr, init, role="foldr function")


__all__ = ("foldl", "foldl_step", "foldr", "foldr_step")
