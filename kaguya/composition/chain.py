"""
Composition combinators
=======================

compose (справа налево) и pipe (слева направо) поверх одного
неизменяемого значения Composed.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._helpers import application_order, ensure_chain
from .._types import Order


# ============================================================================
# Composed function value
# ============================================================================


@dataclass(frozen=True, slots=True)
class Composed[A, B]:
    """
    Chain of two or more unary functions with an evaluation order tag.

    `fns` keeps the functions exactly as the caller listed them;
    `order` decides which end is applied first:
    - "forward": fns[0] first (pipe)
    - "reverse": fns[-1] first (compose)

    The type chain is checked statically through the compose/pipe overloads.
    Calling a Composed does no checks at all.
    """

    fns: tuple[Callable[[typing.Any], typing.Any], ...]
    order: Order

    @property
    def functions(self) -> tuple[Callable[[typing.Any], typing.Any], ...]:
        """Functions in application order."""
        return application_order(self.fns, self.order)

    def __call__(self, value: A, /) -> B:
        result: typing.Any = value
        for fn in self.functions:
            result = fn(result)
        return result


def _build[A, B](fns: tuple[Callable[[typing.Any], typing.Any], ...], order: Order) -> Composed[A, B]:
    ensure_chain(fns)
    return Composed(fns, order)


# ============================================================================
# compose: right-to-left
# ============================================================================


@typing.overload
def compose[A, B, C](
    f1: Callable[[B], C],
    f2: Callable[[A], B],
    /,
) -> Composed[A, C]: ...


@typing.overload
def compose[A, B, C, D](
    f1: Callable[[C], D],
    f2: Callable[[B], C],
    f3: Callable[[A], B],
    /,
) -> Composed[A, D]: ...


@typing.overload
def compose[A, B, C, D, E](
    f1: Callable[[D], E],
    f2: Callable[[C], D],
    f3: Callable[[B], C],
    f4: Callable[[A], B],
    /,
) -> Composed[A, E]: ...


@typing.overload
def compose[A, B, C, D, E, F](
    f1: Callable[[E], F],
    f2: Callable[[D], E],
    f3: Callable[[C], D],
    f4: Callable[[B], C],
    f5: Callable[[A], B],
    /,
) -> Composed[A, F]: ...


@typing.overload
def compose(
    f1: Callable[[typing.Any], typing.Any],
    f2: Callable[[typing.Any], typing.Any],
    /,
    *fns: Callable[[typing.Any], typing.Any],
) -> Composed[typing.Any, typing.Any]: ...


def compose(*fns: Callable[[typing.Any], typing.Any]) -> Composed[typing.Any, typing.Any]:
    """
    Mathematical composition: the rightmost function runs first.

        compose(f, g, h)(x) == f(g(h(x)))

    Example:
        from kaguya import compose

        f = compose(lambda x: x + 1, lambda x: x * 2)
        f(3)  # 7

    Types may change along the chain, as long as neighbours agree:

        words = compose(len, str.split)
        words("Houraisan Kaguya")  # 2

    NOTE: Fewer than two functions raises ArityError right here,
          not when the result is called.
    """
    return _build(fns, "reverse")


# ============================================================================
# pipe: left-to-right
# ============================================================================


@typing.overload
def pipe[A, B, C](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    /,
) -> Composed[A, C]: ...


@typing.overload
def pipe[A, B, C, D](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    /,
) -> Composed[A, D]: ...


@typing.overload
def pipe[A, B, C, D, E](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    /,
) -> Composed[A, E]: ...


@typing.overload
def pipe[A, B, C, D, E, F](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    /,
) -> Composed[A, F]: ...


@typing.overload
def pipe(
    f1: Callable[[typing.Any], typing.Any],
    f2: Callable[[typing.Any], typing.Any],
    /,
    *fns: Callable[[typing.Any], typing.Any],
) -> Composed[typing.Any, typing.Any]: ...


def pipe(*fns: Callable[[typing.Any], typing.Any]) -> Composed[typing.Any, typing.Any]:
    """
    Data-flow composition: the leftmost function runs first.

        pipe(f, g, h)(x) == h(g(f(x)))

    Example:
        from kaguya import pipe

        f = pipe(lambda x: x + 1, lambda x: x * 2)
        f(3)  # 8

    **Grammar:** `pipe(f, g)` reads as "f, then g".
    """
    return _build(fns, "forward")


__all__ = ("Composed", "compose", "pipe")
