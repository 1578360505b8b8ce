"""Internal helpers for kaguya.

Small functions shared by the composition and sequence layers.
Not part of the public API."""

from __future__ import annotations

import operator
import typing
from collections.abc import Callable

from ._errors import ArityError
from ._types import Order, Predicate


def negate[T](predicate: Predicate[T]) -> Predicate[T]:
    """Invert predicate: negate(p)(x) == not p(x)."""

    def negated(x: T) -> bool:
        return not predicate(x)

    return negated


def ensure_callable(fn: object, *, role: str) -> None:
    """Raise TypeError at construction time instead of at first call."""
    if not callable(fn):
        raise TypeError(f"{role} must be callable, got {type(fn).__name__}")


def ensure_chain(fns: tuple[Callable[[typing.Any], typing.Any], ...]) -> None:
    """Composition needs two or more callables; checked when the chain is built."""
    if len(fns) < 2:
        raise ArityError(len(fns))
    for fn in fns:
        ensure_callable(fn, role="composed function")


def application_order[F](fns: tuple[F, ...], order: Order) -> tuple[F, ...]:
    # "forward" applies fns[0] first, "reverse" applies fns[-1] first
    if order == "forward":
        return fns
    return fns[::-1]


def ensure_count(n: int, *, operation: str) -> int:
    """Validated skip/take count: an int (or __index__ object), never negative."""
    try:
        count = operator.index(n)
    except TypeError:
        raise TypeError(f"{operation}() count must be an integer, got {type(n).__name__}") from None
    if count < 0:
        raise ValueError(f"{operation}() count must be non-negative, got {count}")
    return count


def callable_name(fn: Callable[..., typing.Any]) -> str:
    """Human-readable name of a callable (used for traced steps)."""
    name = getattr(fn, "__name__", None)
    if isinstance(name, str):
        return name
    return repr(fn)


__all__ = (
    "negate",
    "ensure_callable",
    "ensure_chain",
    "application_order",
    "ensure_count",
    "callable_name",
)
