"""
Traced compositions
===================

pipe_w/compose_w build the same chains as pipe/compose, but every call
returns a Traced value: the result plus one Step per function applied,
in application order. Callers observe a pipeline this way, without
side effects or a global logger.

    traced = pipe_w(str.split, len)
    out = traced("Houraisan Kaguya")
    out.value                        # 2
    [s.name for s in out.steps]      # ["split", "len"]
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._helpers import application_order, callable_name, ensure_chain
from .._types import Order


@dataclass(frozen=True, slots=True)
class Step:
    """One applied function: its name, what it got and what it returned."""

    name: str
    input: typing.Any
    output: typing.Any


@dataclass(frozen=True, slots=True)
class Traced[T]:
    """Result value with the steps that produced it, oldest first."""

    value: T
    steps: tuple[Step, ...] = ()

    @staticmethod
    def pure[V](value: V) -> Traced[V]:
        """Value with no recorded steps."""
        return Traced(value)

    def then[R](self, fn: Callable[[T], R]) -> Traced[R]:
        """Apply fn and record it as the next step."""
        output = fn(self.value)
        step = Step(callable_name(fn), self.value, output)
        return Traced(output, (*self.steps, step))


@dataclass(frozen=True, slots=True)
class TracedComposed[A, B]:
    """Composed chain whose calls return Traced instead of a bare value."""

    fns: tuple[Callable[[typing.Any], typing.Any], ...]
    order: Order

    @property
    def functions(self) -> tuple[Callable[[typing.Any], typing.Any], ...]:
        """Functions in application order."""
        return application_order(self.fns, self.order)

    def __call__(self, value: A, /) -> Traced[B]:
        traced: Traced[typing.Any] = Traced.pure(value)
        for fn in self.functions:
            traced = traced.then(fn)
        return traced


def _build[A, B](
    fns: tuple[Callable[[typing.Any], typing.Any], ...],
    order: Order,
) -> TracedComposed[A, B]:
    ensure_chain(fns)
    return TracedComposed(fns, order)


def pipe_w(*fns: Callable[[typing.Any], typing.Any]) -> TracedComposed[typing.Any, typing.Any]:
    """pipe() that records every step. Leftmost function runs first."""
    return _build(fns, "forward")


def compose_w(*fns: Callable[[typing.Any], typing.Any]) -> TracedComposed[typing.Any, typing.Any]:
    """compose() that records every step. Rightmost function runs first."""
    return _build(fns, "reverse")


__all__ = ("Step", "Traced", "TracedComposed", "pipe_w", "compose_w")
