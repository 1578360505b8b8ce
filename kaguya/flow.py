"""
Fluent chaining over sequences.

flow(items) wraps an iterable; lazy methods return a new Flow,
terminal methods run the pipeline and return a value.

    from kaguya import flow

    (
        flow(itertools.count(1))
        .filter(lambda x: x % 2 == 0)
        .map(lambda x: x * x)
        .take(3)
        .to_list()
    )  # [4, 16, 36]

NOTE: A Flow over an iterator (generator, count(), another Flow's
      lazy step) is single-pass, like the iterator itself.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from kungfu import Option

from ._types import Folder, Predicate
from .sequence import access, effects, fold, slicing, transform


@dataclass(frozen=True, slots=True)
class Flow[T]:
    """
    Fluent builder for chaining sequence combinators.
    """

    items: Iterable[T]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    # Lazy steps

    def map[R](self, fn: Callable[[T], R]) -> Flow[R]:
        return Flow(transform.map(fn, self.items))

    def filter(self, predicate: Predicate[T]) -> Flow[T]:
        return Flow(transform.filter(predicate, self.items))

    def filter_not(self, predicate: Predicate[T]) -> Flow[T]:
        return Flow(transform.filter_not(predicate, self.items))

    def tap(self, effect: Callable[[T], None]) -> Flow[T]:
        return Flow(effects.tap(effect, self.items))

    def skip(self, n: int) -> Flow[T]:
        return Flow(slicing.skip(n, self.items))

    def take(self, n: int) -> Flow[T]:
        return Flow(slicing.take(n, self.items))

    def then[R](self, step: Callable[[Iterable[T]], Iterable[R]]) -> Flow[R]:
        """
        Apply any sequence -> sequence function, e.g. a curried form:

            flow(xs).then(curried.take(2))
        """
        return Flow(step(self.items))

    # Terminals

    def foldl[A](self, init: A, fn: Folder[A, T]) -> A:
        return fold.foldl(init, fn, self.items)

    def foldr[A](self, init: A, fn: Folder[A, T]) -> A:
        return fold.foldr(init, fn, self.items)

    def sum(self) -> T | int:
        return fold.sum(self.items)

    def head(self) -> Option[T]:
        return access.head(self.items)

    def tail(self) -> Option[list[T]]:
        return access.tail(self.items)

    def init(self) -> Option[list[T]]:
        return access.init(self.items)

    def last(self) -> Option[T]:
        return access.last(self.items)

    def to_list(self) -> list[T]:
        return list(self.items)


def flow[T](items: Iterable[T]) -> Flow[T]:
    """Build a Flow from any iterable for fluent combinator chaining."""
    return Flow(items)


__all__ = ("Flow", "flow")
