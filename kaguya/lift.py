"""
Bridges between absence (Option) and other representations.

Accessors return kungfu.Option. These helpers move that Option into
the shapes callers usually want: a plain value with a default, or a
kungfu.Result for code that already speaks Ok/Error.

Examples:
    from kaguya import head, lift as L

    L.or_else(head([]), 0)                        # 0
    L.to_result(head([1]), error=lambda: "empty")  # Ok(1)
    L.require(head([]), operation="head")         # Error(EmptySequenceError("head"))
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Nothing, Ok, Option, Result, Some

from ._errors import EmptySequenceError


def from_optional[T](value: T | None) -> Option[T]:
    """
    Convert T | None into Option. None becomes Nothing().

    **When to use:** dict.get(), re.match() and friends, before feeding the
    value into code that expects Option.
    """
    if value is None:
        return Nothing()
    return Some(value)


def or_else[T, D](option: Option[T], default: D) -> T | D:
    """Unwrap Some(x) to x, Nothing() to default."""
    match option:
        case Some(value):
            return value
        case _:
            return default


def to_result[T, E](
    option: Option[T],
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """
    Some(x) becomes Ok(x), Nothing() becomes Error(error()).

    NOTE: error is a thunk (zero-arg callable) to avoid building the
          error value when it isn't needed.
    """
    match option:
        case Some(value):
            return Ok(value)
        case _:
            return Error(error())


def require[T](option: Option[T], *, operation: str) -> Result[T, EmptySequenceError]:
    """
    to_result() with EmptySequenceError as the error value.

    Example:
        require(last([]), operation="last")  # Error(EmptySequenceError("last"))
    """
    return to_result(option, error=lambda: EmptySequenceError(operation))


__all__ = ("from_optional", "or_else", "to_result", "require")
