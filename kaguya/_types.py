"""
Core type definitions for kaguya.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Unary = function of one argument, the only shape compose/pipe accept
type Unary[A, B] = Callable[[A], B]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Folder = combining function for foldl/foldr
# NOTE: Аккумулятор всегда первый аргумент, текущий элемент второй.
#       Это верно и для foldr, хотя он идёт справа налево.
type Folder[A, T] = Callable[[A, T], A]

# Order = evaluation order tag of a composed function
# "forward" = left-to-right (pipe), "reverse" = right-to-left (compose)
type Order = typing.Literal["forward", "reverse"]

__all__ = (
    "Unary",
    "Predicate",
    "Folder",
    "Order",
)
