"""
Functional combinators for Python iterables.

Composition, lazy sequence combinators, curried forms and
list comprehension builders. Everything is pure and synchronous.

Architecture:
- compose / pipe build one callable from two or more unary functions
- sequence combinators (map, filter, take, ...) are lazy where they can be
- folds and accessors are eager; accessors return kungfu.Option
- curried.* fix the leading argument(s) and await the sequence
- *_w composition records every step alongside the value (writer layer)
"""

# Core types
from ._types import Folder, Order, Predicate, Unary

# Composition
from .composition import Composed, compose, pipe

# Sequence combinators
from .sequence import (
    # Lazy
    filter,
    filter_not,
    map,
    skip,
    take,
    tap,
    # Folds
    foldl,
    foldr,
    sum,
    sum_of,
    sum_range,
    # Accessors
    head,
    init,
    last,
    tail,
)

# Curried forms (namespace import preferred: from kaguya import curried as C)
from . import curried

# Comprehensions
from .comprehension import ls, ls_map, ls_map_where, ls_where

# Fluent API
from .flow import Flow, flow

# Option bridges
from . import lift

# Writer layer
from . import writer
from .writer import Step, Traced, compose_w, pipe_w

# Errors
from ._errors import ArityError, EmptySequenceError

__all__ = (
    # Types
    "Folder",
    "Order",
    "Predicate",
    "Unary",
    # Composition
    "Composed",
    "compose",
    "pipe",
    # Sequence - lazy
    "map",
    "filter",
    "filter_not",
    "tap",
    "skip",
    "take",
    # Sequence - folds
    "foldl",
    "foldr",
    "sum",
    "sum_range",
    "sum_of",
    # Sequence - accessors
    "head",
    "tail",
    "init",
    "last",
    # Curried namespace
    "curried",
    # Comprehensions
    "ls",
    "ls_map",
    "ls_map_where",
    "ls_where",
    # Fluent
    "Flow",
    "flow",
    # Lift namespace
    "lift",
    # Writer
    "writer",
    "Step",
    "Traced",
    "pipe_w",
    "compose_w",
    # Errors
    "ArityError",
    "EmptySequenceError",
)
