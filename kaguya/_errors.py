from __future__ import annotations


class ArityError(TypeError):
    """compose/pipe got fewer than two functions."""

    count: int

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Composition needs at least 2 functions, got {count}")


class EmptySequenceError(Exception):
    """Accessor was asked for a value of an empty sequence.

    Never raised by the combinators themselves: absence is Nothing().
    Used as the error value of lift.require().
    """

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() of an empty sequence")


__all__ = ("ArityError", "EmptySequenceError")
