from .chain import Composed, compose, pipe

__all__ = (
    "Composed",
    "compose",
    "pipe",
)
