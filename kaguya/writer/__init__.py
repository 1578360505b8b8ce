"""
Writer layer
============

Observation without I/O: values travel together with the steps
that produced them.

- Step: one recorded function application
- Traced: value + tuple of Steps
- pipe_w / compose_w: traced versions of pipe / compose
"""

from .traced import Step, Traced, TracedComposed, compose_w, pipe_w

__all__ = (
    "Step",
    "Traced",
    "TracedComposed",
    "pipe_w",
    "compose_w",
)
