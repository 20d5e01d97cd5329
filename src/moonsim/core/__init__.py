"""
Core engine primitives.

This layer knows NOTHING about energy, axes or periods.
It only knows:
- Integer vectors
- Bodies (position + velocity) and the canonical key of a system
- The pairwise pull rule and one-tick integration
"""

from moonsim.core.vector import Vector3, ZERO
from moonsim.core.body import Body, make_system, copy_system, state_key
from moonsim.core.simulator import (
    Simulator,
    pull,
    pull_vector,
    step,
    run,
    total_momentum,
    as_arrays,
)

__all__ = [
    "Vector3",
    "ZERO",
    "Body",
    "make_system",
    "copy_system",
    "state_key",
    "Simulator",
    "pull",
    "pull_vector",
    "step",
    "run",
    "total_momentum",
    "as_arrays",
]
