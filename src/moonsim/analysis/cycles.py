"""
Cycle detection for a system of bodies.

The update rule is reversible: from any state the previous state can be
recovered (undo the move, then undo the pulls, which depend only on the
positions). A reversible deterministic system has no transient prefix, so
the first state to repeat is always the initial one, and the number of
steps until any repeat is the period.

This shortcut does NOT hold for rules that are not reversible. There, the
first repeat can be a later state and the step count is not a period.
"""

from __future__ import annotations
import logging
from typing import Sequence

from moonsim.core.body import Body, copy_system, state_key
from moonsim.core.simulator import step
from moonsim.errors import CycleNotFoundError

logger = logging.getLogger(__name__)


def find_period(system: Sequence[Body], max_steps: int | None = None) -> int:
    """
    Count steps until the system revisits a state.

    Works on a copy; the caller's bodies are left untouched.

    Args:
        system: Initial state (full 3D or an axis projection)
        max_steps: Give up after this many steps (None: no limit)

    Returns:
        Number of steps taken when the first repeated state is reached

    Raises:
        CycleNotFoundError: If max_steps is exceeded
    """
    bodies = copy_system(system)
    seen = {state_key(bodies)}
    steps = 0

    while True:
        if max_steps is not None and steps >= max_steps:
            raise CycleNotFoundError(max_steps)
        step(bodies)
        steps += 1
        key = state_key(bodies)
        if key in seen:
            logger.debug("State repeated after %d steps (%d bodies)", steps, len(bodies))
            return steps
        seen.add(key)
