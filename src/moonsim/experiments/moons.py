"""
The two standard questions about a moon system.

1. Energy: run the system forward n_steps (1000 by default) and take the
   total energy
2. Period: split the system into its three axes, find each axis' period
   independently, and combine them with lcm3

Neither question mutates the bodies it is given.
"""

from __future__ import annotations
import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Sequence

from moonsim.analysis.cycles import find_period
from moonsim.analysis.energy import energy
from moonsim.analysis.period import lcm3
from moonsim.analysis.projection import AXES, project
from moonsim.core.body import Body, copy_system
from moonsim.core.simulator import run

logger = logging.getLogger(__name__)


@dataclass
class MoonsConfig:
    """Configuration for a moon system run."""

    n_steps: int = 1000  # Steps before measuring energy
    parallel: bool = False  # Search the three axes in worker processes
    max_steps: int | None = None  # Per-axis search limit (None: unbounded)

    def __post_init__(self):
        if self.n_steps < 0:
            raise ValueError(f"n_steps must be non-negative, got {self.n_steps}")
        if self.max_steps is not None and self.max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}")


@dataclass
class MoonsResult:
    """Answers for one moon system."""

    energy: int
    period: int
    axis_periods: dict[str, int] = field(default_factory=dict)


def total_energy_after(bodies: Sequence[Body], n_steps: int) -> int:
    """Energy of the system after n_steps, computed on a copy."""
    system = copy_system(bodies)
    run(system, n_steps)
    return energy(system)


def axis_periods(
    bodies: Sequence[Body],
    parallel: bool = False,
    max_steps: int | None = None,
) -> dict[str, int]:
    """
    Period of each axis taken on its own.

    Args:
        bodies: Initial system
        parallel: Run the three searches in separate processes
        max_steps: Per-axis search limit

    Returns:
        {"x": px, "y": py, "z": pz}
    """
    projections = [project(bodies, axis) for axis in AXES]

    if parallel:
        with ProcessPoolExecutor(max_workers=len(AXES)) as executor:
            periods = list(executor.map(find_period, projections, [max_steps] * len(AXES)))
    else:
        periods = [find_period(p, max_steps=max_steps) for p in projections]

    result = dict(zip(AXES, periods))
    for axis, period in result.items():
        logger.debug("Axis %s period: %d", axis, period)
    return result


def system_period(
    bodies: Sequence[Body],
    parallel: bool = False,
    max_steps: int | None = None,
) -> int:
    """Steps until the full 3D system first returns to its initial state."""
    periods = axis_periods(bodies, parallel=parallel, max_steps=max_steps)
    return lcm3(periods["x"], periods["y"], periods["z"])


def run_moons(bodies: Sequence[Body], config: MoonsConfig | None = None) -> MoonsResult:
    """
    Answer both questions for a system.

    Args:
        bodies: Initial system, bodies at their starting positions
        config: Run configuration (defaults if None)

    Returns:
        MoonsResult with energy, per-axis periods and the full period
    """
    if config is None:
        config = MoonsConfig()

    total = total_energy_after(bodies, config.n_steps)
    periods = axis_periods(bodies, parallel=config.parallel, max_steps=config.max_steps)
    period = lcm3(periods["x"], periods["y"], periods["z"])

    logger.debug(
        "%d bodies: energy after %d steps = %d, period = %d",
        len(bodies), config.n_steps, total, period,
    )
    return MoonsResult(energy=total, period=period, axis_periods=periods)
