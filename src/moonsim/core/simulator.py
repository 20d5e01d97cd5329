"""
Simulator: the integer gravity rule.

One tick has two phases:
1. Gravity: every unordered pair of moons pulls each other together by one
   unit of velocity per axis (no change on an axis where they are level)
2. Velocity: every moon moves by its velocity

Only velocities change in phase 1, so a single forward pass over the pairs
with immediate updates is the same as applying every pull at once from the
start-of-tick positions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from moonsim.core.body import Body
from moonsim.core.vector import Vector3, ZERO


def pull(a: int, b: int) -> int:
    """Velocity change of a coordinate at `a` attracted to one at `b`."""
    if a < b:
        return 1
    if a > b:
        return -1
    return 0


def pull_vector(a: Vector3, b: Vector3) -> Vector3:
    """Per-axis pull on a body at `a` from a body at `b`."""
    return Vector3(pull(a.x, b.x), pull(a.y, b.y), pull(a.z, b.z))


def step(bodies: Sequence[Body]) -> Sequence[Body]:
    """
    Advance a system by one tick, in place.

    Args:
        bodies: Ordered, mutable sequence of bodies

    Returns:
        The same sequence, mutated
    """
    n = len(bodies)
    for i in range(n):
        a = bodies[i]
        for j in range(i + 1, n):
            b = bodies[j]
            delta = pull_vector(a.pos, b.pos)
            a.vel = a.vel + delta
            b.vel = b.vel - delta

    for body in bodies:
        body.pos = body.pos + body.vel

    return bodies


def run(bodies: Sequence[Body], n_steps: int) -> Sequence[Body]:
    """Apply `step` n_steps times, in place."""
    if n_steps < 0:
        raise ValueError(f"n_steps must be non-negative, got {n_steps}")
    for _ in range(n_steps):
        step(bodies)
    return bodies


def total_momentum(bodies: Sequence[Body]) -> Vector3:
    """Sum of all velocities. Constant across ticks."""
    total = ZERO
    for body in bodies:
        total = total + body.vel
    return total


def as_arrays(bodies: Sequence[Body]) -> tuple[np.ndarray, np.ndarray]:
    """
    Convert a system to arrays.

    Returns:
        (positions, velocities), each int64 of shape [n_bodies, 3]
    """
    positions = np.array([b.pos.as_tuple() for b in bodies], dtype=np.int64).reshape(-1, 3)
    velocities = np.array([b.vel.as_tuple() for b in bodies], dtype=np.int64).reshape(-1, 3)
    return positions, velocities


@dataclass
class Simulator:
    """
    Stateful driver around `step`.

    Owns its system for the duration of a run and counts ticks.
    """

    bodies: list[Body]

    # Simulation state
    current_tick: int = field(default=0, init=False)

    def run(self, n_ticks: int) -> dict:
        """
        Run simulation for n ticks.

        Args:
            n_ticks: Number of ticks to run

        Returns:
            Statistics dictionary
        """
        from moonsim.analysis.energy import energy

        run(self.bodies, n_ticks)
        self.current_tick += n_ticks

        return {
            "n_ticks": n_ticks,
            "tick": self.current_tick,
            "energy": energy(self.bodies),
            "momentum": total_momentum(self.bodies),
        }

    def trajectory(self, n_ticks: int) -> tuple[np.ndarray, np.ndarray]:
        """
        Run n ticks, recording every state including the starting one.

        Returns:
            (positions, velocities), each int64 of shape [n_ticks + 1, n_bodies, 3]
        """
        if n_ticks < 0:
            raise ValueError(f"n_ticks must be non-negative, got {n_ticks}")

        n = len(self.bodies)
        positions = np.zeros((n_ticks + 1, n, 3), dtype=np.int64)
        velocities = np.zeros((n_ticks + 1, n, 3), dtype=np.int64)
        positions[0], velocities[0] = as_arrays(self.bodies)

        for t in range(1, n_ticks + 1):
            step(self.bodies)
            positions[t], velocities[t] = as_arrays(self.bodies)

        self.current_tick += n_ticks
        return positions, velocities
