"""
Total energy of a system.

For each moon, potential energy is the Manhattan size of its position and
kinetic energy the Manhattan size of its velocity. A moon contributes
potential × kinetic; the system's energy is the sum over moons.
"""

from __future__ import annotations
from typing import Sequence

import numpy as np

from moonsim.core.body import Body


def potential_energy(body: Body) -> int:
    """|x| + |y| + |z| of the position."""
    return body.pos.manhattan()


def kinetic_energy(body: Body) -> int:
    """|x| + |y| + |z| of the velocity."""
    return body.vel.manhattan()


def energy(bodies: Sequence[Body]) -> int:
    """Σ potential × kinetic over all bodies. Does not mutate."""
    return sum(potential_energy(b) * kinetic_energy(b) for b in bodies)


def energy_per_body(bodies: Sequence[Body]) -> np.ndarray:
    """
    Each body's potential × kinetic, shape [n_bodies].

    The array holds exact Python ints (dtype=object), so products of large
    coordinates never wrap around.
    """
    return np.array([potential_energy(b) * kinetic_energy(b) for b in bodies], dtype=object)
