"""
Body: a moon with a position and a velocity.

A "system" is an ordered list of bodies. The order is part of the state:
the same moons listed in a different order are a different system.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from moonsim.core.vector import Vector3, ZERO


@dataclass
class Body:
    """
    A point body.

    Both fields are replaced on every simulation step; the Body object
    itself lives for the whole run.
    """

    pos: Vector3
    vel: Vector3 = field(default=ZERO)

    @classmethod
    def at(cls, x: int, y: int, z: int) -> "Body":
        """Create a body at rest at (x, y, z)."""
        return cls(Vector3(x, y, z))

    def copy(self) -> "Body":
        return Body(self.pos, self.vel)

    def key(self) -> tuple[int, int, int, int, int, int]:
        """(pos.x, pos.y, pos.z, vel.x, vel.y, vel.z)."""
        p, v = self.pos, self.vel
        return p.x, p.y, p.z, v.x, v.y, v.z


def make_system(positions: Iterable[Vector3 | tuple[int, int, int]]) -> list[Body]:
    """Build a system of bodies at rest from positions, keeping their order."""
    return [Body(p if isinstance(p, Vector3) else Vector3(*p)) for p in positions]


def copy_system(bodies: Sequence[Body]) -> list[Body]:
    """Independent copy of a system."""
    return [b.copy() for b in bodies]


def state_key(bodies: Sequence[Body]) -> tuple[int, ...]:
    """
    Canonical encoding of a system state.

    Concatenates each body's six integers in input order. Two systems have
    equal keys exactly when every body matches position and velocity in the
    same order.
    """
    key: list[int] = []
    for body in bodies:
        key.extend(body.key())
    return tuple(key)
