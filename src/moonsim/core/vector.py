"""
Vector3: an immutable integer 3-vector.

Used for both positions and velocities. Components are plain Python ints,
so accumulation never overflows.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector3:
    """Integer coordinate triple with component-wise arithmetic."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, axis: int) -> int:
        return (self.x, self.y, self.z)[axis]

    def manhattan(self) -> int:
        """Sum of absolute components, |x| + |y| + |z|."""
        return abs(self.x) + abs(self.y) + abs(self.z)

    def as_tuple(self) -> tuple[int, int, int]:
        return self.x, self.y, self.z


ZERO = Vector3(0, 0, 0)
