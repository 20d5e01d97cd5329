"""
Axis decomposition.

The pull on axis x only ever depends on x coordinates, and likewise for y
and z. The x coordinates of all moons therefore evolve as a closed system
of their own. Projecting onto one axis gives that system as ordinary
bodies, so the same simulator and cycle detector apply unchanged.
"""

from __future__ import annotations
from typing import Sequence

from moonsim.core.body import Body
from moonsim.core.vector import Vector3

AXES = ("x", "y", "z")


def axis_index(axis: str | int) -> int:
    """Normalise "x"/"y"/"z" or 0/1/2 to an index."""
    if isinstance(axis, str):
        if axis in AXES:
            return AXES.index(axis)
    elif isinstance(axis, int) and not isinstance(axis, bool) and 0 <= axis < 3:
        return axis
    raise ValueError(f"Unknown axis: {axis!r}")


def project(bodies: Sequence[Body], axis: str | int) -> list[Body]:
    """
    Project a system onto a single axis.

    Args:
        bodies: Source system (not modified)
        axis: "x", "y", "z" or 0, 1, 2

    Returns:
        New bodies in the same order: the chosen coordinate is kept, the
        other two are zero, and every velocity is zero
    """
    i = axis_index(axis)
    projected = []
    for body in bodies:
        coords = [0, 0, 0]
        coords[i] = body.pos[i]
        projected.append(Body(Vector3(*coords)))
    return projected
