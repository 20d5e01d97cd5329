"""
Analysis layer: quantities derived from a system's trajectory.

- energy: Σ potential × kinetic
- project: reduce a 3D system to one independent axis
- find_period: steps until the state recurs
- lcm3: combine per-axis periods into the full period
"""

from moonsim.analysis.energy import energy, energy_per_body, kinetic_energy, potential_energy
from moonsim.analysis.projection import AXES, axis_index, project
from moonsim.analysis.cycles import find_period
from moonsim.analysis.period import gcd, lcm, lcm3

__all__ = [
    "energy",
    "energy_per_body",
    "kinetic_energy",
    "potential_energy",
    "AXES",
    "axis_index",
    "project",
    "find_period",
    "gcd",
    "lcm",
    "lcm3",
]
