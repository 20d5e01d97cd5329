"""
Experiment harness: load moon systems and answer the standard questions.

- scan: parse `<x=.., y=.., z=..>` lines into bodies
- moons: energy after N steps and the full recurrence period
"""

from moonsim.experiments.scan import (
    POSITION_RE,
    parse_positions,
    parse_bodies,
    load_bodies,
    format_vector,
    format_body,
)
from moonsim.experiments.moons import (
    MoonsConfig,
    MoonsResult,
    total_energy_after,
    axis_periods,
    system_period,
    run_moons,
)

__all__ = [
    "POSITION_RE",
    "parse_positions",
    "parse_bodies",
    "load_bodies",
    "format_vector",
    "format_body",
    "MoonsConfig",
    "MoonsResult",
    "total_energy_after",
    "axis_periods",
    "system_period",
    "run_moons",
]
