#!/usr/bin/env python3
"""
Demo: Moon System Recurrence

Walks through the small four-moon example:
1. Simulate 10 ticks and print each moon's state
2. Compute the total energy
3. Split into x, y, z and find each axis period
4. Combine with LCM and verify the full system really returns to start

This demonstrates why the axis split works: the full search would need
2772 steps here, but real inputs need billions.
"""

import numpy as np

from moonsim.analysis import AXES, energy, energy_per_body, find_period, lcm3, project
from moonsim.core import Simulator, copy_system, state_key
from moonsim.experiments import format_body, parse_bodies

EXAMPLE = """
<x=-1, y=0, z=2>
<x=2, y=-10, z=-7>
<x=4, y=-8, z=8>
<x=3, y=5, z=-1>
"""


def main():
    print("=" * 60)
    print("  MOON SYSTEM RECURRENCE")
    print("=" * 60)

    bodies = parse_bodies(EXAMPLE)
    print(f"\n1. Setup: {len(bodies)} moons")
    for body in bodies:
        print(f"   {format_body(body)}")

    # Short run
    sim = Simulator(copy_system(bodies))
    n_ticks = 10
    stats = sim.run(n_ticks)
    print(f"\n2. After {n_ticks} ticks:")
    for body in sim.bodies:
        print(f"   {format_body(body)}")
    print(f"   Per-moon energy: {energy_per_body(sim.bodies).tolist()}")
    print(f"   Total energy:    {stats['energy']}")
    print(f"   Momentum:        {stats['momentum'].as_tuple()}")

    # Axis periods
    print("\n3. Axis periods:")
    periods = {}
    for axis in AXES:
        periods[axis] = find_period(project(bodies, axis))
        print(f"   {axis}: {periods[axis]}")

    period = lcm3(periods["x"], periods["y"], periods["z"])
    print(f"\n4. Full period = lcm{tuple(periods.values())} = {period}")

    # Verify by brute force
    check = Simulator(copy_system(bodies))
    positions, velocities = check.trajectory(period)
    returned = state_key(check.bodies) == state_key(bodies)
    first_return = next(
        t for t in range(1, period + 1)
        if np.array_equal(positions[t], positions[0])
        and np.array_equal(velocities[t], velocities[0])
    )
    print(f"   Back to start after {period} ticks: {returned}")
    print(f"   First return found by brute force: tick {first_return}")

    print("\n" + "=" * 60)
    print("  SUMMARY")
    print("=" * 60)
    print(f"  • Energy after {n_ticks} ticks: {energy(sim.bodies)}")
    print("  • Each axis is its own closed system")
    print(f"  • The full period is the LCM of the axis periods: {period}")
    print("=" * 60)


if __name__ == "__main__":
    main()
