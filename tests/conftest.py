"""
Pytest configuration and shared fixtures.
"""

import pytest


EXAMPLE_A = """
<x=-1, y=0, z=2>
<x=2, y=-10, z=-7>
<x=4, y=-8, z=8>
<x=3, y=5, z=-1>
"""

EXAMPLE_B = """
<x=-8, y=-10, z=0>
<x=5, y=5, z=10>
<x=2, y=-7, z=3>
<x=9, y=-8, z=-3>
"""


@pytest.fixture
def example_a():
    """Four moons with period 2772."""
    from moonsim.experiments import parse_bodies
    return parse_bodies(EXAMPLE_A)


@pytest.fixture
def example_b():
    """Four moons with period 4686774924."""
    from moonsim.experiments import parse_bodies
    return parse_bodies(EXAMPLE_B)


@pytest.fixture
def example_a_text():
    return EXAMPLE_A
