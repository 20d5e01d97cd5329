"""Greatest common divisor and least common multiple of step counts."""

from __future__ import annotations
from functools import reduce


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm. gcd(0, 0) == 0; the result is never negative."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; 0 if either input is 0."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def lcm3(a: int, b: int, c: int) -> int:
    """
    Combine three axis periods into the full-system period.

    The full system is back at its start exactly when all three axes are
    back at theirs at once, i.e. at a common multiple of the three periods.
    """
    return reduce(lcm, (a, b, c))
