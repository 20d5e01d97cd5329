"""
Reading moon positions from text.

One moon per line, written as `<x=-1, y=0, z=2>`. Blank lines are ignored.
"""

from __future__ import annotations
import re
from pathlib import Path

from moonsim.core.body import Body, make_system
from moonsim.core.vector import Vector3
from moonsim.errors import ParseError

POSITION_RE = re.compile(r"<x=(-?\d+),\s*y=(-?\d+),\s*z=(-?\d+)>")


def parse_positions(text: str) -> list[Vector3]:
    """
    Parse one position per non-blank line.

    Raises:
        ParseError: On the first line that is not a position
    """
    positions = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        match = POSITION_RE.fullmatch(stripped)
        if match is None:
            raise ParseError(line_number, stripped)
        x, y, z = (int(g) for g in match.groups())
        positions.append(Vector3(x, y, z))
    return positions


def parse_bodies(text: str) -> list[Body]:
    """Parse positions into bodies at rest, in input order."""
    return make_system(parse_positions(text))


def load_bodies(path: str | Path) -> list[Body]:
    """Read and parse an input file."""
    return parse_bodies(Path(path).read_text(encoding="utf-8"))


def format_vector(v: Vector3) -> str:
    return f"<x={v.x}, y={v.y}, z={v.z}>"


def format_body(body: Body) -> str:
    """`pos=<x=.., y=.., z=..>, vel=<x=.., y=.., z=..>`"""
    return f"pos={format_vector(body.pos)}, vel={format_vector(body.vel)}"
