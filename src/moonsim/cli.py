"""Command line entry point.

Usage:
    moonsim input.txt
    moonsim input.txt --steps 10 -v
    moonsim input.txt --parallel
"""

from __future__ import annotations
import argparse
import logging
import sys

from moonsim.errors import MoonsimError
from moonsim.experiments.moons import MoonsConfig, run_moons
from moonsim.experiments.scan import format_body, load_bodies

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moonsim",
        description="Energy after N steps and recurrence period of a moon system",
    )
    parser.add_argument("input", help="File with one <x=.., y=.., z=..> per line")
    parser.add_argument(
        "--steps", type=int, default=1000,
        help="Steps to simulate before measuring energy (default: 1000)",
    )
    parser.add_argument(
        "--parallel", action="store_true",
        help="Search the three axes in separate processes",
    )
    parser.add_argument(
        "--max-steps", type=int, default=None,
        help="Give up on an axis after this many steps",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = MoonsConfig(n_steps=args.steps, parallel=args.parallel, max_steps=args.max_steps)
        bodies = load_bodies(args.input)
        for body in bodies:
            logger.debug("Loaded %s", format_body(body))
        result = run_moons(bodies, config)
    except (OSError, ValueError, MoonsimError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(result.energy)
    print(result.period)
    return 0


if __name__ == "__main__":
    sys.exit(main())
