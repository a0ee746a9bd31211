"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .args import ArgumentError, parse_args
from .simulation import run_simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the simulation and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_args(argv)
    except ArgumentError as error:
        print(error, file=sys.stderr)
        return 1
    run_simulation(settings, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())