"""Command-line entry points for both simulation variants."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence, TextIO

from philosim.bonus import run_pooled_simulation
from philosim.config import Config, ConfigError, parse_args
from philosim.simulation import run_simulation


def _run(
    argv: Optional[Sequence[str]],
    simulate: Callable[[Config, Optional[TextIO]], Optional[int]],
) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except ConfigError as error:
        print(error)
        return 1
    simulate(config, sys.stdout)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation with one fork between each pair of neighbours."""
    return _run(argv, run_simulation)


def main_bonus(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation with all forks in a shared pool."""
    return _run(argv, run_pooled_simulation)


if __name__ == "__main__":
    raise SystemExit(main())