"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .simulation import settings_from_args, simulate

USAGE = (
    "./philo [nbr_of_philosophers] [t_t_die] [t_t_eat] [t_t_sleep] "
    "[(optional)[nbr_times_philo_eat]]"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments, or print usage.

    ``argv`` holds the arguments without the program name; it defaults to
    ``sys.argv[1:]``. The exit status is always 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = settings_from_args(args)
    except ValueError:
        print(USAGE)
        return 0
    simulate(settings, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())