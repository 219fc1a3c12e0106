"""Command-line configuration of the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from philosim.numparse import is_valid_int, parse_int

USAGE = (
    "<number_of_philos> <time_to_die> <time_to_eat> <time_to_sleep> "
    "[number_of_meals]"
)

MIN_PHILOSOPHERS = 1
MAX_PHILOSOPHERS = 200
MIN_DURATION_MS = 60


class ConfigError(ValueError):
    """Raised when the simulation arguments are missing or out of range."""


@dataclass(frozen=True)
class Config:
    """Validated simulation parameters; durations are in milliseconds.

    ``number_of_meals`` is None when the simulation runs until a death.
    """

    number_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    number_of_meals: Optional[int] = None

    def __post_init__(self) -> None:
        if not MIN_PHILOSOPHERS <= self.number_philos <= MAX_PHILOSOPHERS:
            raise ConfigError(
                "Error: number_of_philos must be between 0 and 200"
            )
        for name in ("time_to_die", "time_to_eat", "time_to_sleep"):
            if getattr(self, name) < MIN_DURATION_MS:
                raise ConfigError(f"Error: {name} must be >= 60")
        if self.number_of_meals is not None and self.number_of_meals < 0:
            raise ConfigError("Error: number_of_meals must be >= 0")


_FIELDS = (
    ("number_of_philosophers", "number_philos"),
    ("time_to_die", "time_to_die"),
    ("time_to_eat", "time_to_eat"),
    ("time_to_sleep", "time_to_sleep"),
)


def _read(text: str, label: str) -> int:
    if not is_valid_int(text):
        raise ConfigError(f"Error: Invalid Input for {label}")
    return parse_int(text)


def parse_args(argv: Sequence[str]) -> Config:
    """Build a Config from the arguments that follow the program name."""
    if not 4 <= len(argv) <= 5:
        raise ConfigError(USAGE)
    values = {
        field: _read(text, label) for (label, field), text in zip(_FIELDS, argv)
    }
    meals: Optional[int] = None
    if len(argv) == 5:
        meals = _read(argv[4], "number_of_meals")
        if meals == -1:
            raise ConfigError("Error: number_of_meals must be > 0")
    return Config(number_of_meals=meals, **values)