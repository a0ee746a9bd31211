"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")
MAX_DIGITS = 7


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None


def parse_number(text: str) -> int:
    """Parse a non-negative decimal argument with at most seven significant digits."""
    body = text.lstrip(_WHITESPACE)
    if body.startswith("+"):
        body = body[1:]
    if not body:
        raise ArgumentError(f"empty number: {text!r}")
    digits = body.lstrip("0")
    if not digits:
        return 0
    if not set(digits) <= _DIGITS:
        raise ArgumentError(f"not a non-negative integer: {text!r}")
    if len(digits) > MAX_DIGITS:
        raise ArgumentError(f"number too large: {text!r}")
    return int(digits)


def parse_args(argv: Sequence[str]) -> Settings:
    """Build settings from four or five arguments (program name excluded)."""
    if len(argv) not in (4, 5):
        raise ArgumentError(
            "usage: number_of_philosophers time_to_die time_to_eat "
            "time_to_sleep [number_of_times_each_philosopher_must_eat]"
        )
    values = [parse_number(arg) for arg in argv]
    meals = values[4] if len(values) == 5 else None
    return Settings(
        philosophers=values[0],
        time_to_die=values[1],
        time_to_eat=values[2],
        time_to_sleep=values[3],
        meals_required=meals,
    )