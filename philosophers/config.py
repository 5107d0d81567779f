"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

INT_MAX = 2147483647
MAX_PHILOSOPHERS = 1000

USAGE = (
    "Incorrect amount of arguments\n"
    "Usage: philosophers [number_of_philosophers] [time_to_die] "
    "[time_to_eat] [time_to_sleep] "
    "([number_of_times_each_philosopher_must_eat])"
)
NOT_NUMERIC = "Error: input not valid, must be numeric"
BAD_AMOUNT = "Error: amount of philosophers must be between 1 and 1000"
BAD_TIME_TO_DIE = "Error: time to die must be greater than 0"
BAD_TIME_TO_EAT = "Error: time to eat must be greater than 0"
BAD_TIME_TO_SLEEP = "Error: time to sleep must be greater than 0"
BAD_MEALS = "Error: amount of meals must be greater than 0"
TOO_BIG = "Error: One of the values is too big"

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the command-line arguments are not usable."""


@dataclass(frozen=True)
class Settings:
    """Validated parameters of one dinner; times are in milliseconds."""

    amount: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int | None = None


def parse_number(text: str) -> int:
    """Return the value of the leading ASCII digits of ``text`` (0 if none)."""
    digits = []
    for char in text:
        if char not in _DIGITS:
            break
        digits.append(char)
    return int("".join(digits)) if digits else 0


def _validate(args: Sequence[str]) -> None:
    for arg in args:
        if not arg:
            raise InputError(NOT_NUMERIC)
        for position, char in enumerate(arg):
            if char in _DIGITS or (position == 0 and char == "-"):
                continue
            raise InputError(NOT_NUMERIC)


def parse_settings(args: Sequence[str]) -> Settings:
    """Build :class:`Settings` from the arguments after the program name."""
    if len(args) not in (4, 5):
        raise InputError(USAGE)
    _validate(args)

    overflow = False

    def read(text: str) -> int:
        nonlocal overflow
        value = parse_number(text)
        if value > INT_MAX:
            overflow = True
            return 1
        return value

    amount = read(args[0])
    if not 0 < amount <= MAX_PHILOSOPHERS:
        raise InputError(BAD_AMOUNT)
    time_to_die = read(args[1])
    if time_to_die <= 0:
        raise InputError(BAD_TIME_TO_DIE)
    time_to_eat = read(args[2])
    if time_to_eat <= 0:
        raise InputError(BAD_TIME_TO_EAT)
    time_to_sleep = read(args[3])
    if time_to_sleep <= 0:
        raise InputError(BAD_TIME_TO_SLEEP)
    meals = None
    if len(args) == 5:
        meals = read(args[4])
        if meals <= 0:
            raise InputError(BAD_MEALS)
    if overflow:
        raise InputError(TOO_BIG)
    return Settings(amount, time_to_die, time_to_eat, time_to_sleep, meals)