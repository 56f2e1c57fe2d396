"""
Parsing of boundary values (day symbols, HH:MM[:SS] strings) into domain types.
"""

import re
from datetime import time

from .exceptions import ParseError
from .models import WeeklyInterval, canonical_day

_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})(?::(\d{2}))?$")


def parse_weekday(value: str) -> str:
    """
    Parse a weekday symbol case-insensitively.

    Args:
        value: English weekday name, e.g. "monday" or "MONDAY"

    Returns:
        The canonical upper-case symbol

    Raises:
        ParseError: If the value is not one of the seven weekday names
    """
    return canonical_day(value)


def parse_time_of_day(value: str) -> time:
    """
    Parse a 24-hour time-of-day string.

    Args:
        value: Time in HH:MM or HH:MM:SS format

    Returns:
        datetime.time instance

    Raises:
        ParseError: If the value is malformed or out of range
    """
    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise ParseError(f"Invalid time {value!r}, expected HH:MM or HH:MM:SS")

    hour, minute, second = match.groups()
    try:
        return time(int(hour), int(minute), int(second or 0))
    except ValueError as e:
        raise ParseError(f"Invalid time {value!r}: {e}") from e


def parse_interval(day: str, start: str, end: str) -> WeeklyInterval:
    """
    Build a WeeklyInterval from raw strings.

    Raises:
        ParseError: If any component is malformed
        InvalidIntervalError: If the interval ends before it starts
    """
    return WeeklyInterval(
        day=parse_weekday(day),
        start=parse_time_of_day(start),
        end=parse_time_of_day(end)
    )
