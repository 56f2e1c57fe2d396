"""
Domain models for weekly office hours and their availability.
"""

from dataclasses import dataclass, field, replace
from datetime import time
from typing import Any, Dict, List, Tuple

import pendulum
from pendulum import DateTime

from .exceptions import InvalidIntervalError, ParseError

# Canonical day symbols, indexed like datetime.weekday() (0=Monday)
WEEKDAYS: Tuple[str, ...] = (
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
)

TIME_FORMAT = "%H:%M:%S"


def format_time(value: time) -> str:
    """Format a time-of-day in the HH:MM:SS wire format."""
    return value.strftime(TIME_FORMAT)


def canonical_day(value: str) -> str:
    """
    Normalize a weekday symbol to its upper-case form.

    Raises:
        ParseError: If the value is not one of the seven weekday names
    """
    canonical = value.strip().upper()
    if canonical not in WEEKDAYS:
        raise ParseError(
            f"Unknown weekday: {value!r}. Expected one of {', '.join(WEEKDAYS)}"
        )
    return canonical


@dataclass(frozen=True)
class WeeklyInterval:
    """
    A recurring availability window on one weekday.

    Invariant: start must not be after end. Intervals crossing midnight
    are not representable.
    """
    day: str
    start: time
    end: time

    def __post_init__(self):
        object.__setattr__(self, "day", canonical_day(self.day))

        if self.start > self.end:
            raise InvalidIntervalError(
                f"Start time {format_time(self.start)} must not be after "
                f"end time {format_time(self.end)}"
            )

    def matches_day(self, reference_day: str) -> bool:
        """Check if this interval recurs on the given weekday (case-insensitive)."""
        return self.day == reference_day.strip().upper()

    def contains(self, reference_time: time) -> bool:
        """Check if a time-of-day falls within [start, end], both ends inclusive."""
        return self.start <= reference_time <= self.end

    def __str__(self) -> str:
        return f"{self.day.capitalize()} {format_time(self.start)} - {format_time(self.end)}"


@dataclass(frozen=True)
class ReferencePoint:
    """
    The (weekday, time-of-day) pair availability is evaluated against.
    """
    day: str
    time: time

    def __post_init__(self):
        object.__setattr__(self, "day", canonical_day(self.day))

    @classmethod
    def at(cls, moment: DateTime) -> "ReferencePoint":
        """
        Build a reference point from a datetime already in the desired zone.

        No timezone conversion happens here; the caller resolves the zone.
        """
        return cls(
            day=WEEKDAYS[moment.weekday()],
            time=time(moment.hour, moment.minute, moment.second, moment.microsecond),
        )

    @classmethod
    def now(cls, timezone: str) -> "ReferencePoint":
        """Read the wall clock once in the given timezone."""
        return cls.at(pendulum.now(timezone))


@dataclass(frozen=True)
class Lecturer:
    """
    A lecturer with contact details and weekly office hours.

    The schedule keeps insertion order; duplicates and overlaps are allowed.
    """
    name: str
    department: str = ""
    email: str = ""
    office_building: str = ""
    office_number: str = ""
    schedule: Tuple[WeeklyInterval, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.name.strip():
            raise ValueError("Lecturer name must not be empty")
        object.__setattr__(self, "schedule", tuple(self.schedule))

    def with_interval(self, interval: WeeklyInterval) -> "Lecturer":
        """Return a copy with the interval appended."""
        return replace(self, schedule=self.schedule + (interval,))

    def without_interval(self, interval: WeeklyInterval) -> "Lecturer":
        """Return a copy with every entry equal to the interval removed."""
        return replace(
            self,
            schedule=tuple(entry for entry in self.schedule if entry != interval)
        )

    def is_available_at(self, reference: ReferencePoint) -> bool:
        """Check if any interval matches the day and contains the time."""
        return any(
            entry.matches_day(reference.day) and entry.contains(reference.time)
            for entry in self.schedule
        )


@dataclass(frozen=True)
class AvailabilityResult:
    """
    Availability of one interval relative to a reference point.

    minutes_until_next and next_available_at are set together, and only
    when the window opens later on the reference day.
    """
    is_available_now: bool
    minutes_until_next: int | None = None
    next_available_at: time | None = None

    def __post_init__(self):
        if (self.minutes_until_next is None) != (self.next_available_at is None):
            raise ValueError("minutes_until_next and next_available_at must be set together")
        if self.minutes_until_next is not None:
            if self.is_available_now:
                raise ValueError("An interval open now has no next opening")
            if self.minutes_until_next < 0:
                raise ValueError(f"minutes_until_next must not be negative, got {self.minutes_until_next}")


@dataclass(frozen=True)
class ScheduleEntryView:
    """An interval paired with its computed availability."""
    interval: WeeklyInterval
    availability: AvailabilityResult

    def to_dict(self) -> Dict[str, Any]:
        next_at = self.availability.next_available_at
        return {
            "day": self.interval.day,
            "startTime": format_time(self.interval.start),
            "endTime": format_time(self.interval.end),
            "isAvailableNow": self.availability.is_available_now,
            "nextAvailableInMinutes": self.availability.minutes_until_next,
            "nextAvailableAt": format_time(next_at) if next_at is not None else None,
        }


@dataclass(frozen=True)
class LecturerView:
    """
    A lecturer's static attributes plus one availability entry per interval.
    """
    name: str
    department: str
    email: str
    office_building: str
    office_number: str
    schedule: List[ScheduleEntryView]

    @property
    def is_available_now(self) -> bool:
        return any(entry.availability.is_available_now for entry in self.schedule)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase payload shape."""
        return {
            "name": self.name,
            "department": self.department,
            "officeBuilding": self.office_building,
            "officeNumber": self.office_number,
            "email": self.email,
            "schedule": [entry.to_dict() for entry in self.schedule],
        }
