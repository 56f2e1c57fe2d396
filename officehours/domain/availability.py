"""
Core business logic for evaluating office-hour availability.

This is the heart of the application - pure domain logic without any
external dependencies (no clock reads, no storage, no I/O). The reference
point is always passed in by the caller.
"""

from datetime import time

from .models import AvailabilityResult, ReferencePoint, WeeklyInterval

_MICROSECONDS_PER_MINUTE = 60 * 1_000_000


def _microseconds_of_day(value: time) -> int:
    return (
        (value.hour * 60 + value.minute) * 60 + value.second
    ) * 1_000_000 + value.microsecond


def whole_minutes_between(earlier: time, later: time) -> int:
    """
    Whole minutes from one time-of-day to a later one on the same day.

    Partial minutes are dropped, e.g. 13:30:30 -> 14:00:00 is 29 minutes.
    """
    delta = _microseconds_of_day(later) - _microseconds_of_day(earlier)
    return delta // _MICROSECONDS_PER_MINUTE


class AvailabilityEvaluator:
    """
    Evaluates one weekly interval against a reference point.

    Algorithm:
    1. The interval only counts if it recurs on the reference day
    2. Available now if the reference time lies within [start, end]
    3. Before start on the same day: report minutes until start and the start time
    4. Anything else (other day, after end) has no next opening - there is
       no lookahead to later days
    """

    _UNEVALUATED = AvailabilityResult(is_available_now=False)

    def evaluate(
        self,
        interval: WeeklyInterval,
        reference: ReferencePoint
    ) -> AvailabilityResult:
        """
        Compute availability of a single interval.

        Args:
            interval: The weekly schedule entry
            reference: Weekday and time-of-day to evaluate against

        Returns:
            AvailabilityResult for this interval
        """
        is_today = interval.matches_day(reference.day)
        is_available_now = is_today and interval.contains(reference.time)

        # Strictly before start, so equality with start counts as "now"
        if is_today and reference.time < interval.start:
            return AvailabilityResult(
                is_available_now=False,
                minutes_until_next=whole_minutes_between(reference.time, interval.start),
                next_available_at=interval.start
            )

        return AvailabilityResult(is_available_now=is_available_now)

    @classmethod
    def unevaluated(cls) -> AvailabilityResult:
        """Result reported when no live status is computed."""
        return cls._UNEVALUATED
