"""
Domain layer - Pure business logic without external dependencies.
"""

from .aggregator import LecturerAggregator
from .availability import AvailabilityEvaluator
from .models import (
    AvailabilityResult,
    Lecturer,
    LecturerView,
    ReferencePoint,
    ScheduleEntryView,
    WeeklyInterval,
)

__all__ = [
    "AvailabilityEvaluator",
    "AvailabilityResult",
    "Lecturer",
    "LecturerAggregator",
    "LecturerView",
    "ReferencePoint",
    "ScheduleEntryView",
    "WeeklyInterval",
]
