"""
Fans the availability evaluator out across lecturers and their schedules.
"""

from typing import Iterable, List

from .availability import AvailabilityEvaluator
from .models import (
    AvailabilityResult,
    Lecturer,
    LecturerView,
    ReferencePoint,
    ScheduleEntryView,
)


class LecturerAggregator:
    """
    Builds lecturer views with one availability result per schedule entry.
    """

    def __init__(self, evaluator: AvailabilityEvaluator | None = None):
        self.evaluator = evaluator or AvailabilityEvaluator()

    def evaluate_lecturer(
        self,
        lecturer: Lecturer,
        reference: ReferencePoint
    ) -> LecturerView:
        """
        Evaluate every interval of a lecturer against the reference point.

        Input order is preserved and intervals are neither merged nor
        deduplicated.
        """
        return self._build_view(
            lecturer,
            [self.evaluator.evaluate(interval, reference) for interval in lecturer.schedule]
        )

    def evaluate_many(
        self,
        lecturers: Iterable[Lecturer],
        reference: ReferencePoint
    ) -> List[LecturerView]:
        """Evaluate each lecturer in order; no filtering happens here."""
        return [self.evaluate_lecturer(lecturer, reference) for lecturer in lecturers]

    def static_view(self, lecturer: Lecturer) -> LecturerView:
        """
        View without live status, used after creation and schedule changes.

        Every entry reports not available and no next opening, whatever the
        current time.
        """
        unevaluated = self.evaluator.unevaluated()
        return self._build_view(lecturer, [unevaluated] * len(lecturer.schedule))

    @staticmethod
    def _build_view(
        lecturer: Lecturer,
        results: List[AvailabilityResult]
    ) -> LecturerView:
        return LecturerView(
            name=lecturer.name,
            department=lecturer.department,
            email=lecturer.email,
            office_building=lecturer.office_building,
            office_number=lecturer.office_number,
            schedule=[
                ScheduleEntryView(interval=interval, availability=result)
                for interval, result in zip(lecturer.schedule, results)
            ]
        )
