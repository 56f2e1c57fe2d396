"""
Application services for lecturer schedules and availability.

The service coordinates the lecturer repository adapter and delegates the
availability calculation to the domain-level ``LecturerAggregator``. The
reference point is passed in by the caller, so the service never reads the
clock itself.
"""

from __future__ import annotations

import logging
from typing import List, Protocol

from ..domain.aggregator import LecturerAggregator
from ..domain.models import Lecturer, LecturerView, ReferencePoint, WeeklyInterval

logger = logging.getLogger(__name__)


class LecturerRepositoryProtocol(Protocol):
    """Protocol describing the persistence behaviour needed by the service."""

    def find_by_name(self, name: str) -> Lecturer | None:
        """Case-insensitive lookup."""

    def find_all(self) -> List[Lecturer]:
        """All stored lecturers."""

    def find_available(self, reference: ReferencePoint) -> List[Lecturer]:
        """Lecturers with an interval containing the reference point."""

    def save(self, lecturer: Lecturer) -> Lecturer:
        """Store a new lecturer."""

    def add_interval(self, name: str, interval: WeeklyInterval) -> Lecturer | None:
        """Append an interval to a stored lecturer."""

    def remove_interval(self, name: str, interval: WeeklyInterval) -> Lecturer | None:
        """Remove matching intervals from a stored lecturer."""


class LecturerAvailabilityService:
    """
    Orchestrates lecturer storage and availability evaluation.

    Creation and schedule changes return views without live status; listing
    and lookups evaluate against the supplied reference point. Unknown names
    yield None rather than raising.
    """

    def __init__(
        self,
        repository: LecturerRepositoryProtocol,
        aggregator: LecturerAggregator | None = None,
    ) -> None:
        self._repository = repository
        self._aggregator = aggregator or LecturerAggregator()

    def create_lecturer(self, lecturer: Lecturer) -> LecturerView:
        """
        Store a new lecturer with their initial schedule.

        Raises:
            DuplicateLecturerError: If the name is already taken
        """
        saved = self._repository.save(lecturer)
        logger.info("Created lecturer %s with %d slot(s)", saved.name, len(saved.schedule))
        return self._aggregator.static_view(saved)

    def add_schedule(self, name: str, interval: WeeklyInterval) -> LecturerView | None:
        """Append an interval to a lecturer's schedule."""
        updated = self._repository.add_interval(name, interval)
        if updated is None:
            logger.debug("Cannot add %s, lecturer %r not found", interval, name)
            return None

        logger.info("Added %s to %s", interval, updated.name)
        return self._aggregator.static_view(updated)

    def remove_schedule(self, name: str, interval: WeeklyInterval) -> LecturerView | None:
        """Remove every entry equal to the interval from a lecturer's schedule."""
        updated = self._repository.remove_interval(name, interval)
        if updated is None:
            logger.debug("Cannot remove %s, lecturer %r not found", interval, name)
            return None

        logger.info("Removed %s from %s", interval, updated.name)
        return self._aggregator.static_view(updated)

    def list_lecturers(self, reference: ReferencePoint) -> List[LecturerView]:
        """All lecturers with live availability."""
        return self._aggregator.evaluate_many(self._repository.find_all(), reference)

    def get_lecturer(self, name: str, reference: ReferencePoint) -> LecturerView | None:
        """One lecturer with live availability, or None if unknown."""
        lecturer = self._repository.find_by_name(name)
        if lecturer is None:
            logger.debug("Lecturer %r not found", name)
            return None

        return self._aggregator.evaluate_lecturer(lecturer, reference)

    def available_lecturers(self, reference: ReferencePoint) -> List[LecturerView]:
        """
        Lecturers available at the reference point.

        Filtering is done by the repository; the aggregator only evaluates
        the lecturers it returns.
        """
        lecturers = self._repository.find_available(reference)
        logger.debug(
            "%d lecturer(s) available on %s at %s",
            len(lecturers), reference.day, reference.time
        )
        return self._aggregator.evaluate_many(lecturers, reference)
