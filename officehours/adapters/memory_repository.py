"""
In-memory lecturer store.
"""

import logging
from typing import Dict, Iterable, List

from ..domain.exceptions import DuplicateLecturerError, StorageError
from ..domain.models import Lecturer, ReferencePoint, WeeklyInterval

logger = logging.getLogger(__name__)


class InMemoryLecturerRepository:
    """
    Keeps lecturers in a dict keyed by lower-cased name.

    Lookups are case-insensitive; listing keeps insertion order.
    """

    def __init__(self, lecturers: Iterable[Lecturer] = ()):
        self._lecturers: Dict[str, Lecturer] = {}
        for lecturer in lecturers:
            self._lecturers[self._key(lecturer.name)] = lecturer

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def find_by_name(self, name: str) -> Lecturer | None:
        """Find a lecturer by name, ignoring case."""
        return self._lecturers.get(self._key(name))

    def find_all(self) -> List[Lecturer]:
        return list(self._lecturers.values())

    def find_available(self, reference: ReferencePoint) -> List[Lecturer]:
        """
        Lecturers with at least one interval on the reference day that
        contains the reference time (inclusive bounds).
        """
        return [
            lecturer for lecturer in self._lecturers.values()
            if lecturer.is_available_at(reference)
        ]

    def save(self, lecturer: Lecturer) -> Lecturer:
        """
        Store a new lecturer.

        Raises:
            DuplicateLecturerError: If the name is already taken
        """
        key = self._key(lecturer.name)
        if key in self._lecturers:
            raise DuplicateLecturerError(f"Lecturer already exists: {lecturer.name}")

        self._commit(key, lecturer)
        return lecturer

    def add_interval(self, name: str, interval: WeeklyInterval) -> Lecturer | None:
        """Append an interval; None if the lecturer does not exist."""
        lecturer = self.find_by_name(name)
        if lecturer is None:
            return None

        return self._replace(lecturer.with_interval(interval))

    def remove_interval(self, name: str, interval: WeeklyInterval) -> Lecturer | None:
        """Remove every entry equal to the interval; None if the lecturer does not exist."""
        lecturer = self.find_by_name(name)
        if lecturer is None:
            return None

        updated = lecturer.without_interval(interval)
        if len(updated.schedule) == len(lecturer.schedule):
            logger.debug("No entry %s found for %s", interval, lecturer.name)
        return self._replace(updated)

    def _replace(self, lecturer: Lecturer) -> Lecturer:
        self._commit(self._key(lecturer.name), lecturer)
        return lecturer

    def _commit(self, key: str, lecturer: Lecturer) -> None:
        """Store the lecturer and persist; the previous entry is restored if persisting fails."""
        previous = self._lecturers.get(key)
        self._lecturers[key] = lecturer
        try:
            self._persist()
        except StorageError:
            if previous is None:
                del self._lecturers[key]
            else:
                self._lecturers[key] = previous
            raise

    def _persist(self) -> None:
        """Hook for durable subclasses; nothing to do in memory."""
