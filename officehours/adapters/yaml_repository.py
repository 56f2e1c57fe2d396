"""
YAML file-backed lecturer store.
"""

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import List

import yaml
from pydantic import ValidationError

from ..domain.exceptions import StorageError
from ..domain.models import Lecturer
from ..schemas import LecturerInput
from .memory_repository import InMemoryLecturerRepository

logger = logging.getLogger(__name__)


class YamlLecturerRepository(InMemoryLecturerRepository):
    """
    Lecturer store persisted to a YAML file.

    The file holds a mapping with a single "lecturers" list, each entry in
    the same shape as a create payload:

        lecturers:
          - name: Ada Obi
            department: Computer Science
            officeBuilding: Block C
            officeNumber: "204"
            email: ada.obi@example.edu
            schedule:
              - {day: MONDAY, startTime: "09:00:00", endTime: "11:00:00"}

    The whole file is rewritten after every change.
    """

    def __init__(self, data_file: Path):
        self.data_file = data_file
        super().__init__(self._load())

    def _load(self) -> List[Lecturer]:
        """Load lecturers from disk; a missing file is an empty store."""
        if not self.data_file.exists():
            logger.debug("Data file %s does not exist yet, starting empty", self.data_file)
            return []

        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise StorageError(f"Could not read {self.data_file}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"{self.data_file} must contain a mapping at the root level.")

        try:
            lecturers = [
                LecturerInput.model_validate(entry).to_lecturer()
                for entry in data.get("lecturers") or []
            ]
        except ValidationError as e:
            raise StorageError(f"Invalid lecturer data in {self.data_file}: {e}") from e

        logger.debug("Loaded %d lecturer(s) from %s", len(lecturers), self.data_file)
        return lecturers

    def _persist(self) -> None:
        """Write all lecturers to a temp file, then move it over the data file."""
        payload = {
            "lecturers": [
                LecturerInput.from_lecturer(lecturer).model_dump(by_alias=True)
                for lecturer in self.find_all()
            ]
        }

        directory = self.data_file.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=".lecturers-", suffix=".yaml")
        except OSError as e:
            raise StorageError(f"Could not write {self.data_file}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(payload, f, sort_keys=False, allow_unicode=True)
            os.replace(tmp_name, self.data_file)
        except (OSError, yaml.YAMLError) as e:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise StorageError(f"Could not write {self.data_file}: {e}") from e

        logger.debug("Saved %d lecturer(s) to %s", len(payload["lecturers"]), self.data_file)
