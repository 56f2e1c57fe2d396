"""
Tests for lecturer persistence adapters.
"""

from datetime import time

import pytest
import yaml

from officehours.adapters.memory_repository import InMemoryLecturerRepository
from officehours.adapters.yaml_repository import YamlLecturerRepository
from officehours.domain.exceptions import DuplicateLecturerError, StorageError
from officehours.domain.models import Lecturer, ReferencePoint, WeeklyInterval


MONDAY_MORNING = WeeklyInterval(day="MONDAY", start=time(9, 0), end=time(11, 0))
FRIDAY_NOON = WeeklyInterval(day="FRIDAY", start=time(12, 0), end=time(13, 30))

ADA = Lecturer(
    name="Ada Obi",
    department="Computer Science",
    email="ada.obi@example.edu",
    office_building="Block C",
    office_number="204",
    schedule=(MONDAY_MORNING,)
)


class TestInMemoryLecturerRepository:
    """Tests for InMemoryLecturerRepository."""
    
    def test_find_by_name_ignores_case(self):
        repository = InMemoryLecturerRepository([ADA])
        
        assert repository.find_by_name("ada obi") == ADA
        assert repository.find_by_name("ADA OBI") == ADA
        assert repository.find_by_name("Ada") is None
    
    def test_save_rejects_duplicate_names(self):
        repository = InMemoryLecturerRepository([ADA])
        
        with pytest.raises(DuplicateLecturerError, match="already exists"):
            repository.save(Lecturer(name="ada obi"))
    
    def test_add_and_remove_interval(self):
        repository = InMemoryLecturerRepository([ADA])
        
        added = repository.add_interval("ada obi", FRIDAY_NOON)
        assert added.schedule == (MONDAY_MORNING, FRIDAY_NOON)
        
        removed = repository.remove_interval("Ada Obi", MONDAY_MORNING)
        assert removed.schedule == (FRIDAY_NOON,)
        assert repository.find_by_name("Ada Obi").schedule == (FRIDAY_NOON,)
    
    def test_interval_changes_on_unknown_lecturer(self):
        repository = InMemoryLecturerRepository([ADA])
        
        assert repository.add_interval("Nobody", FRIDAY_NOON) is None
        assert repository.remove_interval("Nobody", FRIDAY_NOON) is None
    
    def test_find_available_inclusive_same_day(self):
        other = Lecturer(name="Zainab Bello", schedule=(FRIDAY_NOON,))
        repository = InMemoryLecturerRepository([ADA, other])
        
        def names(day, value):
            return [l.name for l in repository.find_available(ReferencePoint(day=day, time=value))]
        
        assert names("MONDAY", time(9, 0)) == ["Ada Obi"]
        assert names("monday", time(11, 0)) == ["Ada Obi"]
        assert names("MONDAY", time(11, 1)) == []
        assert names("FRIDAY", time(13, 30)) == ["Zainab Bello"]
        assert names("TUESDAY", time(10, 0)) == []
    
    def test_find_all_keeps_insertion_order(self):
        repository = InMemoryLecturerRepository()
        repository.save(Lecturer(name="Zainab Bello"))
        repository.save(ADA)
        
        assert [l.name for l in repository.find_all()] == ["Zainab Bello", "Ada Obi"]


class TestYamlLecturerRepository:
    """Tests for YamlLecturerRepository."""
    
    def test_missing_file_is_empty(self, tmp_path):
        repository = YamlLecturerRepository(tmp_path / "lecturers.yaml")
        
        assert repository.find_all() == []
    
    def test_changes_survive_reload(self, tmp_path):
        """Test lecturers and intervals are written and read back."""
        data_file = tmp_path / "data" / "lecturers.yaml"
        repository = YamlLecturerRepository(data_file)
        repository.save(ADA)
        repository.add_interval("ada obi", FRIDAY_NOON)
        
        reloaded = YamlLecturerRepository(data_file)
        
        assert reloaded.find_by_name("ADA OBI") == ADA.with_interval(FRIDAY_NOON)
    
    def test_file_format(self, tmp_path):
        """Test the stored payload uses the camelCase wire names."""
        data_file = tmp_path / "lecturers.yaml"
        YamlLecturerRepository(data_file).save(ADA)
        
        with open(data_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        
        assert data == {
            "lecturers": [
                {
                    "name": "Ada Obi",
                    "department": "Computer Science",
                    "officeBuilding": "Block C",
                    "officeNumber": "204",
                    "email": "ada.obi@example.edu",
                    "schedule": [
                        {"day": "MONDAY", "startTime": "09:00:00", "endTime": "11:00:00"}
                    ],
                }
            ]
        }
    
    def test_loads_hand_written_file(self, tmp_path):
        """Test short times and lower-case days are accepted on input."""
        data_file = tmp_path / "lecturers.yaml"
        data_file.write_text(
            "lecturers:\n"
            "  - name: Ada Obi\n"
            "    schedule:\n"
            "      - {day: monday, startTime: '09:00', endTime: '11:00'}\n",
            encoding="utf-8"
        )
        
        repository = YamlLecturerRepository(data_file)
        
        assert repository.find_by_name("Ada Obi").schedule == (MONDAY_MORNING,)
    
    def test_invalid_yaml_raises_storage_error(self, tmp_path):
        data_file = tmp_path / "lecturers.yaml"
        data_file.write_text("lecturers: [unclosed\n", encoding="utf-8")
        
        with pytest.raises(StorageError, match="Could not read"):
            YamlLecturerRepository(data_file)
    
    def test_non_mapping_root_raises_storage_error(self, tmp_path):
        data_file = tmp_path / "lecturers.yaml"
        data_file.write_text("- just\n- a list\n", encoding="utf-8")
        
        with pytest.raises(StorageError, match="mapping"):
            YamlLecturerRepository(data_file)
    
    def test_inverted_interval_in_file_raises_storage_error(self, tmp_path):
        data_file = tmp_path / "lecturers.yaml"
        data_file.write_text(
            "lecturers:\n"
            "  - name: Ada Obi\n"
            "    schedule:\n"
            "      - {day: MONDAY, startTime: '11:00', endTime: '09:00'}\n",
            encoding="utf-8"
        )
        
        with pytest.raises(StorageError, match="Invalid lecturer data"):
            YamlLecturerRepository(data_file)
    
    def test_failed_save_leaves_store_unchanged(self, tmp_path):
        """Test a write failure neither keeps the lecturer nor leaves temp files."""
        data_file = tmp_path / "lecturers.yaml"
        repository = YamlLecturerRepository(data_file)
        data_file.mkdir()
        
        with pytest.raises(StorageError, match="Could not write"):
            repository.save(ADA)
        
        assert repository.find_by_name("ada obi") is None
        assert repository.find_all() == []
        assert list(tmp_path.glob(".lecturers-*")) == []
    
    def test_failed_interval_change_restores_previous_schedule(self, tmp_path):
        """Test a write failure while adding a slot keeps the old schedule."""
        data_file = tmp_path / "lecturers.yaml"
        repository = YamlLecturerRepository(data_file)
        repository.save(ADA)
        data_file.unlink()
        data_file.mkdir()
        
        with pytest.raises(StorageError):
            repository.add_interval("Ada Obi", FRIDAY_NOON)
        
        assert repository.find_by_name("Ada Obi").schedule == (MONDAY_MORNING,)
        assert list(tmp_path.glob(".lecturers-*")) == []
