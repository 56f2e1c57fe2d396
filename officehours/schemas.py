"""
Input payload models using Pydantic.

Field names follow the camelCase wire format; snake_case names are accepted
as well so that YAML files can use either.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .domain.exceptions import ParseError
from .domain.models import Lecturer, WeeklyInterval, format_time
from .domain.parsing import parse_interval, parse_time_of_day, parse_weekday


class ScheduleInput(BaseModel):
    """One weekly interval as supplied by a caller."""
    model_config = ConfigDict(populate_by_name=True)

    day: str
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")

    @field_validator("day")
    @classmethod
    def validate_day(cls, v: str) -> str:
        """Normalize the weekday symbol."""
        return parse_weekday(v)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def reject_numeric_time(cls, v: Any) -> Any:
        """
        Catch times YAML already turned into numbers.

        YAML 1.1 reads an unquoted 10:00 as the base-60 integer 600.
        """
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            raise ParseError(
                f"Time was read as the number {v}; quote times in YAML, e.g. \"10:00\""
            )
        return v

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        """Ensure the time parses as HH:MM[:SS]."""
        parse_time_of_day(v)
        return v

    @model_validator(mode="after")
    def validate_order(self) -> "ScheduleInput":
        """Reject intervals that end before they start."""
        self.to_interval()
        return self

    def to_interval(self) -> WeeklyInterval:
        return parse_interval(self.day, self.start_time, self.end_time)


class LecturerInput(BaseModel):
    """A lecturer with an initial schedule."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    name: str
    department: str = ""
    office_building: str = Field(default="", alias="officeBuilding")
    office_number: str = Field(default="", alias="officeNumber")
    email: str = ""
    schedule: List[ScheduleInput] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure the name is not blank."""
        if not v.strip():
            raise ValueError("name must not be empty")
        return v.strip()

    def to_lecturer(self) -> Lecturer:
        return Lecturer(
            name=self.name,
            department=self.department,
            email=self.email,
            office_building=self.office_building,
            office_number=self.office_number,
            schedule=tuple(entry.to_interval() for entry in self.schedule)
        )

    @classmethod
    def from_lecturer(cls, lecturer: Lecturer) -> "LecturerInput":
        """Convert a domain lecturer back into its storable payload."""
        return cls(
            name=lecturer.name,
            department=lecturer.department,
            email=lecturer.email,
            office_building=lecturer.office_building,
            office_number=lecturer.office_number,
            schedule=[
                ScheduleInput(
                    day=entry.day,
                    start_time=format_time(entry.start),
                    end_time=format_time(entry.end)
                )
                for entry in lecturer.schedule
            ]
        )
