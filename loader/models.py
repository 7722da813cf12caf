"""Data models for weekly schedule templates."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any


class Weekday(str, Enum):
    """Day of the week, keyed by its lowercase English name."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def of(cls, day: date) -> "Weekday":
        """Return the weekday a calendar date falls on."""
        return list(cls)[day.weekday()]


class ScheduleItemKind(str, Enum):
    """Kind of a schedule block, taken from the item's ``type`` field."""

    TEACHING = "teaching"
    STUDENT = "student"
    CAMPUS = "campus"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "ScheduleItemKind":
        if value in ("teaching", "student", "campus"):
            return cls(value)
        return cls.UNKNOWN


@dataclass
class ScheduleItem:
    """One block of time within a weekday.

    Fields are stored exactly as they appear in the schedule file. Nothing is
    validated here; items that cannot become events are skipped at export.
    """

    type: Any = None
    start_time: Any = None
    end_time: Any = None
    class_name: Any = None
    description: Any = None
    class_location: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScheduleItem":
        return cls(
            type=data.get("type"),
            start_time=data.get("startTime"),
            end_time=data.get("endTime"),
            class_name=data.get("className"),
            description=data.get("description"),
            class_location=data.get("classLocation"),
        )

    @property
    def kind(self) -> ScheduleItemKind:
        return ScheduleItemKind.parse(self.type)

    @property
    def is_materializable(self) -> bool:
        """True if the item has a type, a start and an end, and a known kind."""
        return bool(
            self.type
            and self.start_time
            and self.end_time
            and self.kind is not ScheduleItemKind.UNKNOWN
        )


@dataclass
class WeeklySchedule:
    """Weekly template mapping each weekday to its ordered schedule items."""

    days: dict[Weekday, list[ScheduleItem]] = field(default_factory=dict)

    def items_for(self, weekday: Weekday) -> list[ScheduleItem]:
        return self.days.get(weekday, [])

    def items_on(self, day: date) -> list[ScheduleItem]:
        return self.items_for(Weekday.of(day))

    @property
    def is_empty(self) -> bool:
        return not any(self.days.values())

    def __len__(self) -> int:
        return sum(len(items) for items in self.days.values())
