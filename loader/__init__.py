"""Loader module for reading weekly schedule files."""

from .errors import (
    ExpansionFailed,
    InvalidExtension,
    MalformedDocument,
    MissingDateRange,
    MissingScheduleField,
    ScheduleExportError,
)
from .loader import ScheduleLoader, load, load_path
from .models import ScheduleItem, ScheduleItemKind, Weekday, WeeklySchedule

__all__ = [
    "ExpansionFailed",
    "InvalidExtension",
    "MalformedDocument",
    "MissingDateRange",
    "MissingScheduleField",
    "ScheduleExportError",
    "ScheduleItem",
    "ScheduleItemKind",
    "ScheduleLoader",
    "Weekday",
    "WeeklySchedule",
    "load",
    "load_path",
]
