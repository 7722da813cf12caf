"""Transformer module for converting weekly schedules to calendar formats."""

from .base import BaseTransformer
from .export import expand, parse_date
from .ical_transformer import ICalTransformer
from .models import BusyStatus, CalendarDocument, CalendarEvent
from .sinks import FileSink, MemorySink, OutputSink

__all__ = [
    "BaseTransformer",
    "BusyStatus",
    "CalendarDocument",
    "CalendarEvent",
    "FileSink",
    "ICalTransformer",
    "MemorySink",
    "OutputSink",
    "expand",
    "parse_date",
]
