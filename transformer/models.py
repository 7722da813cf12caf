"""Data models for generated calendar events."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class BusyStatus(str, Enum):
    BUSY = "BUSY"
    FREE = "FREE"


@dataclass
class CalendarEvent:
    """A single dated occurrence of a schedule item.

    ``start`` and ``end`` are naive datetimes in local wall-clock time.
    """

    start: datetime
    end: datetime
    summary: str
    description: str = ""
    location: str = ""
    busy_status: BusyStatus = BusyStatus.BUSY
    status: Optional[str] = None
    transparency: Optional[str] = None


@dataclass
class CalendarDocument:
    """An encoded calendar ready to be handed to an output sink."""

    name: str
    content: bytes
    filename: str
    mime_type: str
    events: list[CalendarEvent] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.events)
