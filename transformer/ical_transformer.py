"""iCalendar transformer for weekly schedules."""

import hashlib
import logging
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Iterator, Optional

from icalendar import Calendar, Event

from loader.errors import ExpansionFailed
from loader.models import ScheduleItem, ScheduleItemKind, WeeklySchedule
from .base import BaseTransformer
from .models import BusyStatus, CalendarDocument, CalendarEvent

log = logging.getLogger(__name__)


class ICalTransformer(BaseTransformer):
    """Transformer that expands a weekly schedule into iCalendar events.

    Every occurrence becomes its own VEVENT; no recurrence rules are written.
    Event times are floating (no TZID) so they stay at the wall-clock time
    given in the schedule file.
    """

    CALENDAR_NAME = "Faculty Schedule"
    PRODID = "-//Faculty Schedule Processor//cccsched-to-ical//EN"
    UID_DOMAIN = "faculty-schedule.ics"
    OUTPUT_FILENAME = "faculty_schedule.ics"
    MIME_TYPE = "text/calendar; charset=utf-8"

    CAMPUS_SUMMARY = "On Campus (Available for Meetings)"
    CAMPUS_DESCRIPTION = (
        "Instructor is on campus and available for meetings during this time."
    )

    TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})")

    def __init__(self, generated_at: Optional[datetime] = None) -> None:
        """Initialize the iCalendar transformer.

        Args:
            generated_at: Timestamp written as DTSTAMP on every event.
                Defaults to the current UTC time of each transform() call.
        """
        self._generated_at = generated_at
        self._content: Optional[bytes] = None
        self._events: list[CalendarEvent] = []

    @property
    def events(self) -> list[CalendarEvent]:
        return list(self._events)

    def _parse_time(self, value: Any) -> time:
        """Parse an "H:MM" or "HH:MM" wall-clock time.

        Raises:
            TypeError: If the value is not a string.
            ValueError: If the value does not look like a time of day.
        """
        if not isinstance(value, str):
            raise TypeError(f"Time must be a string, got {type(value).__name__}")

        match = self.TIME_PATTERN.fullmatch(value.strip())
        if not match:
            raise ValueError(f"Cannot parse time: '{value}'")

        hour, minute = map(int, match.groups())
        return time(hour, minute)

    def _hours_label(self, kind: ScheduleItemKind) -> str:
        word = kind.value
        return f"{word[:1].upper()}{word[1:]} Hours"

    def _build_event(self, day: date, item: ScheduleItem) -> Optional[CalendarEvent]:
        """Turn one schedule item into an event on the given day.

        Returns None for kinds that do not produce events.
        """
        kind = item.kind

        if kind in (ScheduleItemKind.TEACHING, ScheduleItemKind.STUDENT):
            return CalendarEvent(
                start=datetime.combine(day, self._parse_time(item.start_time)),
                end=datetime.combine(day, self._parse_time(item.end_time)),
                summary=str(item.class_name) if item.class_name else self._hours_label(kind),
                description=str(item.description) if item.description else "",
                location=str(item.class_location) if item.class_location else "",
                busy_status=BusyStatus.BUSY,
            )
        elif kind is ScheduleItemKind.CAMPUS:
            return CalendarEvent(
                start=datetime.combine(day, self._parse_time(item.start_time)),
                end=datetime.combine(day, self._parse_time(item.end_time)),
                summary=self.CAMPUS_SUMMARY,
                description=self.CAMPUS_DESCRIPTION,
                busy_status=BusyStatus.FREE,
                status="CONFIRMED",
                transparency="TRANSPARENT",
            )
        else:
            return None

    def _iter_days(self, start_date: date, end_date: date) -> Iterator[date]:
        for offset in range((end_date - start_date).days + 1):
            yield start_date + timedelta(days=offset)

    def expand_events(
        self,
        schedule: WeeklySchedule,
        start_date: date,
        end_date: date
    ) -> list[CalendarEvent]:
        """Expand the weekly template over every day of [start_date, end_date].

        Events come out in date order, then in the order items appear on
        their day. An end date before the start date yields no events.
        """
        events: list[CalendarEvent] = []

        for day in self._iter_days(start_date, end_date):
            for item in schedule.items_on(day):
                if not item.is_materializable:
                    log.debug("Skipping incomplete or unknown item on %s: %r", day, item)
                    continue

                event = self._build_event(day, item)
                if event is not None:
                    events.append(event)

        return events

    def _generate_uid(self, event: CalendarEvent, sequence: int) -> str:
        """Generate a stable unique identifier for an event.

        Args:
            event: The calendar event.
            sequence: Position of the event in the expanded list.

        Returns:
            Unique identifier string.
        """
        unique_string = (
            f"{sequence}-{event.start.isoformat()}-"
            f"{event.end.isoformat()}-{event.summary}"
        )
        return hashlib.md5(unique_string.encode()).hexdigest() + "@" + self.UID_DOMAIN

    def _to_ical_event(self, event: CalendarEvent, sequence: int, stamp: datetime) -> Event:
        ical_event = Event()

        ical_event.add("uid", self._generate_uid(event, sequence))
        ical_event.add("dtstamp", stamp)
        ical_event.add("dtstart", event.start)
        ical_event.add("dtend", event.end)
        ical_event.add("summary", event.summary)

        if event.description:
            ical_event.add("description", event.description)

        if event.location:
            ical_event.add("location", event.location)

        ical_event.add("x-microsoft-cdo-busystatus", event.busy_status.value)

        if event.status:
            ical_event.add("status", event.status)

        if event.transparency:
            ical_event.add("transp", event.transparency)

        return ical_event

    def _new_calendar(self) -> Calendar:
        calendar = Calendar()
        calendar.add("prodid", self.PRODID)
        calendar.add("version", "2.0")
        calendar.add("calscale", "GREGORIAN")
        calendar.add("method", "PUBLISH")
        calendar.add("name", self.CALENDAR_NAME)
        calendar.add("x-wr-calname", self.CALENDAR_NAME)
        return calendar

    def transform(
        self,
        schedule: WeeklySchedule,
        start_date: date,
        end_date: date
    ) -> Calendar:
        """Expand a weekly schedule into an iCalendar object.

        Args:
            schedule: Weekly template to expand.
            start_date: First day of the export period.
            end_date: Last day of the export period (inclusive).

        Returns:
            iCalendar Calendar object.

        Raises:
            ExpansionFailed: If any item cannot be expanded or encoded.
                Nothing from a failed call is kept.
        """
        self._content = None
        self._events = []

        try:
            events = self.expand_events(schedule, start_date, end_date)

            stamp = self._generated_at or datetime.now(timezone.utc)
            calendar = self._new_calendar()
            for sequence, event in enumerate(events):
                calendar.add_component(self._to_ical_event(event, sequence, stamp))
            content = calendar.to_ical()
        except Exception as e:
            log.debug("Expansion of %s..%s failed", start_date, end_date, exc_info=True)
            raise ExpansionFailed(f"Could not expand schedule: {e}") from e

        self._content = content
        self._events = events
        log.info("Generated %d events between %s and %s", len(events), start_date, end_date)
        return calendar

    def to_bytes(self) -> bytes:
        """Encode the calendar as iCalendar text.

        Raises:
            RuntimeError: If transform() hasn't been called yet.
        """
        if self._content is None:
            raise RuntimeError("No calendar data. Call transform() first.")

        return self._content

    def document(self) -> CalendarDocument:
        """Package the last transform() result for an output sink."""
        return CalendarDocument(
            name=self.CALENDAR_NAME,
            content=self.to_bytes(),
            filename=self.OUTPUT_FILENAME,
            mime_type=self.MIME_TYPE,
            events=self.events,
        )
