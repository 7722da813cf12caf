"""Entry point for expanding a loaded schedule into a calendar document."""

from datetime import date, datetime
from typing import Optional, Union

from loader.errors import MissingDateRange
from loader.models import WeeklySchedule
from .ical_transformer import ICalTransformer
from .models import CalendarDocument
from .sinks import OutputSink

DateLike = Union[date, str, None]


def parse_date(value: DateLike, label: str = "date") -> date:
    """Accept a date or a YYYY-MM-DD string.

    Raises:
        MissingDateRange: If the value is empty or not a valid date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise MissingDateRange(f"No {label} given")

    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError as e:
        raise MissingDateRange(
            f"Invalid {label}: '{value}'. Expected YYYY-MM-DD."
        ) from e


def expand(
    schedule: WeeklySchedule,
    start: DateLike,
    end: DateLike,
    sink: Optional[OutputSink] = None,
    generated_at: Optional[datetime] = None
) -> CalendarDocument:
    """Expand a weekly schedule over [start, end] into an iCalendar document.

    Args:
        schedule: Weekly template returned by the loader.
        start: First day of the export period.
        end: Last day of the export period (inclusive).
        sink: If given, receives the document once it is complete.
        generated_at: Fixed DTSTAMP for reproducible output.

    Returns:
        The encoded calendar document.

    Raises:
        MissingDateRange: If either date is missing or invalid.
        ExpansionFailed: If the schedule cannot be expanded or encoded.
    """
    start_date = parse_date(start, "start date")
    end_date = parse_date(end, "end date")

    transformer = ICalTransformer(generated_at=generated_at)
    transformer.transform(schedule, start_date, end_date)
    document = transformer.document()

    if sink is not None:
        sink.deliver(document)

    return document
