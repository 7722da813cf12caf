"""Error types raised while loading and exporting a schedule."""


class ScheduleExportError(Exception):
    """Base class for all errors that abort an export.

    Each subclass carries a single message suitable for showing to the user;
    the exception's own text holds the technical detail.
    """

    user_message = "Something went wrong while exporting the schedule."


class InvalidExtension(ScheduleExportError):
    """The input source is not a .cccsched file."""

    user_message = "Please select a valid .cccsched file."


class MalformedDocument(ScheduleExportError):
    """The file content could not be decoded as JSON."""

    user_message = (
        "Error parsing the file. Please make sure it's a valid .cccsched file."
    )


class MissingScheduleField(ScheduleExportError):
    """The parsed document has no ``schedule`` property."""

    user_message = (
        "Error parsing the file. Please make sure it's a valid .cccsched file."
    )


class MissingDateRange(ScheduleExportError):
    """The start or end date is absent or not a valid date."""

    user_message = "Please upload a file and set start and end dates."


class ExpansionFailed(ScheduleExportError):
    """Expanding or encoding the calendar failed."""

    user_message = (
        "Error generating iCal file. Please check your schedule data and try again."
    )
