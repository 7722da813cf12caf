"""Loader for .cccsched weekly schedule files."""

import json
import logging
from pathlib import Path
from typing import Any, Union

from .errors import InvalidExtension, MalformedDocument, MissingScheduleField
from .models import ScheduleItem, Weekday, WeeklySchedule

log = logging.getLogger(__name__)


class ScheduleLoader:
    """Reads the raw bytes of a schedule file into a WeeklySchedule.

    Only the document structure is checked: the file name must carry the
    schedule extension, the content must be JSON, and the top-level object
    must have a ``schedule`` property. Individual items are kept as they are
    and judged later, when the schedule is expanded.
    """

    EXTENSION = ".cccsched"
    ENCODING = "utf-8-sig"

    def check_extension(self, source_name: str) -> None:
        """Raise InvalidExtension unless the name ends with the schedule extension."""
        if not source_name or not str(source_name).endswith(self.EXTENSION):
            raise InvalidExtension(
                f"Expected a {self.EXTENSION} file, got '{source_name}'"
            )

    def _decode(self, raw: bytes) -> Any:
        try:
            text = raw.decode(self.ENCODING)
        except UnicodeDecodeError as e:
            raise MalformedDocument(f"File is not valid UTF-8 text: {e}") from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedDocument(f"File is not valid JSON: {e}") from e

    def _is_blank(self, value: Any) -> bool:
        """True for null, false, 0 and "". Empty objects and lists are present."""
        if isinstance(value, (dict, list)):
            return False
        return not value

    def _parse_day(self, weekday: Weekday, entries: Any) -> list[ScheduleItem]:
        if not isinstance(entries, list):
            log.debug("Ignoring %s: expected a list, got %s", weekday.value, type(entries).__name__)
            return []

        items: list[ScheduleItem] = []
        for position, entry in enumerate(entries):
            if not isinstance(entry, dict):
                log.debug("Ignoring %s entry %d: not an object", weekday.value, position)
                continue
            items.append(ScheduleItem.from_dict(entry))
        return items

    def load(self, raw: bytes, source_name: str) -> WeeklySchedule:
        """Parse schedule file content.

        Args:
            raw: Bytes read from the schedule file.
            source_name: Name of the file the bytes came from.

        Returns:
            The parsed weekly schedule.

        Raises:
            InvalidExtension: If source_name is not a .cccsched file.
            MalformedDocument: If the content is not UTF-8 encoded JSON.
            MissingScheduleField: If the schedule property is absent, null,
                false, 0 or an empty string.
        """
        self.check_extension(source_name)

        document = self._decode(raw)
        if not isinstance(document, dict) or self._is_blank(document.get("schedule")):
            raise MissingScheduleField("Invalid file format: missing schedule data")

        template = document["schedule"]
        days: dict[Weekday, list[ScheduleItem]] = {}
        if isinstance(template, dict):
            for weekday in Weekday:
                if weekday.value in template:
                    days[weekday] = self._parse_day(weekday, template[weekday.value])
        else:
            log.warning("Schedule property is not an object; no days will be exported")

        schedule = WeeklySchedule(days=days)
        log.debug("Loaded %d schedule items from %s", len(schedule), source_name)
        return schedule

    def load_path(self, path: Union[str, Path]) -> WeeklySchedule:
        """Read a schedule file from disk and parse it.

        The extension is checked before the file is opened.
        """
        path = Path(path)
        self.check_extension(path.name)
        return self.load(path.read_bytes(), path.name)


def load(raw: bytes, source_name: str) -> WeeklySchedule:
    """Parse schedule file content. See ScheduleLoader.load."""
    return ScheduleLoader().load(raw, source_name)


def load_path(path: Union[str, Path]) -> WeeklySchedule:
    """Read and parse a schedule file. See ScheduleLoader.load_path."""
    return ScheduleLoader().load_path(path)
