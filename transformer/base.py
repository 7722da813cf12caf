"""Abstract base class for schedule transformers."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from loader.models import WeeklySchedule


class BaseTransformer(ABC):
    """Interface for turning a weekly template into dated output.

    A transformer walks every calendar day of a closed date range, looks up
    that weekday in the template and emits one entry per occurrence. No
    recurrence compression is done. Implementations keep the result of their
    last successful transform() and drop it when a later call fails.
    """

    @abstractmethod
    def transform(
        self,
        schedule: WeeklySchedule,
        start_date: date,
        end_date: date
    ) -> Any:
        """Expand the template over every day from start_date to end_date.

        Args:
            schedule: Weekly template from the loader.
            start_date: First day of the export period.
            end_date: Last day of the export period, included. An end date
                before start_date gives an empty result.

        Returns:
            The expanded schedule in the implementation's format, holding
            one entry for each (day, item) occurrence.
        """
        pass

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Encode the result of the last successful transform() call.

        Raises:
            RuntimeError: If there is no result to encode.
        """
        pass
