"""Output sinks that receive finished calendar documents."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from .models import CalendarDocument

log = logging.getLogger(__name__)


class OutputSink(ABC):
    """Destination for an encoded calendar document."""

    @abstractmethod
    def deliver(self, document: CalendarDocument) -> None:
        """Persist or forward the document.

        Args:
            document: The finished calendar document.
        """
        pass


class FileSink(OutputSink):
    """Writes documents to the local filesystem.

    If the output path is an existing directory, the document's own filename
    is used inside it.
    """

    def __init__(self, output_path: Union[str, Path]) -> None:
        self._output_path = Path(output_path)
        self.written: list[Path] = []

    def deliver(self, document: CalendarDocument) -> None:
        path = self._output_path
        if path.is_dir():
            path = path / document.filename

        with open(path, "wb") as f:
            f.write(document.content)

        self.written.append(path)
        log.debug("Wrote %d bytes to %s", len(document.content), path)


class MemorySink(OutputSink):
    """Keeps delivered documents in memory."""

    def __init__(self) -> None:
        self.documents: list[CalendarDocument] = []

    def deliver(self, document: CalendarDocument) -> None:
        self.documents.append(document)
