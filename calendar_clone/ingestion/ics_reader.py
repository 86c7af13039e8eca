"""ICS file reader for calendar imports."""

import logging
from pathlib import Path
from typing import Callable

from calendar_clone.exceptions import IngestionError
from calendar_clone.ics.decoder import ICSDecoder
from calendar_clone.models.event import CalendarEvent

logger = logging.getLogger(__name__)

ImportCallback = Callable[[list[CalendarEvent]], None]


class ICSReader:
    """Reader for ICS calendar files."""

    def __init__(self, decoder: ICSDecoder | None = None):
        self.decoder = decoder or ICSDecoder()

    def read_text(self, source: Path | bytes) -> str:
        """Read raw ICS content as UTF-8 text.

        Args:
            source: File path, or the raw bytes of an uploaded file

        Raises:
            IngestionError: If the content cannot be read as text
        """
        try:
            if isinstance(source, bytes):
                return source.decode("utf-8")
            logger.info(f"Reading ICS file: {source}")
            with open(source, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to read ICS file: {e}") from e

    def read(self, source: Path | bytes) -> list[CalendarEvent]:
        """Read and decode an ICS file."""
        return self.decoder.decode(self.read_text(source))


def import_ics(
    source: Path | bytes,
    on_import: ImportCallback,
    reader: ICSReader | None = None,
) -> None:
    """
    Read an ICS file and hand the decoded events to on_import.

    The callback is not invoked when the content is empty or cannot be read.

    Args:
        source: File path or raw bytes
        on_import: Completion callback receiving the decoded events
        reader: Optional reader (e.g., with a deterministic id generator)

    Raises:
        IngestionError: If the content cannot be read as text
    """
    reader = reader or ICSReader()
    content = reader.read_text(source)
    if not content:
        logger.warning("ICS content is empty, nothing to import")
        return

    events = reader.decoder.decode(content)
    on_import(events)
