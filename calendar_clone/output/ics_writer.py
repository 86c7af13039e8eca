"""ICS file writer for calendar exports."""

import logging
from datetime import date
from pathlib import Path
from typing import Iterable

from calendar_clone.constants import EXPORT_FILENAME_PATTERN, ICS_PRODID, ICS_UID_DOMAIN
from calendar_clone.exceptions import ExportError
from calendar_clone.ics.encoder import ICSEncoder
from calendar_clone.models.event import CalendarEvent

logger = logging.getLogger(__name__)


def export_filename(today: date | None = None) -> str:
    """Export file name for the given export date (defaults to today)."""
    today = today or date.today()
    return EXPORT_FILENAME_PATTERN.format(date=today.isoformat())


class ICSWriter:
    """Writer for ICS calendar files."""

    def __init__(self, prodid: str = ICS_PRODID, uid_domain: str = ICS_UID_DOMAIN):
        self.encoder = ICSEncoder(prodid=prodid, uid_domain=uid_domain)

    def render(self, events: Iterable[CalendarEvent]) -> str:
        """Encode events to ICS text."""
        return self.encoder.encode(events)

    def write(self, events: Iterable[CalendarEvent], path: Path) -> None:
        """Write events to an ICS file.

        Args:
            events: Events to encode, in order
            path: Path to write ICS file

        Raises:
            ExportError: If encoding or writing fails
        """
        ics_content = self.render(events)

        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(ics_content)
        except OSError as e:
            # Remove partial file if it was created
            if path.exists() and path.stat().st_size == 0:
                path.unlink()
            raise ExportError(f"Failed to write ICS file {path}: {e}") from e

        logger.info(f"Wrote ICS file: {path}")

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"


def export_ics(
    events: Iterable[CalendarEvent],
    directory: Path,
    today: date | None = None,
    writer: ICSWriter | None = None,
) -> Path:
    """
    Export events to calendar-export-<YYYY-MM-DD>.ics in directory.

    Args:
        events: Events to export
        directory: Target directory (created if missing)
        today: Export date used in the file name (defaults to today)
        writer: Optional writer carrying a custom ICS identity

    Returns:
        Path to the written file
    """
    writer = writer or ICSWriter()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(f"Cannot create export directory {directory}: {e}") from e

    path = directory / export_filename(today)
    writer.write(events, path)
    return path
