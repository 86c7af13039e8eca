"""ICS document encoder."""

import logging
from typing import Iterable

from calendar_clone.constants import ICS_PRODID, ICS_UID_DOMAIN
from calendar_clone.exceptions import ExportError
from calendar_clone.ics.formatting import (
    escape_text,
    format_date_value,
    format_utc_timestamp,
)
from calendar_clone.models.event import CalendarEvent

logger = logging.getLogger(__name__)


class ICSEncoder:
    """Encode calendar events into a single VCALENDAR document.

    Output is deterministic for a given input: UIDs derive from event ids,
    and the status/sequence/transparency lines are fixed. All-day events
    carry a second, date-only DTSTART/DTEND pair after the timed one.
    """

    def __init__(self, prodid: str = ICS_PRODID, uid_domain: str = ICS_UID_DOMAIN):
        self.prodid = prodid
        self.uid_domain = uid_domain

    def encode(self, events: Iterable[CalendarEvent]) -> str:
        """Encode events into an ICS document string.

        Raises:
            ExportError: If an event date cannot be formatted
        """
        lines = [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            f"PRODID:{self.prodid}",
            "CALSCALE:GREGORIAN",
            "METHOD:PUBLISH",
        ]

        count = 0
        for event in events:
            lines.extend(self._event_lines(event))
            count += 1

        logger.debug(f"Encoded {count} events")
        # Every line is newline-terminated except the closing one
        return "\n".join(lines) + "\nEND:VCALENDAR"

    def _event_lines(self, event: CalendarEvent) -> list[str]:
        try:
            dtstart = format_utc_timestamp(event.start_date)
            dtend = format_utc_timestamp(event.end_date)
        except ValueError as e:
            raise ExportError(
                f"Event '{event.title}' (id={event.id}) has an invalid date: {e}"
            ) from e

        lines = [
            "BEGIN:VEVENT",
            f"UID:{event.id}@{self.uid_domain}",
            f"DTSTART:{dtstart}",
            f"DTEND:{dtend}",
            f"SUMMARY:{escape_text(event.title)}",
            f"DESCRIPTION:{escape_text(event.description or '')}",
            f"LOCATION:{escape_text(event.location or '')}",
            "STATUS:CONFIRMED",
            "SEQUENCE:0",
            "TRANSP:OPAQUE",
        ]

        if event.all_day:
            lines.append(f"DTSTART;VALUE=DATE:{format_date_value(event.start_date)}")
            lines.append(f"DTEND;VALUE=DATE:{format_date_value(event.end_date)}")

        if event.reminder and event.reminder > 0:
            lines.extend(
                [
                    "BEGIN:VALARM",
                    "ACTION:DISPLAY",
                    "DESCRIPTION:Reminder",
                    f"TRIGGER:-PT{event.reminder}M",
                    "END:VALARM",
                ]
            )

        lines.append("END:VEVENT")
        return lines


def encode_events(
    events: Iterable[CalendarEvent],
    prodid: str = ICS_PRODID,
    uid_domain: str = ICS_UID_DOMAIN,
) -> str:
    """Encode events into an ICS document using the default identity."""
    return ICSEncoder(prodid=prodid, uid_domain=uid_domain).encode(events)
