"""Pure formatting functions for display output."""

from datetime import date, datetime

from calendar_clone.models.event import CalendarEvent, EventDate, InvalidDate


def format_event_date(value: EventDate) -> str:
    """Format an event date as YYYY-MM-DD, or "Invalid Date"."""
    if isinstance(value, InvalidDate):
        return str(value)
    return value.strftime("%Y-%m-%d")


def format_time_range(event: CalendarEvent) -> str:
    """Format the time range for an event.

    Args:
        event: The event to format.

    Returns:
        Formatted time string like "08:00–12:00" or "All day".
    """
    if event.all_day:
        return "All day"

    parts = []
    for value in (event.start_date, event.end_date):
        if isinstance(value, datetime):
            parts.append(value.strftime("%H:%M"))
        elif isinstance(value, date):
            parts.append("00:00")
        else:
            parts.append("??:??")

    return "–".join(parts)


def format_reminder(minutes: int | None) -> str | None:
    """Format a reminder offset (e.g., "15m before", "1h before")."""
    if not minutes or minutes <= 0:
        return None
    if minutes % 1440 == 0:
        return f"{minutes // 1440}d before"
    if minutes % 60 == 0:
        return f"{minutes // 60}h before"
    return f"{minutes}m before"
