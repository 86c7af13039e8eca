"""Create a new event."""

import logging
from datetime import datetime

import typer
from typing_extensions import Annotated

from calendar_clone.exceptions import ValidationError
from calendar_clone.models.event import EventType
from cli.context import get_context
from cli.display import console

logger = logging.getLogger(__name__)

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M"]


def add(
    title: Annotated[
        str,
        typer.Argument(help="Event title"),
    ],
    start: Annotated[
        datetime | None,
        typer.Option("--start", "-s", formats=DATE_FORMATS, help="Start (UTC), defaults to now"),
    ] = None,
    end: Annotated[
        datetime | None,
        typer.Option("--end", "-e", formats=DATE_FORMATS, help="End (UTC), defaults to start"),
    ] = None,
    all_day: Annotated[
        bool,
        typer.Option("--all-day", help="Date-only event"),
    ] = False,
    event_type: Annotated[
        EventType,
        typer.Option("--type", "-t", help="Event type"),
    ] = EventType.APPOINTMENT,
    location: Annotated[
        str | None,
        typer.Option("--location", "-l", help="Location"),
    ] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", "-d", help="Description"),
    ] = None,
    reminder: Annotated[
        int | None,
        typer.Option("--reminder", "-r", help="Reminder, minutes before the event"),
    ] = None,
) -> None:
    """Create a new event.

    Example:
        calendar-clone add "Dentist" --start 2025-03-04T09:30 --end 2025-03-04T10:00 -r 15
    """
    ctx = get_context()

    start_date = start.date() if (start and all_day) else start
    end_date = (end.date() if all_day else end) if end else start_date

    try:
        event = ctx.store.create(
            title,
            start_date=start_date,
            end_date=end_date,
            type=event_type,
            all_day=all_day,
            location=location,
            description=description or "",
            reminder=reminder,
        )
    except ValidationError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"\n[bold green]✓[/bold green] Event created")
    console.print(f"  ID: {event.id}")
