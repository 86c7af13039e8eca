"""Update an existing event."""

import logging
from datetime import datetime

import typer
from typing_extensions import Annotated

from calendar_clone.exceptions import EventNotFoundError, ValidationError
from calendar_clone.models.event import EventType
from cli.commands.add import DATE_FORMATS
from cli.context import get_context
from cli.display import console

logger = logging.getLogger(__name__)


def edit(
    event_id: Annotated[
        str,
        typer.Argument(help="Id of the event to update (see 'ls')"),
    ],
    title: Annotated[str | None, typer.Option("--title", help="New title")] = None,
    start: Annotated[
        datetime | None,
        typer.Option("--start", "-s", formats=DATE_FORMATS, help="New start (UTC)"),
    ] = None,
    end: Annotated[
        datetime | None,
        typer.Option("--end", "-e", formats=DATE_FORMATS, help="New end (UTC)"),
    ] = None,
    event_type: Annotated[
        EventType | None,
        typer.Option("--type", "-t", help="New event type"),
    ] = None,
    location: Annotated[str | None, typer.Option("--location", "-l")] = None,
    description: Annotated[str | None, typer.Option("--description", "-d")] = None,
    reminder: Annotated[
        int | None,
        typer.Option("--reminder", "-r", help="Minutes before the event (0 clears it)"),
    ] = None,
) -> None:
    """Update fields of an existing event. Options not given are left unchanged."""
    ctx = get_context()

    changes = {
        "title": title,
        "start_date": start,
        "end_date": end,
        "type": event_type,
        "location": location,
        "description": description,
        "reminder": reminder,
    }
    changes = {key: value for key, value in changes.items() if value is not None}
    if not changes:
        console.print("[dim]Nothing to update[/dim]")
        return

    try:
        event = ctx.store.update(event_id, **changes)
    except (EventNotFoundError, ValidationError) as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"\n[bold green]✓[/bold green] Event updated")
    console.print(f"  ID: {event.id}")
