"""Delete an event."""

import logging

import typer
from typing_extensions import Annotated

from calendar_clone.exceptions import EventNotFoundError
from cli.context import get_context
from cli.display import console

logger = logging.getLogger(__name__)


def delete(
    event_id: Annotated[
        str,
        typer.Argument(help="Id of the event to delete (see 'ls')"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete an event."""
    ctx = get_context()
    store = ctx.store

    try:
        event = store.get(event_id)
    except EventNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if not force:
        print(f"\nDelete event '{event.title}' ({event.id})")
        if not typer.confirm("Continue?"):
            typer.echo("Delete cancelled.")
            return

    store.delete(event_id)
    console.print(f"\n[bold green]✓[/bold green] Event deleted")
