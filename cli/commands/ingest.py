"""Import events from an ICS file."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from calendar_clone.exceptions import IngestionError
from calendar_clone.ingestion.ics_reader import import_ics
from calendar_clone.models.event import CalendarEvent
from cli.context import get_context
from cli.display import console

logger = logging.getLogger(__name__)


def import_command(
    ics_file: Annotated[
        Path,
        typer.Argument(help="Path to the .ics file to import"),
    ],
) -> None:
    """
    Import events from an ICS file and append them to the store.

    Events without a title, start or end are skipped silently.
    """
    ctx = get_context()

    batches: list[list[CalendarEvent]] = []
    try:
        import_ics(ics_file, batches.append, reader=ctx.reader)
    except IngestionError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if not batches:
        console.print("[dim]File is empty, nothing imported[/dim]")
        return

    count = ctx.store.extend(batches[0])
    console.print(f"\n[bold green]✓[/bold green] {count} events imported")
