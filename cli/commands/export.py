"""Export stored events to an ICS file."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from calendar_clone.exceptions import ExportError
from calendar_clone.output.ics_writer import export_ics
from cli.context import get_context
from cli.display import console

logger = logging.getLogger(__name__)


def export_command(
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir", "-o", help="Directory for the export file (default: EXPORT_DIR)"
        ),
    ] = None,
) -> None:
    """
    Export all stored events to ICS format.

    Writes calendar-export-<YYYY-MM-DD>.ics, named after today's date.
    """
    ctx = get_context()
    events = ctx.store.load()
    directory = output_dir or ctx.config.export_dir

    try:
        ics_path = export_ics(events, directory, writer=ctx.writer)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        raise typer.Exit(1)

    console.print(f"\n[bold green]✓[/bold green] Exported {len(events)} events")
    console.print(f"  {ics_path.resolve()}")
    logger.info(f"Exported {len(events)} events to {ics_path}")
