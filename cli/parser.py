"""CLI command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import add, delete, edit, export_command, import_command, ls, serve
from cli.context import CLIContext, set_context

app = typer.Typer(
    help="Local calendar with iCalendar (ICS) import and export.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up shared context and logging for every command."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command("add")(add)
app.command("delete")(delete)
app.command("edit")(edit)
app.command("export")(export_command)
app.command("import")(import_command)
app.command("ls")(ls)
app.command("serve")(serve)
