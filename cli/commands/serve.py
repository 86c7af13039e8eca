"""Serve the calendar over HTTP."""

import logging

import typer
from typing_extensions import Annotated

from calendar_clone import create_app
from cli.context import get_context

logger = logging.getLogger(__name__)


def serve(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", "-p", help="Port to listen on")] = 5000,
) -> None:
    """Run the HTTP app (GET /events, GET /export, POST /import)."""
    ctx = get_context()
    app = create_app(ctx.config)
    logger.info(f"Serving {ctx.config.store_path} on {host}:{port}")
    app.run(host=host, port=port)
