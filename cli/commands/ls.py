"""List stored events."""

from cli.context import get_context
from cli.display.rich_renderer import RichEventRenderer


def ls() -> None:
    """List stored events in the order they were added."""
    ctx = get_context()
    renderer = RichEventRenderer()
    renderer.render_list(ctx.store.load(), title=str(ctx.config.store_path))
