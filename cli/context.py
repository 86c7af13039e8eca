"""Shared CLI context with lazy-initialized dependencies."""

from calendar_clone.config import CalendarConfig
from calendar_clone.ingestion.ics_reader import ICSReader
from calendar_clone.output.ics_writer import ICSWriter
from calendar_clone.storage.event_store import EventStore


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        events = ctx.store.load()
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: CalendarConfig | None = None
        self._store: EventStore | None = None
        self._writer: ICSWriter | None = None
        self._reader: ICSReader | None = None

    @property
    def config(self) -> CalendarConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = CalendarConfig.from_env()
        return self._config

    @property
    def store(self) -> EventStore:
        """Get event store (lazy-loaded)."""
        if self._store is None:
            self._store = EventStore(self.config.store_path)
        return self._store

    @property
    def writer(self) -> ICSWriter:
        """Get ICS writer using the configured identity (lazy-loaded)."""
        if self._writer is None:
            self._writer = ICSWriter(
                prodid=self.config.prodid, uid_domain=self.config.uid_domain
            )
        return self._writer

    @property
    def reader(self) -> ICSReader:
        """Get ICS reader (lazy-loaded)."""
        if self._reader is None:
            self._reader = ICSReader()
        return self._reader


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
