"""Rich-based event renderer for terminal display."""

from rich.console import Console
from rich.text import Text

from calendar_clone.models.event import CalendarEvent
from cli.display.console import console as shared_console
from cli.display.formatters import format_event_date, format_reminder, format_time_range


class RichEventRenderer:
    """Render calendar events using Rich for terminal display.

    Uses neutral hierarchy-based colors:
    - Dates: dim
    - Times: blue
    - Event titles: default (white/normal)
    - Types and ids: cyan / dim
    - Locations: dim italic
    """

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def render_list(
        self,
        events: list[CalendarEvent],
        title: str | None = None,
    ) -> None:
        """Render events as a flat list, one line per event.

        Args:
            events: List of events to render, in stored order.
            title: Optional title for the display header.
        """
        if not events:
            self.render_empty()
            return

        self.console.print()
        if title:
            self.console.print(f"[bold]  {title}[/bold]")
            self.console.print("━" * 40)

        for event in events:
            self._render_list_event(event)

        self.console.print()
        self.console.print("─" * 40)
        event_word = "event" if len(events) == 1 else "events"
        self.console.print(f"[dim]{len(events)} {event_word}[/dim]")
        self.console.print()

    def render_empty(self, message: str | None = None) -> None:
        """Render an empty state message.

        Args:
            message: Optional custom message (defaults to "No events found").
        """
        msg = message or "No events found"
        self.console.print(f"\n[dim]{msg}[/dim]\n")

    def _render_list_event(self, event: CalendarEvent) -> None:
        """Render a single event in list format."""
        # Text.append keeps user text out of Rich markup parsing
        line = Text()
        line.append(f"{format_event_date(event.start_date)}  ", style="dim")
        line.append(f"{format_time_range(event):<12}", style="blue")
        line.append(f"{event.type.value:<12}", style="cyan")
        line.append(event.title)

        if event.location:
            line.append(f" ({event.location})", style="italic dim")

        reminder = format_reminder(event.reminder)
        if reminder:
            line.append(f" ⏰ {reminder}", style="dim")

        line.append(f"  [{event.id}]", style="dim")
        self.console.print(line)
