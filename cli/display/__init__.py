"""Display module for rendering calendar output.

- console: Shared Rich console instance
- RichEventRenderer: Rich-based event list display
- Formatting functions for dates, time ranges and reminders
"""

from cli.display.console import console
from cli.display.formatters import format_event_date, format_reminder, format_time_range
from cli.display.rich_renderer import RichEventRenderer

__all__ = [
    "console",
    "RichEventRenderer",
    "format_event_date",
    "format_reminder",
    "format_time_range",
]
