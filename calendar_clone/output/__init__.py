"""Output layer for calendar files."""

from calendar_clone.output.ics_writer import ICSWriter, export_filename, export_ics

__all__ = [
    "ICSWriter",
    "export_filename",
    "export_ics",
]
