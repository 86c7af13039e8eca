"""Ingestion layer for calendar files."""

from calendar_clone.ingestion.ics_reader import ICSReader, ImportCallback, import_ics

__all__ = [
    "ICSReader",
    "ImportCallback",
    "import_ics",
]
