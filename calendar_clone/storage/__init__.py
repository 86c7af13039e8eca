"""Storage layer for calendar events."""

from calendar_clone.storage.event_store import EventStore

__all__ = [
    "EventStore",
]
