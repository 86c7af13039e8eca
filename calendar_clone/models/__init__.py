"""Pydantic models for calendar-clone."""

from calendar_clone.models.event import (
    CalendarEvent,
    EventDate,
    EventType,
    InvalidDate,
)

__all__ = [
    "CalendarEvent",
    "EventDate",
    "EventType",
    "InvalidDate",
]
