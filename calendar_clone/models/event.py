"""Event model with Pydantic v2 validation."""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, field_serializer, field_validator


class EventType(str, Enum):
    """Event type enumeration."""

    APPOINTMENT = "appointment"
    TASK = "task"
    MEETING = "meeting"
    REMINDER = "reminder"


class InvalidDate:
    """A date value that could not be parsed.

    Carries the raw text it was built from. It never raises, and it still
    counts as a present value wherever a date is required.
    """

    __slots__ = ("raw",)

    def __init__(self, raw: str = ""):
        self.raw = raw

    def __repr__(self) -> str:
        return f"InvalidDate({self.raw!r})"

    def __str__(self) -> str:
        return "Invalid Date"

    def __eq__(self, other) -> bool:
        return isinstance(other, InvalidDate) and other.raw == self.raw

    def __hash__(self) -> int:
        return hash((InvalidDate, self.raw))


EventDate = Union[datetime, date, InvalidDate]


def coerce_event_date(value):
    """Normalize an incoming date value.

    - None becomes InvalidDate (a stored date that failed to serialize)
    - ISO strings are parsed ("YYYY-MM-DD" -> date, anything else -> datetime)
    - naive datetimes are taken as UTC, aware ones converted to UTC
    """
    if value is None:
        return InvalidDate()
    if isinstance(value, str):
        try:
            if len(value) == 10:
                value = date.fromisoformat(value)
            else:
                value = datetime.fromisoformat(value)
        except ValueError:
            return InvalidDate(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return value


class CalendarEvent(BaseModel):
    """A calendar event as exchanged with the ICS codec and the event store."""

    id: str
    title: str
    description: Optional[str] = None
    start_date: EventDate
    end_date: EventDate
    type: EventType = EventType.APPOINTMENT
    color: Optional[str] = None
    all_day: bool = False
    location: Optional[str] = None
    attendees: Optional[list[str]] = None
    reminder: Optional[int] = None  # minutes before event

    class Config:
        """Pydantic config."""

        arbitrary_types_allowed = True

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def convert_date(cls, v):
        """Accept ISO strings, naive datetimes and null."""
        return coerce_event_date(v)

    @field_serializer("start_date", "end_date", when_used="json")
    def serialize_date(self, v: EventDate) -> Optional[str]:
        """ISO text for real dates, null for InvalidDate."""
        if isinstance(v, InvalidDate):
            return None
        return v.isoformat()

    @property
    def has_valid_dates(self) -> bool:
        """True if neither date is an InvalidDate."""
        return not isinstance(self.start_date, InvalidDate) and not isinstance(
            self.end_date, InvalidDate
        )
