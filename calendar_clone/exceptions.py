"""Exception hierarchy for calendar operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class EventNotFoundError(CalendarError):
    """Event not found in the store."""

    pass


class ValidationError(CalendarError):
    """Pydantic validation error."""

    pass


class IngestionError(CalendarError):
    """Error during calendar import."""

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass


class StoreError(CalendarError):
    """Error while writing the event store."""

    pass
