"""Shared constants for calendar-clone."""

# Key under which the event list is persisted
STORE_KEY = "calendar-events"

# Default event store location
STORE_FILENAME = "calendar-events.json"

# ICS identity
ICS_PRODID = "-//Google Calendar Clone//Calendar//EN"
ICS_UID_DOMAIN = "calendar-clone.local"

# Export file naming (export date, not an event date)
EXPORT_FILENAME_PATTERN = "calendar-export-{date}.ics"
