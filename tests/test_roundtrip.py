"""Encode/decode round-trip behaviour, including the known asymmetries."""

from datetime import date, datetime, timezone

from calendar_clone.ics.decoder import decode_events
from calendar_clone.ics.encoder import encode_events
from calendar_clone.models.event import CalendarEvent, EventType

UTC = timezone.utc


def roundtrip(events, id_generator=None):
    document = encode_events(events)
    if id_generator is None:
        return decode_events(document)
    return decode_events(document, id_generator=id_generator)


def test_roundtrip_timed_event():
    """Test title, text fields, dates and all_day survive a round trip."""
    original = CalendarEvent(
        id="1741080600000",
        title="Design review",
        description="Bring mockups",
        location="Room 4",
        start_date=datetime(2025, 3, 4, 9, 30, 15, tzinfo=UTC),
        end_date=datetime(2025, 3, 4, 11, 0, 45, tzinfo=UTC),
    )
    [decoded] = roundtrip([original])

    assert decoded.title == original.title
    assert decoded.description == original.description
    assert decoded.location == original.location
    assert decoded.start_date == original.start_date
    assert decoded.end_date == original.end_date
    assert decoded.all_day is False


def test_roundtrip_truncates_to_seconds():
    """Test timed events are preserved to one-second precision."""
    original = CalendarEvent(
        id="x",
        title="t",
        start_date=datetime(2025, 3, 4, 9, 30, 15, 500000, tzinfo=UTC),
        end_date=datetime(2025, 3, 4, 9, 45, tzinfo=UTC),
    )
    [decoded] = roundtrip([original])
    assert decoded.start_date == datetime(2025, 3, 4, 9, 30, 15, tzinfo=UTC)


def test_roundtrip_all_day_event():
    """Test all-day events come back as dates with all_day set."""
    original = CalendarEvent(
        id="x",
        title="Conference",
        start_date=date(2025, 6, 2),
        end_date=date(2025, 6, 4),
        all_day=True,
    )
    [decoded] = roundtrip([original])

    assert decoded.all_day is True
    assert decoded.start_date == date(2025, 6, 2)
    assert decoded.end_date == date(2025, 6, 4)


def test_roundtrip_all_day_from_datetimes_keeps_day():
    """Test all-day events stored with times decode to their UTC day."""
    original = CalendarEvent(
        id="x",
        title="Offsite",
        start_date=datetime(2025, 6, 2, 15, 0, tzinfo=UTC),
        end_date=datetime(2025, 6, 3, 15, 0, tzinfo=UTC),
        all_day=True,
    )
    [decoded] = roundtrip([original])
    assert decoded.start_date == date(2025, 6, 2)
    assert decoded.end_date == date(2025, 6, 3)


def test_roundtrip_empty_calendar():
    """Test an empty export decodes to no events."""
    assert roundtrip([]) == []


def test_roundtrip_preserves_order_and_count():
    """Test several events decode in the order they were encoded."""
    events = [
        CalendarEvent(
            id=str(i),
            title=f"Event {i}",
            start_date=datetime(2025, 1, i, 8, 0, tzinfo=UTC),
            end_date=datetime(2025, 1, i, 9, 0, tzinfo=UTC),
        )
        for i in range(1, 6)
    ]
    assert [e.title for e in roundtrip(events)] == [f"Event {i}" for i in range(1, 6)]


def test_roundtrip_escaped_newline_stays_literal():
    """Test commas and semicolons round-trip but newlines do not."""
    original = CalendarEvent(
        id="x",
        title="Lunch, drinks; later\nmaybe",
        start_date=datetime(2025, 3, 4, 12, 0, tzinfo=UTC),
        end_date=datetime(2025, 3, 4, 13, 0, tzinfo=UTC),
    )
    [decoded] = roundtrip([original])

    assert decoded.title == "Lunch, drinks; later\\nmaybe"
    assert decoded.title != original.title


def test_roundtrip_own_uid_is_not_recovered(id_sequence):
    """Test the exported UID contains '@', so the decoded id is fresh."""
    original = CalendarEvent(
        id="abc123",
        title="Standup",
        start_date=datetime(2025, 3, 4, 9, 0, tzinfo=UTC),
        end_date=datetime(2025, 3, 4, 9, 15, tzinfo=UTC),
    )
    document = encode_events([original])
    assert "UID:abc123@calendar-clone.local" in document

    [decoded] = decode_events(document, id_generator=id_sequence)
    assert decoded.id == "gen-1"
    assert decoded.id != "abc123"


def test_roundtrip_reminder_is_not_decoded():
    """Test the VALARM is written but ignored on decode."""
    original = CalendarEvent(
        id="x",
        title="Dentist",
        description="Bring card",
        start_date=datetime(2025, 3, 4, 9, 0, tzinfo=UTC),
        end_date=datetime(2025, 3, 4, 10, 0, tzinfo=UTC),
        reminder=15,
    )
    document = encode_events([original])
    assert "TRIGGER:-PT15M" in document

    [decoded] = decode_events(document)
    assert decoded.reminder is None
    assert decoded.description == "Bring card"


def test_roundtrip_type_resets_to_appointment():
    """Test type and color have no wire form."""
    original = CalendarEvent(
        id="x",
        title="Ship it",
        start_date=datetime(2025, 3, 4, 9, 0, tzinfo=UTC),
        end_date=datetime(2025, 3, 4, 10, 0, tzinfo=UTC),
        type=EventType.TASK,
        color="#00ff00",
    )
    [decoded] = roundtrip([original])
    assert decoded.type == EventType.APPOINTMENT
    assert decoded.color is None


def test_roundtrip_empty_text_fields_decode_as_empty_strings():
    """Test missing description/location come back as empty strings."""
    original = CalendarEvent(
        id="x",
        title="t",
        start_date=datetime(2025, 3, 4, 9, 0, tzinfo=UTC),
        end_date=datetime(2025, 3, 4, 10, 0, tzinfo=UTC),
    )
    [decoded] = roundtrip([original])
    assert decoded.description == ""
    assert decoded.location == ""
