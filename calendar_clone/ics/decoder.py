"""ICS document decoder.

A single-pass line scanner. Each line moves the scanner between three
states:

    Outside          -- between events; only BEGIN:VEVENT matters
    Inside(builder)  -- collecting properties for one VEVENT
    InAlarm(builder) -- inside a VALARM nested in the event; lines skipped

A VEVENT is emitted on END:VEVENT when it has a non-empty title and both
a start and an end date. Everything else is dropped without error.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

from calendar_clone.ics.formatting import parse_date_value, parse_timestamp, unescape_text
from calendar_clone.models.event import CalendarEvent, EventDate, EventType
from calendar_clone.utils import IdGenerator, generate_import_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventBuilder:
    """Accumulates the properties of one VEVENT."""

    id: str
    type: EventType = EventType.APPOINTMENT
    all_day: bool = False
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[EventDate] = None
    end_date: Optional[EventDate] = None

    def is_complete(self) -> bool:
        """Title non-empty and both dates present (even if invalid)."""
        return bool(self.title) and self.start_date is not None and self.end_date is not None

    def build(self) -> CalendarEvent:
        return CalendarEvent(
            id=self.id,
            title=self.title,
            description=self.description,
            location=self.location,
            start_date=self.start_date,
            end_date=self.end_date,
            type=self.type,
            all_day=self.all_day,
        )


@dataclass(frozen=True)
class Outside:
    pass


@dataclass(frozen=True)
class Inside:
    builder: EventBuilder


@dataclass(frozen=True)
class InAlarm:
    builder: EventBuilder


ScanState = Union[Outside, Inside, InAlarm]

OUTSIDE = Outside()

# (builder, raw property with parameters, value) -> builder
PropertySetter = Callable[[EventBuilder, str, str], EventBuilder]


def _is_date_value(raw_property: str) -> bool:
    params = raw_property.split(";")[1:]
    return "VALUE=DATE" in params


def _parse_dt(raw_property: str, value: str) -> tuple[EventDate, bool]:
    if _is_date_value(raw_property):
        return parse_date_value(value), True
    return parse_timestamp(value), False


def _set_title(builder: EventBuilder, raw_property: str, value: str) -> EventBuilder:
    return replace(builder, title=unescape_text(value))


def _set_description(builder: EventBuilder, raw_property: str, value: str) -> EventBuilder:
    return replace(builder, description=unescape_text(value))


def _set_location(builder: EventBuilder, raw_property: str, value: str) -> EventBuilder:
    return replace(builder, location=unescape_text(value))


def _set_start(builder: EventBuilder, raw_property: str, value: str) -> EventBuilder:
    start, is_date = _parse_dt(raw_property, value)
    return replace(builder, start_date=start, all_day=builder.all_day or is_date)


def _set_end(builder: EventBuilder, raw_property: str, value: str) -> EventBuilder:
    end, is_date = _parse_dt(raw_property, value)
    return replace(builder, end_date=end, all_day=builder.all_day or is_date)


def _set_uid(builder: EventBuilder, raw_property: str, value: str) -> EventBuilder:
    # UIDs carrying a domain part are foreign (or our own export); keep the fresh id
    if "@" in value:
        return builder
    return replace(builder, id=value)


PROPERTY_SETTERS: dict[str, PropertySetter] = {
    "SUMMARY": _set_title,
    "DESCRIPTION": _set_description,
    "LOCATION": _set_location,
    "DTSTART": _set_start,
    "DTEND": _set_end,
    "UID": _set_uid,
}


def apply_property(builder: EventBuilder, line: str) -> EventBuilder:
    """Apply one content line to the builder; unknown properties are ignored."""
    raw_property, _, value = line.partition(":")
    name = raw_property.split(";", 1)[0]
    setter = PROPERTY_SETTERS.get(name)
    if setter is None:
        return builder
    return setter(builder, raw_property, value)


def transition(
    state: ScanState, line: str, id_generator: IdGenerator = generate_import_id
) -> tuple[ScanState, Optional[CalendarEvent]]:
    """Advance the scanner by one stripped line.

    Returns:
        The next state, and the completed event if this line closed a valid VEVENT
    """
    if line == "BEGIN:VEVENT":
        if not isinstance(state, Outside):
            logger.debug("Discarding unterminated VEVENT")
        return Inside(EventBuilder(id=id_generator())), None

    if isinstance(state, Outside):
        return state, None

    if line == "END:VEVENT":
        builder = state.builder
        if builder.is_complete():
            return OUTSIDE, builder.build()
        logger.debug(f"Dropping incomplete VEVENT (title={builder.title!r})")
        return OUTSIDE, None

    if isinstance(state, InAlarm):
        if line == "END:VALARM":
            return Inside(state.builder), None
        return state, None

    if line == "BEGIN:VALARM":
        return InAlarm(state.builder), None

    return Inside(apply_property(state.builder, line)), None


class ICSDecoder:
    """Decode ICS text into calendar events with partial-success semantics."""

    def __init__(self, id_generator: IdGenerator = generate_import_id):
        self.id_generator = id_generator

    def decode(self, text: str) -> list[CalendarEvent]:
        """Decode every complete VEVENT in text, in document order.

        Never raises for malformed input: incomplete events are dropped,
        unparseable dates become InvalidDate, and an unterminated final
        VEVENT is discarded.
        """
        events: list[CalendarEvent] = []
        state: ScanState = OUTSIDE

        for raw_line in text.split("\n"):
            state, event = transition(state, raw_line.strip(), self.id_generator)
            if event is not None:
                events.append(event)

        if not isinstance(state, Outside):
            logger.debug("Discarding unterminated VEVENT at end of input")

        logger.info(f"Decoded {len(events)} events")
        return events


def decode_events(
    text: str, id_generator: IdGenerator = generate_import_id
) -> list[CalendarEvent]:
    """Decode ICS text using the given id generator."""
    return ICSDecoder(id_generator=id_generator).decode(text)
