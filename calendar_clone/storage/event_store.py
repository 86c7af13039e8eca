"""JSON-backed event store."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError as PydanticValidationError

from calendar_clone.constants import STORE_KEY
from calendar_clone.exceptions import EventNotFoundError, StoreError, ValidationError
from calendar_clone.models.event import CalendarEvent, EventDate, EventType
from calendar_clone.utils import IdGenerator, generate_event_id

logger = logging.getLogger(__name__)


class EventStore:
    """Persist the event list as JSON under a single key.

    Every mutating operation loads the current list, applies the change
    and writes the whole list back.
    """

    def __init__(self, path: Path, id_generator: IdGenerator = generate_event_id):
        self.path = path
        self.id_generator = id_generator

    def load(self) -> list[CalendarEvent]:
        """Load stored events.

        A missing file is an empty store. A corrupt file is logged and also
        treated as empty.
        """
        if not self.path.exists():
            return []

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            items = data.get(STORE_KEY, []) if isinstance(data, dict) else []
            return [CalendarEvent.model_validate(item) for item in items]
        except (OSError, ValueError, PydanticValidationError) as e:
            logger.error(f"Error loading events from {self.path}: {e}")
            return []

    def save(self, events: Iterable[CalendarEvent]) -> None:
        """Write events to the store file, replacing its contents."""
        data = {STORE_KEY: [event.model_dump(mode="json") for event in events]}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Failed to write event store {self.path}: {e}") from e

    def get(self, event_id: str) -> CalendarEvent:
        """Get a stored event by id."""
        for event in self.load():
            if event.id == event_id:
                return event
        raise EventNotFoundError(f"Event '{event_id}' not found")

    def add(self, event: CalendarEvent) -> CalendarEvent:
        """Append an event."""
        events = self.load()
        events.append(event)
        self.save(events)
        return event

    def create(
        self,
        title: str,
        start_date: EventDate | None = None,
        end_date: EventDate | None = None,
        **fields,
    ) -> CalendarEvent:
        """Create and store a new event.

        Missing dates default to now; the event gets a fresh id.

        Raises:
            ValidationError: If the fields do not form a valid event
        """
        now = datetime.now(timezone.utc)
        fields.setdefault("type", EventType.APPOINTMENT)
        fields.setdefault("all_day", False)
        try:
            event = CalendarEvent(
                id=self.id_generator(),
                title=title,
                start_date=start_date or now,
                end_date=end_date or now,
                **fields,
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid event: {e}") from e

        logger.info(f"Created event '{event.title}' ({event.id})")
        return self.add(event)

    def update(self, event_id: str, **changes) -> CalendarEvent:
        """Merge changes into the event with the given id.

        Raises:
            EventNotFoundError: If no event has this id
            ValidationError: If the merged fields do not form a valid event
        """
        events = self.load()
        for index, event in enumerate(events):
            if event.id != event_id:
                continue
            try:
                updated = CalendarEvent.model_validate({**event.model_dump(), **changes})
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid update for event '{event_id}': {e}") from e
            events[index] = updated
            self.save(events)
            logger.info(f"Updated event '{updated.title}' ({event_id})")
            return updated

        raise EventNotFoundError(f"Event '{event_id}' not found")

    def delete(self, event_id: str) -> None:
        """Remove the event with the given id.

        Raises:
            EventNotFoundError: If no event has this id
        """
        events = self.load()
        remaining = [event for event in events if event.id != event_id]
        if len(remaining) == len(events):
            raise EventNotFoundError(f"Event '{event_id}' not found")
        self.save(remaining)
        logger.info(f"Deleted event {event_id}")

    def extend(self, events: Iterable[CalendarEvent]) -> int:
        """Append imported events; returns how many were added."""
        new_events = list(events)
        self.save(self.load() + new_events)
        logger.info(f"Appended {len(new_events)} events to {self.path}")
        return len(new_events)
