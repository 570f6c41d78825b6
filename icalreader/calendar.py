"""The Calendar document."""

from __future__ import annotations

import datetime
import logging

from pydantic import BaseModel, ConfigDict, Field

from .event import CalendarEvent
from .exceptions import EventNotFoundError
from .store import PropertyStore, PropertyValue

_LOGGER = logging.getLogger(__name__)


def _start_sort_key(event: CalendarEvent) -> tuple[bool, datetime.datetime]:
    """Sort events by start time."""
    if not event.has_start:
        return (True, datetime.datetime.min)
    return (False, event.start)


class CalendarDocument(BaseModel):
    """A sequence of calendar properties and calendar events."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    events: list[CalendarEvent] = Field(default_factory=list)
    """Events associated with this calendar, in the order they were read."""

    properties: PropertyStore = Field(default_factory=PropertyStore)
    """Calendar level properties, including those of any VTIMEZONE."""

    @property
    def event_count(self) -> int:
        """Return the number of events on the calendar."""
        return len(self.events)

    def get_event_at_index(self, index: int) -> CalendarEvent:
        """Return the event at the specified position."""
        if not 0 <= index < len(self.events):
            raise EventNotFoundError(
                f"No event at index {index}, calendar has {len(self.events)} events"
            )
        return self.events[index]

    def add_event(self, event: CalendarEvent) -> None:
        """Append an event to the calendar."""
        self.events.append(event)

    @property
    def property_names(self) -> list[str]:
        """Return the names of all calendar properties."""
        return self.properties.keys()

    def get_property(self, name: str) -> PropertyValue:
        """Return the value of a calendar property."""
        return self.properties.get(name)

    def set_property(self, name: str, value: PropertyValue) -> None:
        """Add or replace a calendar property."""
        self.properties.put(name, value)

    def sort(self) -> None:
        """Sort the events by start time.

        Events without a DTSTART keep their relative order after all the
        events that have one.
        """
        self.events.sort(key=_start_sort_key)
        _LOGGER.debug("Sorted %d events", len(self.events))
