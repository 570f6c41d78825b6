"""A grouping of properties that describe a calendar event.

An event is created by the reader for every `BEGIN:VEVENT` block and holds
the decoded properties of that block. The start and end times are stored as
`DatedValue` entries and are exposed directly:

```python
event = calendar.get_event_at_index(0)
print(event.start, event.end, event.timezone)
print(event.get_property("SUMMARY"))
```
"""

from __future__ import annotations

import datetime
from typing import cast

from pydantic import BaseModel, ConfigDict, Field

from .store import DatedValue, PropertyStore, PropertyValue, RuleSet
from .types.date_time import ATTR_DATETIME, TZID, resolve_tzinfo
from .types.recur import RRULE
from .types.text import unescape_text

DTSTART = "DTSTART"
DTEND = "DTEND"


class CalendarEvent(BaseModel):
    """A single event on a calendar."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    properties: PropertyStore = Field(default_factory=PropertyStore)
    """All properties of the event in the order they were read."""

    @property
    def property_names(self) -> list[str]:
        """Return the names of all properties on the event."""
        return self.properties.keys()

    def get_property(self, name: str) -> PropertyValue:
        """Return a property value, with escape sequences removed from text."""
        value = self.properties.get(name)
        if isinstance(value, str):
            return unescape_text(value)
        return value

    def set_property(self, name: str, value: PropertyValue) -> None:
        """Add or replace a property on the event."""
        self.properties.put(name, value)

    def _dated_value(self, name: str) -> DatedValue:
        return cast(DatedValue, self.properties.get(name))

    @property
    def has_start(self) -> bool:
        """Return True if the event has a DTSTART."""
        return self.properties.contains_key(DTSTART)

    @property
    def start(self) -> datetime.datetime:
        """Return the start time of the event."""
        return cast(datetime.datetime, self._dated_value(DTSTART).get(ATTR_DATETIME))

    @property
    def end(self) -> datetime.datetime:
        """Return the end time of the event."""
        return cast(datetime.datetime, self._dated_value(DTEND).get(ATTR_DATETIME))

    @property
    def timezone(self) -> str:
        """Return the timezone identifier of the event start time."""
        return cast(str, self._dated_value(DTSTART).get(TZID))

    @property
    def tzinfo(self) -> datetime.tzinfo | None:
        """Return the timezone of the event start time, if it is a known zone."""
        return resolve_tzinfo(self.timezone)

    @property
    def rules(self) -> RuleSet:
        """Return the recurrence rule components, empty if not recurring."""
        if (rule := self.properties.find(RRULE)) is None:
            return RuleSet()
        return cast(RuleSet, rule)
