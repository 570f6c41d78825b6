"""A reader for iCalendar content.

The reader parses the text of an ics file into a `CalendarDocument` with
its calendar properties and a list of `CalendarEvent` objects:

```python
from icalreader import parse_calendar

calendar = parse_calendar(content)
for event in calendar.events:
    print(event.start, event.timezone, event.get_property("SUMMARY"))
```
"""

from .calendar import CalendarDocument
from .event import CalendarEvent
from .reader import CalendarReader, parse_calendar
from .store import DatedValue, PropertyStore, RuleSet, ValueKind

__all__ = [
    "calendar",
    "compat",
    "event",
    "exceptions",
    "reader",
    "store",
    "types",
    "CalendarDocument",
    "CalendarEvent",
    "CalendarReader",
    "DatedValue",
    "PropertyStore",
    "RuleSet",
    "ValueKind",
    "parse_calendar",
]
