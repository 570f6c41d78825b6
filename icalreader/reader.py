"""The reader, which turns calendar content into a CalendarDocument.

This is an example of reading an ics file and listing its events:
```python
from pathlib import Path
from icalreader.reader import parse_calendar

filename = Path("example/calendar.ics")
calendar = parse_calendar(filename.read_text())
calendar.sort()
for event in calendar.events:
    print(event.start, event.get_property("SUMMARY"))
```

The reader walks the content lines once and tracks which block it is in.
Properties inside a VEVENT block are added to a new CalendarEvent, and
everything else, including the properties of VTIMEZONE, STANDARD and
DAYLIGHT blocks, is added to the calendar itself. Properties of other
blocks such as VALARM are added to whatever block encloses them.

A line that does not start with a property name continues the value of the
property before it. Each property is decoded once its value is complete:
DTSTAMP, CREATED and LAST-MODIFIED become timestamps, DTSTART and DTEND
become DatedValues and RRULE becomes a RuleSet.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from .calendar import CalendarDocument
from .compat import block_compat
from .event import DTEND, DTSTART, CalendarEvent
from .exceptions import CalendarParseError
from .parsing.const import ATTR_BEGIN, ATTR_END
from .parsing.lines import prepare_lines, trim_continuation
from .parsing.tokenizer import tokenize_line
from .store import PropertyStore, PropertyValue
from .types.date_time import to_dated_property, to_timestamp
from .types.recur import RRULE, parse_rule

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "BlockType",
    "CalendarReader",
    "ParserContext",
    "parse_calendar",
]

TIMESTAMP_PROPERTIES = {"DTSTAMP", "LAST-MODIFIED", "CREATED"}


class BlockType(str, enum.Enum):
    """The block the reader is currently in."""

    CALENDAR = "VCALENDAR"
    EVENT = "VEVENT"
    VTIMEZONE = "VTIMEZONE"
    DAYLIGHT = "DAYLIGHT"
    STANDARD = "STANDARD"

    @property
    def is_event(self) -> bool:
        """Return True if properties in this block belong to an event."""
        return self is BlockType.EVENT


_BEGIN_LINES = {f"{ATTR_BEGIN}:{block.value}": block for block in BlockType}
_END_LINES = {f"{ATTR_END}:{block.value}": block for block in BlockType}


@dataclass
class ParserContext:
    """Mutable state for reading a single calendar document."""

    calendar: CalendarDocument = field(default_factory=CalendarDocument)

    block: BlockType = BlockType.CALENDAR
    """The block that properties are currently added to."""

    event_index: int = -1
    """Index of the event being read, or of the last event read."""

    pending_key: str | None = None
    pending_value: str = ""
    """The property whose value may still be continued on the next line."""

    open_blocks: list[BlockType] = field(default_factory=list)
    """Blocks that have begun and not ended, used for strict checking."""

    @property
    def active_properties(self) -> PropertyStore:
        """Return the property store that properties are added to."""
        if self.block.is_event:
            return self.calendar.get_event_at_index(self.event_index).properties
        return self.calendar.properties


def decode_property(
    key: str, value: str, calendar_properties: PropertyStore
) -> tuple[str, PropertyValue]:
    """Decode a property value based on its name.

    DTSTART and DTEND names may carry parameters and are returned with the
    parameters stripped.
    """
    if key in TIMESTAMP_PROPERTIES:
        return key, to_timestamp(value)
    if DTSTART in key or DTEND in key:
        return to_dated_property(key, value, calendar_properties)
    if key == RRULE:
        return key, parse_rule(value)
    return key, value


def _flush_pending(context: ParserContext) -> None:
    """Decode and store the property that has been read so far."""
    if context.pending_key is None:
        return
    key, value = decode_property(
        context.pending_key, context.pending_value, context.calendar.properties
    )
    context.active_properties.put(key, value)
    _LOGGER.debug("Added %s=%s to %s", key, value, context.block)
    context.pending_key = None
    context.pending_value = ""


def _begin_block(context: ParserContext, block: BlockType) -> None:
    if block.is_event:
        context.calendar.add_event(CalendarEvent())
        context.event_index += 1
        _LOGGER.debug("Reading event %d", context.event_index)
    context.open_blocks.append(block)
    context.block = BlockType.EVENT if block.is_event else BlockType.CALENDAR


def _end_block(context: ParserContext, block: BlockType, line: str) -> None:
    if block_compat.is_strict_blocks_enabled():
        if not context.open_blocks:
            raise CalendarParseError(
                f"Unexpected '{line}' with no open block", detailed_error=line
            )
        if (expected := context.open_blocks[-1]) is not block:
            raise CalendarParseError(
                f"Unexpected '{line}', expected {ATTR_END}:{expected.value}",
                detailed_error=line,
            )
    if context.open_blocks:
        context.open_blocks.pop()
    context.block = BlockType.CALENDAR


def read_line(context: ParserContext, line: str) -> None:
    """Advance the reader by a single content line."""
    if not line:
        return
    contentline = tokenize_line(line)
    if contentline.is_continuation:
        if context.pending_key is None:
            _LOGGER.warning("Ignoring continuation with no property: '%s'", line)
            return
        context.pending_value += trim_continuation(contentline.value)
        return

    _flush_pending(context)
    if (block := _BEGIN_LINES.get(line)) is not None:
        _begin_block(context, block)
    elif (block := _END_LINES.get(line)) is not None:
        _end_block(context, block, line)
    else:
        context.pending_key = contentline.name
        context.pending_value = contentline.value


def read_lines(lines: list[str]) -> CalendarDocument:
    """Read prepared content lines into a CalendarDocument."""
    context = ParserContext()
    for line in lines:
        read_line(context, line)
    _flush_pending(context)
    if block_compat.is_strict_blocks_enabled() and context.open_blocks:
        unclosed = ", ".join(block.value for block in context.open_blocks)
        raise CalendarParseError(f"Unexpected end of content, unclosed: {unclosed}")
    _LOGGER.debug("Read calendar with %d events", context.calendar.event_count)
    return context.calendar


def parse_calendar(content: str) -> CalendarDocument:
    """Parse calendar content into a CalendarDocument."""
    return read_lines(prepare_lines(content))


class CalendarReader:
    """Reads calendar content in separate prepare and parse steps."""

    def __init__(self) -> None:
        """Initialize CalendarReader."""
        self._lines: list[str] | None = None
        self._calendar = CalendarDocument()

    def prepare_data(self, content: str) -> list[str]:
        """Split the content into lines and check that it is a calendar.

        Raises InvalidDocumentError if the content does not start with a
        BEGIN:VCALENDAR line.
        """
        self._lines = prepare_lines(content)
        return self._lines

    def parse(self) -> CalendarDocument:
        """Parse the prepared content, replacing any previously parsed calendar."""
        if self._lines is None:
            raise CalendarParseError("No content prepared, call prepare_data first")
        self._calendar = read_lines(self._lines)
        return self._calendar

    def sort(self) -> None:
        """Sort the events of the parsed calendar by start time."""
        self._calendar.sort()

    @property
    def calendar(self) -> CalendarDocument:
        """Return the most recently parsed calendar."""
        return self._calendar
