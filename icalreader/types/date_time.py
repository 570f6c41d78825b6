"""Library for decoding DATE and DATE-TIME values.

A value such as `20070719T220000` is decoded into a `datetime.datetime`.
The `T` separator and a trailing `Z` are dropped, and a DATE value such as
`20070719` decodes to midnight. The resulting timestamp carries no tzinfo;
the timezone of a DTSTART or DTEND is kept as a TZID string on the
`DatedValue` alongside it, and `resolve_tzinfo` can map it to a tzinfo.
"""

from __future__ import annotations

import datetime
import logging
import re
import zoneinfo

from icalreader.exceptions import InvalidDateError
from icalreader.parsing.tokenizer import split_parameters
from icalreader.store import DatedValue, PropertyStore

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "to_timestamp",
    "to_dated_property",
    "resolve_tzinfo",
    "ATTR_DATETIME",
    "TZID",
    "X_WR_TIMEZONE",
    "UNDEFINED_TZID",
]

DATETIME_REGEX = re.compile(
    r"([0-9]{4})([0-9]{2})([0-9]{2})([0-9]{0,2})([0-9]{0,2})([0-9]{0,2})"
)
ATTR_DATETIME = "DATETIME"
TZID = "TZID"
X_WR_TIMEZONE = "X-WR-TIMEZONE"
UNDEFINED_TZID = "Undefined"

# Calendar properties consulted, in order, when a value has no TZID parameter
_CALENDAR_TZID_FALLBACKS = (TZID, X_WR_TIMEZONE)


def to_timestamp(value: str) -> datetime.datetime:
    """Decode a DATE or DATE-TIME value into a datetime.datetime.

    Hour, minute and second default to zero when not present.
    """
    digits = value.replace("T", "", 1).replace("Z", "", 1)
    if not (match := DATETIME_REGEX.fullmatch(digits)):
        raise InvalidDateError(
            f"Expected value to match DATE or DATE-TIME pattern: '{value}'",
            detailed_error=value,
        )
    year, month, day, hour, minute, second = (
        int(group) if group else 0 for group in match.groups()
    )
    try:
        result = datetime.datetime(year, month, day, hour, minute, second)
    except ValueError as err:
        raise InvalidDateError(
            f"Invalid DATE or DATE-TIME value '{value}': {err}", detailed_error=value
        ) from err
    _LOGGER.debug("to_timestamp returned %s", result)
    return result


def _calendar_tzid(calendar_properties: PropertyStore | None) -> str:
    """Return the default timezone of the calendar."""
    if calendar_properties is not None:
        for key in _CALENDAR_TZID_FALLBACKS:
            if calendar_properties.contains_key(key):
                return str(calendar_properties.get(key))
    return UNDEFINED_TZID


def to_dated_property(
    key: str, value: str, calendar_properties: PropertyStore | None = None
) -> tuple[str, DatedValue]:
    """Decode a DTSTART or DTEND content line into a DatedValue.

    The key may carry parameters, e.g. `DTSTART;TZID=Europe/Oslo`, and the
    returned name has them stripped. An explicit TZID parameter wins over the
    calendar TZID, which wins over the calendar X-WR-TIMEZONE.
    """
    prop = split_parameters(key)
    dated = DatedValue()
    dated.put(ATTR_DATETIME, to_timestamp(value))
    if tzid := prop.get_parameter(TZID):
        dated.put(TZID, tzid)
    else:
        dated.put(TZID, _calendar_tzid(calendar_properties))
    dated.put(prop.name, value)
    return prop.name, dated


def resolve_tzinfo(tzid: str) -> datetime.tzinfo | None:
    """Return the tzinfo for a TZID, or None if it is not a known timezone."""
    if tzid == UNDEFINED_TZID:
        return None
    try:
        return zoneinfo.ZoneInfo(tzid)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        _LOGGER.debug("Unable to resolve timezone '%s'", tzid)
        return None
