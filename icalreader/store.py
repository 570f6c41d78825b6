"""Library for holding decoded property values of calendar components.

A PropertyStore is the storage unit behind both the calendar and every
event. It maps property names, exactly as they appear in the content
(e.g. `SUMMARY` or `X-WR-CALNAME`), to decoded values while preserving the
order in which the properties were first written.

A stored value is one of a small set of kinds:

  - TEXT: a plain `str` as read from the content line
  - TIMESTAMP: a `datetime.datetime`, e.g. for `DTSTAMP`
  - DATED_VALUE: a nested `DatedValue` store, used for `DTSTART` and `DTEND`
  - RULE_SET: a nested `RuleSet` store, used for `RRULE`

Callers can branch on `PropertyStore.kind` rather than inspecting types:

```python
from icalreader.store import ValueKind

match event.properties.kind("DTSTART"):
    case ValueKind.DATED_VALUE:
        ...
```
"""

from __future__ import annotations

import datetime
import enum
from collections.abc import Iterator
from typing import Any, Union

from .exceptions import InvalidKeyError, PropertyNotFoundError

__all__ = [
    "PropertyStore",
    "DatedValue",
    "RuleSet",
    "ValueKind",
    "PropertyValue",
]


class ValueKind(str, enum.Enum):
    """The kind of value held by a property."""

    TEXT = "TEXT"
    """A plain text value."""

    TIMESTAMP = "TIMESTAMP"
    """A decoded `datetime.datetime`."""

    DATED_VALUE = "DATED_VALUE"
    """A start or end time with its timezone and original literal."""

    RULE_SET = "RULE_SET"
    """The components of a recurrence rule."""

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class PropertyStore:
    """An ordered map of property names to values."""

    def __init__(self) -> None:
        """Initialize an empty PropertyStore."""
        self._properties: dict[str, PropertyValue] = {}

    def put(self, key: str, value: PropertyValue) -> None:
        """Add a property or replace the value of an existing one.

        Replacing a value keeps the original position of the key.
        """
        if not isinstance(key, str) or not key:
            raise InvalidKeyError(f"Invalid property name: {key!r}")
        self._properties[key] = value

    def get(self, key: str) -> PropertyValue:
        """Return the value of the property with the specified name."""
        try:
            return self._properties[key]
        except KeyError:
            raise PropertyNotFoundError(f"Property '{key}' not found") from None

    def find(self, key: str) -> PropertyValue | None:
        """Return the value of the property or None if it is not present."""
        return self._properties.get(key)

    def remove(self, key: str) -> None:
        """Remove the property if it is present."""
        self._properties.pop(key, None)

    def contains_key(self, key: str) -> bool:
        """Return True if a property with the name exists."""
        return key in self._properties

    def contains_value(self, value: Any) -> bool:
        """Return True if any property holds the value."""
        return any(existing == value for existing in self._properties.values())

    def keys(self) -> list[str]:
        """Return the property names in insertion order."""
        return list(self._properties)

    def values(self) -> list[PropertyValue]:
        """Return the property values in insertion order."""
        return list(self._properties.values())

    def items(self) -> list[tuple[str, PropertyValue]]:
        """Return (name, value) pairs in insertion order."""
        return list(self._properties.items())

    def size(self) -> int:
        """Return the number of properties."""
        return len(self._properties)

    def clear(self) -> None:
        """Remove all properties."""
        self._properties = {}

    def kind(self, key: str) -> ValueKind:
        """Return the kind of value stored for the property."""
        return value_kind(self.get(key))

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyStore):
            return NotImplemented
        return type(self) is type(other) and self.items() == other.items()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._properties!r})"


class DatedValue(PropertyStore):
    """A decoded DTSTART or DTEND property.

    Holds exactly three keys: `DATETIME` with the decoded timestamp, `TZID`
    with the timezone identifier and the property name itself with the
    original literal value.
    """


class RuleSet(PropertyStore):
    """The name/value components of an RRULE, e.g. FREQ or UNTIL."""


PropertyValue = Union[str, datetime.datetime, DatedValue, RuleSet]


def value_kind(value: PropertyValue) -> ValueKind:
    """Return the ValueKind for a stored value."""
    if isinstance(value, DatedValue):
        return ValueKind.DATED_VALUE
    if isinstance(value, RuleSet):
        return ValueKind.RULE_SET
    if isinstance(value, datetime.datetime):
        return ValueKind.TIMESTAMP
    return ValueKind.TEXT
