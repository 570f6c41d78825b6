"""Library for splitting a content line into a property name and value.

Given a content line of:

  DTSTART;TZID=Europe/Oslo:20070719T220000

The tokenizer returns:

  ContentLine(name='DTSTART;TZID=Europe/Oslo', value='20070719T220000')

The property parameters are kept as part of the name, and it is up to the
value decoders to pull out the parameters they care about with
`split_parameters`. A line that does not look like a property, such as a
folded continuation of a long value, is returned with no name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# A property name starts with an uppercase letter and runs until the first
# ':' that is not inside a quoted parameter value.
_RE_CONTENTLINE = re.compile(r'([A-Z](?:[^:"]|"[^"]*")+):(.*)', re.DOTALL)
_RE_PARAM = re.compile(r';([^;=:"]+)=("[^"]*"|[^;]*)')
_QUOTE = '"'


@dataclass
class ContentLine:
    """A single tokenized line of calendar content."""

    name: str | None
    """Property name including any parameters, or None for a continuation."""

    value: str

    @property
    def is_continuation(self) -> bool:
        """Return True if this line continues the value of the previous one."""
        return self.name is None


@dataclass
class PropertyName:
    """A property name split from its parameters."""

    name: str
    params: dict[str, str] = field(default_factory=dict)

    def get_parameter(self, name: str) -> str | None:
        """Return the parameter value with the specified name."""
        return self.params.get(name.upper())


def tokenize_line(line: str) -> ContentLine:
    """Split a content line into its property name and value."""
    if match := _RE_CONTENTLINE.match(line):
        return ContentLine(name=match.group(1), value=match.group(2))
    return ContentLine(name=None, value=line)


def split_parameters(name: str) -> PropertyName:
    """Split a tokenized property name such as 'DTSTART;TZID=Europe/Oslo'."""
    base, sep, _ = name.partition(";")
    if not sep:
        return PropertyName(name=name)
    params: dict[str, str] = {}
    for param_name, param_value in _RE_PARAM.findall(name[len(base) :]):
        if param_value.startswith(_QUOTE) and param_value.endswith(_QUOTE):
            param_value = param_value[1:-1]
        params.setdefault(param_name.upper(), param_value)
    return PropertyName(name=base, params=params)
