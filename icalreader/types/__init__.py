"""Decoders for the values of calendar properties."""

from .date_time import to_dated_property, to_timestamp, resolve_tzinfo
from .recur import parse_rule
from .text import unescape_text

__all__ = [
    "to_dated_property",
    "to_timestamp",
    "resolve_tzinfo",
    "parse_rule",
    "unescape_text",
]
