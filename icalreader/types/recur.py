"""Library for decoding RRULE values.

A recurrence rule such as `FREQ=WEEKLY;UNTIL=20071231T000000Z;INTERVAL=2`
is split into its name/value components. The rule is not interpreted or
expanded into instances.
"""

from __future__ import annotations

import logging

from icalreader.store import RuleSet

_LOGGER = logging.getLogger(__name__)

RRULE = "RRULE"


def parse_rule(value: str) -> RuleSet:
    """Split an RRULE value into a RuleSet of its components."""
    rule = RuleSet()
    for part in value.split(";"):
        if not part:
            continue
        name, _, part_value = part.partition("=")
        if not name:
            _LOGGER.debug("Ignoring rule part with no name: '%s'", part)
            continue
        rule.put(name, part_value)
    return rule
