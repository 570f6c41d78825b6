"""Library for splitting calendar content into content lines.

A content line may be folded over multiple physical lines, where each
continuation begins with a single whitespace character. Continuations are
left in place here and reassembled by the reader, which knows which
property the fragment belongs to.
"""

from __future__ import annotations

import logging
import re

from icalreader.exceptions import InvalidDocumentError

from .const import BEGIN_VCALENDAR, LINE_BREAK, MISPLACED_DELIMITER, WSP

_LOGGER = logging.getLogger(__name__)

MISPLACED_DELIMITER_RE = re.compile(MISPLACED_DELIMITER)
LINES_RE = re.compile(LINE_BREAK)


def repair_delimiters(content: str) -> str:
    """Join a ':' or ';' that was folded onto its own line with the line before."""
    return MISPLACED_DELIMITER_RE.sub(r"\1", content)


def unfolded_lines(content: str) -> list[str]:
    """Split content into lines after repairing misplaced delimiters."""
    return LINES_RE.split(repair_delimiters(content))


def prepare_lines(content: str) -> list[str]:
    """Return the content lines of a calendar document.

    Raises InvalidDocumentError if the content does not start with a
    BEGIN:VCALENDAR line.
    """
    lines = unfolded_lines(content)
    if lines[0] != BEGIN_VCALENDAR:
        raise InvalidDocumentError(
            f"Expected content to start with '{BEGIN_VCALENDAR}'",
            detailed_error=lines[0],
        )
    _LOGGER.debug("Prepared %d content lines", len(lines))
    return lines


def trim_continuation(fragment: str) -> str:
    """Strip at most one leading whitespace character from a continuation."""
    if fragment and fragment[0] in WSP:
        return fragment[1:]
    return fragment
