"""Test fixtures."""

import pathlib

import pytest

from icalreader.calendar import CalendarDocument
from icalreader.reader import parse_calendar

TESTDATA_PATH = pathlib.Path(__file__).parent / "testdata"


@pytest.fixture
def google_calendar() -> CalendarDocument:
    """Fixture for a calendar exported with timezone definitions."""
    return parse_calendar((TESTDATA_PATH / "google_calendar.ics").read_text())


@pytest.fixture
def mozilla_calendar() -> CalendarDocument:
    """Fixture for a calendar with delimiters folded onto their own line."""
    return parse_calendar((TESTDATA_PATH / "mozilla_calendar.ics").read_text())
