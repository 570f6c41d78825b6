"""Tests for reading calendar content into a CalendarDocument."""

import datetime
import logging
import pathlib
import textwrap

import pytest

from icalreader.calendar import CalendarDocument
from icalreader.exceptions import (
    CalendarParseError,
    EventNotFoundError,
    InvalidDateError,
    InvalidDocumentError,
)
from icalreader.reader import CalendarReader, parse_calendar
from icalreader.store import DatedValue, RuleSet, ValueKind

TESTDATA_PATH = pathlib.Path(__file__).parent / "testdata"
TESTDATA_FILES = sorted(TESTDATA_PATH.glob("*.ics"))
TESTDATA_IDS = [x.stem for x in TESTDATA_FILES]


def _ics(content: str) -> str:
    return textwrap.dedent(content).lstrip("\n")


@pytest.mark.parametrize("filename", TESTDATA_FILES, ids=TESTDATA_IDS)
def test_event_index_range(filename: pathlib.Path) -> None:
    """Test that every event index below the count can be read."""
    calendar = parse_calendar(filename.read_text())
    assert calendar.event_count > 0
    for i in range(calendar.event_count):
        assert calendar.get_event_at_index(i) is calendar.events[i]
    with pytest.raises(EventNotFoundError):
        calendar.get_event_at_index(calendar.event_count)
    with pytest.raises(EventNotFoundError):
        calendar.get_event_at_index(-1)


def test_calendar_properties(google_calendar: CalendarDocument) -> None:
    """Test that timezone blocks are added to the calendar properties."""
    assert google_calendar.property_names == [
        "PRODID",
        "VERSION",
        "CALSCALE",
        "METHOD",
        "X-WR-CALNAME",
        "X-WR-TIMEZONE",
        "X-WR-CALDESC",
        "TZID",
        "X-LIC-LOCATION",
        "TZOFFSETFROM",
        "TZOFFSETTO",
        "TZNAME",
        "DTSTART",
        "RRULE",
    ]
    assert google_calendar.get_property("X-WR-CALNAME") == "Team"
    assert google_calendar.get_property("TZID") == "Europe/Oslo"
    # The STANDARD block comes after DAYLIGHT and replaces its values
    assert google_calendar.get_property("TZNAME") == "CET"
    assert google_calendar.properties.kind("DTSTART") == ValueKind.DATED_VALUE
    dtstart = google_calendar.get_property("DTSTART")
    assert isinstance(dtstart, DatedValue)
    assert dtstart.get("DATETIME") == datetime.datetime(1970, 10, 25, 3, 0, 0)
    rule = google_calendar.get_property("RRULE")
    assert isinstance(rule, RuleSet)
    assert rule.get("BYMONTH") == "10"


def test_events(google_calendar: CalendarDocument) -> None:
    """Test reading the properties of events."""
    assert google_calendar.event_count == 3

    event = google_calendar.get_event_at_index(0)
    assert event.property_names == [
        "DTSTART",
        "DTEND",
        "DTSTAMP",
        "UID",
        "CREATED",
        "DESCRIPTION",
        "LAST-MODIFIED",
        "LOCATION",
        "SEQUENCE",
        "STATUS",
        "SUMMARY",
        "TRANSP",
    ]
    assert event.start == datetime.datetime(2007, 8, 1, 10, 0, 0)
    assert event.end == datetime.datetime(2007, 8, 1, 11, 0, 0)
    assert event.timezone == "Europe/Oslo"
    assert event.get_property("DTSTAMP") == datetime.datetime(2007, 7, 25, 8, 0, 0)
    assert event.get_property("CREATED") == datetime.datetime(2007, 7, 20, 12, 0, 0)
    assert event.get_property("LAST-MODIFIED") == datetime.datetime(
        2007, 7, 21, 9, 0, 0
    )
    assert event.get_property("DESCRIPTION") == (
        "Agenda: budget, planning; and a long description that is folded "
        "over two lines"
    )
    assert event.get_property("SUMMARY") == "Planning meeting"
    assert event.rules == RuleSet()

    dtstart = event.get_property("DTSTART")
    assert isinstance(dtstart, DatedValue)
    assert dtstart.items() == [
        ("DATETIME", datetime.datetime(2007, 8, 1, 10, 0, 0)),
        ("TZID", "Europe/Oslo"),
        ("DTSTART", "20070801T100000"),
    ]


def test_recurring_event(google_calendar: CalendarDocument) -> None:
    """Test an all day event with a recurrence rule."""
    event = google_calendar.get_event_at_index(1)
    assert event.start == datetime.datetime(2007, 7, 19)
    assert event.end == datetime.datetime(2007, 7, 20)
    assert event.timezone == "Europe/Oslo"
    assert event.properties.kind("RRULE") == ValueKind.RULE_SET
    assert event.rules.items() == [
        ("FREQ", "WEEKLY"),
        ("UNTIL", "20071231T000000Z"),
        ("INTERVAL", "2"),
        ("BYDAY", "TH"),
    ]


def test_calendar_timezone_fallback(google_calendar: CalendarDocument) -> None:
    """Test that an event without a TZID uses the calendar timezone."""
    event = google_calendar.get_event_at_index(2)
    assert event.start == datetime.datetime(2007, 7, 1, 22, 0, 0)
    assert event.timezone == "Europe/Oslo"


def test_sort(google_calendar: CalendarDocument) -> None:
    """Test sorting the events of a parsed calendar."""
    google_calendar.sort()
    assert [event.get_property("SUMMARY") for event in google_calendar.events] == [
        "Late call",
        "Summer party",
        "Planning meeting",
    ]


def test_misplaced_delimiters(mozilla_calendar: CalendarDocument) -> None:
    """Test content with delimiters folded onto their own line."""
    event = mozilla_calendar.get_event_at_index(0)
    assert event.start == datetime.datetime(2007, 7, 12, 14, 0, 0)
    assert event.end == datetime.datetime(2007, 7, 12, 15, 0, 0)
    assert event.timezone == "America/New_York"
    assert event.get_property("DESCRIPTION") == "Bring the forms"
    assert event.get_property("SUMMARY") == "Dentist"


def test_no_timezone_no_end() -> None:
    """Test content without any timezone and without END:VCALENDAR."""
    calendar = parse_calendar((TESTDATA_PATH / "no_timezone.ics").read_text())
    assert calendar.event_count == 1
    event = calendar.get_event_at_index(0)
    assert event.timezone == "Undefined"
    assert event.tzinfo is None
    assert event.start == datetime.datetime(2007, 7, 19, 22, 0, 0)
    assert event.get_property("SUMMARY") == "Long textPart 2"


def test_crlf_content() -> None:
    """Test content with carriage return line endings."""
    calendar = parse_calendar(
        "BEGIN:VCALENDAR\r\nVERSION:2.0\r\nBEGIN:VEVENT\r\n"
        "SUMMARY:Long text\r\n Part 2\r\nEND:VEVENT\r\nEND:VCALENDAR\r\n"
    )
    assert calendar.get_property("VERSION") == "2.0"
    assert calendar.get_event_at_index(0).get_property("SUMMARY") == "Long textPart 2"


def test_folded_values_are_decoded_whole() -> None:
    """Test that a folded date and rule are decoded once complete."""
    calendar = parse_calendar(
        _ics(
            """
            BEGIN:VCALENDAR
            BEGIN:VEVENT
            DTSTART;TZID=Europe/Oslo:2007
             0719T220000
            RRULE:FREQ=DAILY;
             COUNT=3
            END:VEVENT
            END:VCALENDAR
            """
        )
    )
    event = calendar.get_event_at_index(0)
    assert event.start == datetime.datetime(2007, 7, 19, 22, 0, 0)
    assert event.get_property("DTSTART").get("DTSTART") == "20070719T220000"
    assert event.rules.items() == [("FREQ", "DAILY"), ("COUNT", "3")]
    assert event.property_names == ["DTSTART", "RRULE"]


def test_folded_calendar_property() -> None:
    """Test a folded value on the calendar itself."""
    calendar = parse_calendar(
        _ics(
            """
            BEGIN:VCALENDAR
            X-WR-CALDESC:First
             , second
            END:VCALENDAR
            """
        )
    )
    assert calendar.get_property("X-WR-CALDESC") == "First, second"
    assert calendar.property_names == ["X-WR-CALDESC"]


def test_repeated_property_replaced() -> None:
    """Test that a repeated property keeps a single entry with the last value."""
    calendar = parse_calendar(
        _ics(
            """
            BEGIN:VCALENDAR
            BEGIN:VEVENT
            SUMMARY:first
            CATEGORIES:a
            SUMMARY:second
            END:VEVENT
            END:VCALENDAR
            """
        )
    )
    event = calendar.get_event_at_index(0)
    assert event.property_names == ["SUMMARY", "CATEGORIES"]
    assert event.get_property("SUMMARY") == "second"


def test_parameters_kept_in_name() -> None:
    """Test that parameters on text properties remain part of the name."""
    calendar = parse_calendar(
        _ics(
            """
            BEGIN:VCALENDAR
            BEGIN:VEVENT
            SUMMARY;LANGUAGE=en:Planning
            END:VEVENT
            END:VCALENDAR
            """
        )
    )
    event = calendar.get_event_at_index(0)
    assert event.property_names == ["SUMMARY;LANGUAGE=en"]
    assert event.get_property("SUMMARY;LANGUAGE=en") == "Planning"


def test_unknown_blocks_added_to_enclosing_event() -> None:
    """Test that properties of other blocks, like VALARM, go to the event."""
    calendar = parse_calendar(
        _ics(
            """
            BEGIN:VCALENDAR
            BEGIN:VEVENT
            SUMMARY:Planning
            BEGIN:VALARM
            TRIGGER:-PT15M
            END:VALARM
            END:VEVENT
            BEGIN:VEVENT
            SUMMARY:Review
            END:VEVENT
            END:VCALENDAR
            """
        )
    )
    assert calendar.event_count == 2
    event = calendar.get_event_at_index(0)
    assert event.get_property("TRIGGER") == "-PT15M"
    assert event.get_property("SUMMARY") == "Planning"
    assert calendar.get_event_at_index(1).get_property("SUMMARY") == "Review"


def test_mismatched_end_is_permissive() -> None:
    """Test that mismatched END lines are accepted by default."""
    calendar = parse_calendar(
        _ics(
            """
            BEGIN:VCALENDAR
            BEGIN:VEVENT
            SUMMARY:Planning
            END:VTIMEZONE
            X-AFTER:calendar
            END:VCALENDAR
            END:VEVENT
            """
        )
    )
    assert calendar.event_count == 1
    assert calendar.get_property("X-AFTER") == "calendar"
    assert calendar.get_event_at_index(0).property_names == ["SUMMARY"]


def test_orphan_continuation(caplog: pytest.LogCaptureFixture) -> None:
    """Test a continuation line with no property before it is dropped."""
    with caplog.at_level(logging.WARNING):
        calendar = parse_calendar(
            _ics(
                """
                BEGIN:VCALENDAR
                BEGIN:VEVENT
                 orphan
                SUMMARY:Planning
                END:VEVENT
                END:VCALENDAR
                """
            )
        )
    event = calendar.get_event_at_index(0)
    assert event.property_names == ["SUMMARY"]
    assert "orphan" in caplog.text


def test_invalid_document() -> None:
    """Test content that is not a calendar."""
    with pytest.raises(InvalidDocumentError):
        parse_calendar("BEGIN:VEVENT\nSUMMARY:Planning\nEND:VEVENT")


def test_invalid_date() -> None:
    """Test that an invalid date fails the parse."""
    with pytest.raises(InvalidDateError):
        parse_calendar(
            _ics(
                """
                BEGIN:VCALENDAR
                BEGIN:VEVENT
                DTSTAMP:yesterday
                END:VEVENT
                END:VCALENDAR
                """
            )
        )


def test_calendar_reader() -> None:
    """Test the prepare, parse and sort steps of the reader."""
    reader = CalendarReader()
    assert reader.calendar.event_count == 0
    with pytest.raises(CalendarParseError, match="prepare_data"):
        reader.parse()

    lines = reader.prepare_data((TESTDATA_PATH / "google_calendar.ics").read_text())
    assert lines[0] == "BEGIN:VCALENDAR"
    assert lines[-2] == "END:VCALENDAR"

    calendar = reader.parse()
    assert calendar is reader.calendar
    assert calendar.event_count == 3
    reader.sort()
    assert reader.calendar.get_event_at_index(0).get_property("SUMMARY") == "Late call"

    # Parsing again starts from a new calendar
    calendar_again = reader.parse()
    assert calendar_again is not calendar
    assert calendar_again.event_count == 3
    assert calendar.event_count == 3


def test_reader_invalid_document() -> None:
    """Test that the reader rejects content that is not a calendar."""
    reader = CalendarReader()
    with pytest.raises(InvalidDocumentError):
        reader.prepare_data("VERSION:2.0")


def test_independent_parses() -> None:
    """Test that parsed calendars do not share state."""
    content = (TESTDATA_PATH / "no_timezone.ics").read_text()
    first = parse_calendar(content)
    second = parse_calendar(content)
    first.get_event_at_index(0).set_property("SUMMARY", "changed")
    assert second.get_event_at_index(0).get_property("SUMMARY") == "Long textPart 2"
