"""Exceptions for icalreader library."""


class CalendarError(Exception):
    """Base exception for all icalreader errors."""


class CalendarParseError(CalendarError):
    """Exception raised when parsing an ical string.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the offending content line, useful
    for debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarParseError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class InvalidDocumentError(CalendarParseError):
    """Exception raised when the content does not start with BEGIN:VCALENDAR."""


class InvalidDateError(CalendarParseError, ValueError):
    """Exception raised when a DATE or DATE-TIME value can't be decoded.

    This is also a ValueError so that callers decoding arbitrary values can
    treat it like any other failed conversion.
    """


class PropertyNotFoundError(CalendarError, KeyError):
    """Exception raised when looking up a property that was never set.

    A property that is present with an empty value is not an error, so
    callers can always tell "absent" apart from "empty".
    """

    def __str__(self) -> str:
        """Return the message without the KeyError quoting."""
        return str(self.args[0]) if self.args else ""


class EventNotFoundError(CalendarError, IndexError):
    """Exception raised when an event index is out of range."""


class InvalidKeyError(CalendarError, ValueError):
    """Exception raised when storing a property under an invalid name."""
