"""Library for decoding TEXT values."""

import re

UNESCAPE_CHAR = {"\\\\": "\\", "\\;": ";", "\\,": ",", "\\N": "\n", "\\n": "\n"}
_RE_ESCAPE = re.compile(r"\\[\\;,Nn]")


def unescape_text(value: str) -> str:
    """Replace backslash escape sequences in a TEXT value.

    The value is scanned once so that an escaped backslash followed by an
    'n' (e.g. `\\\\n`) is not turned into a newline.
    """
    if "\\" not in value:
        return value
    return _RE_ESCAPE.sub(lambda match: UNESCAPE_CHAR[match.group(0)], value)
