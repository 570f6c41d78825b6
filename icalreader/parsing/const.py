"""Constants for icalreader parsing library."""

ATTR_BEGIN = "BEGIN"
ATTR_END = "END"

VCALENDAR = "VCALENDAR"

BEGIN_VCALENDAR = f"{ATTR_BEGIN}:{VCALENDAR}"

# Some producers push the ':' or ';' after a property name onto its own
# continuation line, e.g. "DTSTART\r\n ;TZID=..."
MISPLACED_DELIMITER = r"[\r\n]+ ([:;])"
LINE_BREAK = r"\r?\n"
WSP = [" ", "\t"]
