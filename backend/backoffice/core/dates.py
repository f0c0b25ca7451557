"""Date normalization between wire (ISO) and display (MM/DD/YYYY) formats.

Dates are always treated as date-only values: no time, no timezone. ISO
datetimes are truncated to their first ten characters.
"""

import re
from datetime import date, datetime
from typing import Any, Optional

DISPLAY_FORMAT = "%m/%d/%Y"

_ISO_PREFIX = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")
_DISPLAY = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def parse_date(value: Any) -> Optional[date]:
    """Parse a date-ish value. Returns None for blanks, raises ValueError for garbage."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    text = value.strip()
    if not text:
        return None

    m = _ISO_PREFIX.match(text)
    if m:
        y, mo, d = m.groups()
        return date(int(y), int(mo), int(d))

    m = _DISPLAY.match(text)
    if m:
        mo, d, y = m.groups()
        return date(int(y), int(mo), int(d))

    raise ValueError(f"Invalid date: {value!r}")


def try_parse_date(value: Any) -> Optional[date]:
    """Like parse_date, but unparsable input yields None."""
    try:
        return parse_date(value)
    except ValueError:
        return None


def format_display_date(value: Any, fallback: str = "") -> str:
    """Render as MM/DD/YYYY, or fallback when missing/unparsable."""
    parsed = try_parse_date(value)
    if parsed is None:
        return fallback
    return parsed.strftime(DISPLAY_FORMAT)
