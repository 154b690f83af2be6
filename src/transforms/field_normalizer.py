"""Cell normalization transforms.

This module undoes the feed's spreadsheet-literal cell wrapping and
converts its date cells into UTC instants and display strings.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
import re

from core.constants import (
    CELL_DATE_FORMAT,
    CELL_DATE_PATTERN,
    SPREADSHEET_LITERAL_PREFIX,
    SPREADSHEET_LITERAL_SUFFIX,
    TRAILING_DELIMITER,
)
from core.errors import DateFormatError

_CELL_DATE_RE = re.compile(CELL_DATE_PATTERN)


def trim_value(value: str) -> str:
    """Strip the ``="..."`` literal wrapping from a raw cell.

    The leading ``="`` marker goes first, then one trailing comma,
    then one trailing quote. Unwrapped cells are returned unchanged.

    Args:
        value: Raw cell text, already whitespace-stripped.

    Returns:
        Unwrapped cell text.
    """
    if value.startswith(SPREADSHEET_LITERAL_PREFIX):
        value = value[len(SPREADSHEET_LITERAL_PREFIX):]
    if value.endswith(TRAILING_DELIMITER):
        value = value[: -len(TRAILING_DELIMITER)]
    if value.endswith(SPREADSHEET_LITERAL_SUFFIX):
        value = value[: -len(SPREADSHEET_LITERAL_SUFFIX)]
    return value


def parse_cell_date(value: str) -> datetime:
    """Parse a ``MM/DD/YYYY HH:MM`` cell as a UTC instant.

    The literal digits are taken as UTC wall-clock time; no local
    offset is applied.

    Args:
        value: Raw date cell.

    Returns:
        Timezone-aware UTC datetime.

    Raises:
        DateFormatError: If the cell does not match the fixed format.
    """
    text = trim_value(value)
    if _CELL_DATE_RE.fullmatch(text) is None:
        raise DateFormatError(
            f"Failed to parse date cell '{value}': expected MM/DD/YYYY HH:MM. "
            "The SUA export date format may have changed."
        )
    try:
        parsed = datetime.strptime(text, CELL_DATE_FORMAT)
    except ValueError as error:
        raise DateFormatError(
            f"Failed to parse date cell '{value}': {error}. "
            "The SUA export date format may have changed."
        ) from error
    return parsed.replace(tzinfo=timezone.utc)


def format_zulu_timestamp(instant: datetime) -> str:
    """Render an instant as ISO-8601 UTC with milliseconds and ``Z``."""
    utc_instant = instant.astimezone(timezone.utc)
    milliseconds = utc_instant.microsecond // 1000
    return f"{utc_instant.strftime('%Y-%m-%dT%H:%M:%S')}.{milliseconds:03d}Z"


def format_local_timestamp(instant: datetime, zone: tzinfo | None = None) -> str:
    """Render an instant in a local zone as ``M/D/YYYY, h:mm:ss AM``.

    Args:
        instant: Timezone-aware datetime.
        zone: Target zone, or None for the process-local zone.

    Returns:
        Locale-style local date and time string.
    """
    local = instant.astimezone(zone)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local.month}/{local.day}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )
