"""
Timestamp codec for the Carvoyant API.

The API exchanges every date/time field as a fixed-width string,
``yyyyMMddTHHmmss±HHmm`` (for example ``20130526T204840+0000``).
"""

import re
from datetime import datetime
from typing import Any

from dateutil import parser
from dateutil.tz import tzlocal


TIMESTAMP_PATTERN = re.compile(r'^(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})([+-])(\d{4})')


def is_timestamp(value: Any) -> bool:
    """Return True when ``value`` is already a wire timestamp string"""
    return isinstance(value, str) and TIMESTAMP_PATTERN.match(value) is not None


def timestamp_to_date(timestamp: str) -> datetime:
    """
    Parse a wire timestamp into a timezone-aware datetime.

    Args:
        timestamp: Timestamp string (format: yyyyMMddTHHmmssZ)

    Returns:
        The aware datetime carrying the offset written in the timestamp

    Raises:
        TypeError: If the value is missing, not a string, or malformed
    """
    if timestamp is None:
        raise TypeError('timestamp must be defined.')
    elif not isinstance(timestamp, str):
        raise TypeError('timestamp must be a String.')

    match = TIMESTAMP_PATTERN.match(timestamp)

    if not match:
        raise TypeError('timestamp did not match expected format (yyyyMMddTHHmmssZ).')

    year, month, day, hours, minutes, seconds, sign, offset = match.groups()

    try:
        return parser.isoparse(f"{year}-{month}-{day}T{hours}:{minutes}:{seconds}{sign}{offset}")
    except (ValueError, OverflowError):
        # Right shape, impossible date or offset (e.g. Feb 31, +9999)
        raise TypeError('timestamp did not match expected format (yyyyMMddTHHmmssZ).')


def date_to_timestamp(date: datetime) -> str:
    """
    Format a datetime as a wire timestamp.

    Naive datetimes are taken to be local time. Aware datetimes are written
    with their own UTC offset.

    Args:
        date: The datetime to convert

    Returns:
        Timestamp string (format: yyyyMMddTHHmmssZ)

    Raises:
        TypeError: If the value is missing or not a datetime
    """
    if date is None:
        raise TypeError('date must be defined.')
    elif not isinstance(date, datetime):
        raise TypeError('date must be a datetime.')

    if date.tzinfo is None or date.utcoffset() is None:
        date = date.replace(tzinfo=tzlocal())

    # Fractional minutes are dropped
    offset_minutes = int(date.utcoffset().total_seconds() / 60)
    sign = '-' if offset_minutes < 0 else '+'
    tz_hours, tz_minutes = divmod(abs(offset_minutes), 60)

    return (
        f"{date.year:04d}{date.month:02d}{date.day:02d}"
        f"T{date.hour:02d}{date.minute:02d}{date.second:02d}"
        f"{sign}{tz_hours:02d}{tz_minutes:02d}"
    )


def parse_action_timestamp(value: str) -> str:
    """
    Normalize a timestamp taken from an action URI into wire format.

    Action URIs carry ISO 8601 strings (``2013-06-27 09:00:00+0000``) rather
    than wire timestamps; both spellings are accepted.
    """
    if is_timestamp(value):
        return date_to_timestamp(timestamp_to_date(value))

    try:
        parsed = parser.isoparse(value.strip().replace(' ', 'T', 1))
    except (ValueError, OverflowError):
        raise TypeError(f"{value!r} is not a valid timestamp.")

    return date_to_timestamp(parsed)
