"""Epoch conversion utilities.

This module provides functions for converting between Dates, civil
field tuples and Unix timestamps in whole seconds.

Functions:
    to_unix_seconds: Convert Date to Unix timestamp in seconds.
    from_unix_seconds: Create Date from Unix seconds.
    timestamp_to_fields: Split Unix seconds into civil fields.

The Unix epoch is 1970-01-01T0:0:0. No timezone offset and no leap
seconds are applied in either direction.

Examples:
    >>> from civiltime.convert import to_unix_seconds, from_unix_seconds

    >>> from_unix_seconds(0)
    Date(1970, 1, 1, 0, 0, 0)

    >>> to_unix_seconds(from_unix_seconds(1705322200))
    1705322200
"""

from __future__ import annotations

from civiltime._internal.calendar import Fields
from civiltime._internal.calendar import timestamp_to_fields as _timestamp_to_fields
from civiltime.core.date import Date


def to_unix_seconds(date: Date) -> int:
    """Convert a Date to Unix timestamp in seconds.

    Args:
        date: The Date to convert.

    Returns:
        Whole seconds since 1970-01-01T0:0:0.

    Raises:
        ValidationError: If the date is before the epoch.

    Examples:
        >>> to_unix_seconds(Date(2024, 1, 15, 12, 36, 40))
        1705322200
    """
    return date.to_timestamp()


def from_unix_seconds(seconds: int) -> Date:
    """Create a Date from Unix seconds.

    Args:
        seconds: Non-negative whole seconds since 1970-01-01T0:0:0.

    Returns:
        The Date for that instant.

    Raises:
        ValidationError: If seconds is negative or not an int.
    """
    return Date.from_timestamp(seconds)


def timestamp_to_fields(seconds: int) -> Fields:
    """Split Unix seconds into (year, month, day, hour, minute, second).

    Examples:
        >>> timestamp_to_fields(0)
        (1970, 1, 1, 0, 0, 0)
    """
    return _timestamp_to_fields(seconds)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "timestamp_to_fields",
]
