"""Calendar utilities for civiltime.

This module provides the calendar arithmetic behind every other type:
leap year logic, month lengths, and the conversion between whole seconds
since the Unix epoch and the six civil fields.

Conversion walks forward from 1970 one year, then one month, at a time.
That is O(years since epoch + 12), which is fine for the ranges of
interest and keeps the algorithm obviously correct.

This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_LEAP_YEAR,
    DAYS_PER_YEAR,
    EPOCH_MONTH,
    EPOCH_YEAR,
    MAX_YEAR,
    MONTHS_PER_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from civiltime._internal.validation import (
    describe_int,
    validate_int,
    validate_range,
    validate_year,
)
from civiltime.errors import ValidationError

Fields = tuple[int, int, int, int, int, int]

# No timestamp at or above this bound falls in a year up to MAX_YEAR
_TIMESTAMP_CEILING = (MAX_YEAR + 1 - EPOCH_YEAR) * DAYS_PER_LEAP_YEAR * SECONDS_PER_DAY


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the Gregorian calendar.

    A year is a leap year if it is divisible by 400, or divisible by 4
    and not by 100.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
        >>> is_leap_year(2023)
        False
    """
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return DAYS_PER_LEAP_YEAR if is_leap_year(year) else DAYS_PER_YEAR


def days_per_month(year: int) -> tuple[int, ...]:
    """Return the month-length table for a year.

    Index 0 is a placeholder so the table can be indexed by month ordinal.

    Examples:
        >>> days_per_month(2024)[2]
        29
        >>> days_per_month(2023)[2]
        28
    """
    if is_leap_year(year):
        return DAYS_IN_MONTH[:2] + (29,) + DAYS_IN_MONTH[3:]
    return DAYS_IN_MONTH


@validate_range(month=(1, MONTHS_PER_YEAR))
def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month ordinal (1-12).

    Raises:
        ValidationError: If month is not in 1-12.
    """
    return days_per_month(year)[month]


def timestamp_to_fields(timestamp: int) -> Fields:
    """Convert whole seconds since the epoch to civil fields.

    No timezone and no leap-second adjustment is applied.

    Args:
        timestamp: Non-negative whole seconds since 1970-01-01T0:0:0.

    Returns:
        Tuple of (year, month, day, hour, minute, second).

    Raises:
        ValidationError: If timestamp is negative, far beyond MAX_YEAR
            or not an int.

    Examples:
        >>> timestamp_to_fields(0)
        (1970, 1, 1, 0, 0, 0)
        >>> timestamp_to_fields(951782400)
        (2000, 2, 29, 0, 0, 0)
    """
    timestamp = validate_int("timestamp", timestamp)
    if timestamp < 0:
        raise ValidationError(
            f"timestamp must be non-negative, got {describe_int(timestamp)}"
        )
    if timestamp >= _TIMESTAMP_CEILING:
        raise ValidationError(
            f"timestamp is past year {MAX_YEAR}, got {describe_int(timestamp)}"
        )

    days, seconds_in_day = divmod(timestamp, SECONDS_PER_DAY)

    year = EPOCH_YEAR
    while days >= days_in_year(year):
        days -= days_in_year(year)
        year += 1

    lengths = days_per_month(year)
    month = EPOCH_MONTH
    while days >= lengths[month]:
        days -= lengths[month]
        month += 1

    hour, remainder = divmod(seconds_in_day, SECONDS_PER_HOUR)
    minute, second = divmod(remainder, SECONDS_PER_MINUTE)
    return (year, month, days + 1, hour, minute, second)


@validate_range(
    month=(1, MONTHS_PER_YEAR),
    hour=(0, 23),
    minute=(0, 59),
    second=(0, 59),
)
def fields_to_timestamp(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Convert civil fields to whole seconds since the epoch.

    This is the inverse of timestamp_to_fields and uses the same
    year-by-year and month-by-month walk.

    Raises:
        ValidationError: If a field is out of range or the date falls
            before the epoch.

    Examples:
        >>> fields_to_timestamp(1970, 1, 1)
        0
        >>> fields_to_timestamp(2000, 2, 29)
        951782400
    """
    year = validate_year(year)
    if year < EPOCH_YEAR:
        raise ValidationError(
            f"year must be {EPOCH_YEAR} or later for a timestamp, got {year}"
        )
    lengths = days_per_month(year)
    day = validate_int("day", day)
    if day < 1 or day > lengths[month]:
        raise ValidationError(
            f"day must be between 1 and {lengths[month]} for {year}-{month}, "
            f"got {describe_int(day)}"
        )

    days = sum(days_in_year(y) for y in range(EPOCH_YEAR, year))
    days += sum(lengths[EPOCH_MONTH:month])
    days += day - 1
    return (
        days * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )


__all__ = [
    "Fields",
    "is_leap_year",
    "days_in_year",
    "days_per_month",
    "days_in_month",
    "timestamp_to_fields",
    "fields_to_timestamp",
]
