"""civiltime: timezone-naive civil date-time values.

civiltime represents an instant as year, month, day, hour, minute and
second, with no timezone, no leap seconds and no fractional seconds.
Values are immutable and always valid; stepping carries into coarser
fields like an odometer.

Core Types:
    Date: Civil instant (year, month, day, hour, minute, second)
    Hour, Minute, Second: Bounded time-of-day fields
    Day: Day of month, validated against a year and month

Units:
    Month: The twelve months, with cyclic next/previous
    Season: Season classification of a Month
    TimeUnit: Date granularities (SECOND .. YEAR)

Clocks:
    Clock: Protocol for "now" sources
    SystemClock: Host real-time clock
    FixedClock: Constant clock for tests

Calendar Functions:
    is_leap_year: Gregorian leap year rule
    days_in_month: Length of a month in a given year
    timestamp_to_fields: Unix seconds to civil fields

Exceptions:
    CivilTimeError: Base exception, "invalid calendar/time value"
    ValidationError: Value out of range
    ParseError: Malformed text
    ClockError: Clock unreadable or before the epoch

Example:
    >>> from civiltime import Date
    >>> Date.from_string("2023-2-28T12:0:0").next_day()
    Date(2023, 3, 1, 0, 0, 0)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from civiltime.core.date import Date
from civiltime.core.fields import Day, Hour, Minute, Second

# Units
from civiltime.units.month import Month, Season
from civiltime.units.timeunit import TimeUnit

# Clocks
from civiltime.clock import Clock, FixedClock, SystemClock

# Calendar functions
from civiltime._internal.calendar import (
    days_in_month,
    is_leap_year,
    timestamp_to_fields,
)

# Exceptions
from civiltime.errors import (
    CivilTimeError,
    ClockError,
    ParseError,
    ValidationError,
)

# Format functions
from civiltime.format import format_canonical, parse_canonical

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "Day",
    "Hour",
    "Minute",
    "Second",
    # Units
    "Month",
    "Season",
    "TimeUnit",
    # Clocks
    "Clock",
    "FixedClock",
    "SystemClock",
    # Calendar functions
    "days_in_month",
    "is_leap_year",
    "timestamp_to_fields",
    # Exceptions
    "CivilTimeError",
    "ValidationError",
    "ParseError",
    "ClockError",
    # Format functions
    "format_canonical",
    "parse_canonical",
]
