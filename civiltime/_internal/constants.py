"""Internal constants for civiltime.

These constants define the calendar magic numbers used throughout the
library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
MINUTES_PER_HOUR: int = 60
HOURS_PER_DAY: int = 24
SECONDS_PER_HOUR: int = MINUTES_PER_HOUR * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = HOURS_PER_DAY * SECONDS_PER_HOUR  # 86_400

DAYS_PER_YEAR: int = 365
DAYS_PER_LEAP_YEAR: int = DAYS_PER_YEAR + 1

MONTHS_PER_YEAR: int = 12

# Largest year a Date can hold; keeps every year formattable as text
MAX_YEAR: int = 999_999_999

# The Unix epoch, 1970-01-01T0:0:0 civil time
EPOCH_YEAR: int = 1970
EPOCH_MONTH: int = 1
EPOCH_DAY: int = 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


__all__ = [
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "DAYS_PER_YEAR",
    "DAYS_PER_LEAP_YEAR",
    "MONTHS_PER_YEAR",
    "MAX_YEAR",
    "EPOCH_YEAR",
    "EPOCH_MONTH",
    "EPOCH_DAY",
    "DAYS_IN_MONTH",
]
