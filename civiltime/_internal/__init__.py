"""Internal utilities for civiltime.

This module contains private implementation details:
    - Calendar arithmetic (leap years, month lengths, epoch conversion)
    - Constants and magic numbers
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.calendar import (
    days_in_month,
    days_in_year,
    days_per_month,
    fields_to_timestamp,
    is_leap_year,
    timestamp_to_fields,
)
from civiltime._internal.validation import (
    check_bounds,
    describe_int,
    parse_decimal,
    validate_int,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "days_in_month",
    "days_in_year",
    "days_per_month",
    "fields_to_timestamp",
    "is_leap_year",
    "timestamp_to_fields",
    "check_bounds",
    "describe_int",
    "parse_decimal",
    "validate_int",
    "validate_range",
    "validate_year",
]
