"""Core value types.

This module provides the fundamental types:
    - Date: civil calendar instant with one-second resolution
    - Hour, Minute, Second: fixed-range time fields
    - Day: day of month, validated against a year and month
"""

from __future__ import annotations

from civiltime.core.date import Date
from civiltime.core.fields import Day, Hour, Minute, Second

__all__: list[str] = [
    "Date",
    "Day",
    "Hour",
    "Minute",
    "Second",
]
