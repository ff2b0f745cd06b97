"""Timestamp conversion utilities.

This module provides functions for converting Dates to and from Unix
epoch seconds.

Examples:
    >>> from civiltime import Date
    >>> from civiltime.convert import to_unix_seconds, from_unix_seconds

    >>> d = Date(2024, 1, 15, 14, 30, 45)
    >>> from_unix_seconds(to_unix_seconds(d)) == d
    True
"""

from __future__ import annotations

from civiltime.convert.epoch import (
    from_unix_seconds,
    timestamp_to_fields,
    to_unix_seconds,
)

__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "timestamp_to_fields",
]
