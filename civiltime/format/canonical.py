"""Canonical text formatting and parsing.

This module provides functions for converting Dates to and from the
library's one text form:

    <year>-<month>-<day>T<hour>:<minute>:<second>

All fields are decimal. The writer never zero-pads, so 7:04 in the
morning of 14 June 2004 is written '2004-6-14T7:4:0'. The reader
accepts padded or unpadded segments.

Examples:
    >>> from civiltime import Date
    >>> from civiltime.format import format_canonical, parse_canonical

    >>> format_canonical(Date(2004, 6, 14, 7, 4, 0))
    '2004-6-14T7:4:0'

    >>> parse_canonical("2004-06-14T07:04:00")
    Date(2004, 6, 14, 7, 4, 0)
"""

from __future__ import annotations

from civiltime.core.date import Date


def parse_canonical(s: str) -> Date:
    """Parse a canonical date-time string.

    Args:
        s: The string to parse.

    Returns:
        The parsed Date.

    Raises:
        ParseError: If the string does not have the canonical shape.
        ValidationError: If a component is out of range.
    """
    return Date.from_string(s)


def format_canonical(date: Date) -> str:
    """Format a Date in the canonical text form.

    Args:
        date: The Date to format.

    Returns:
        The unpadded canonical string.

    Raises:
        TypeError: If date is not a Date.
    """
    if not isinstance(date, Date):
        raise TypeError(f"expected Date, got {type(date).__name__}")
    return date.to_string()


__all__ = [
    "parse_canonical",
    "format_canonical",
]
