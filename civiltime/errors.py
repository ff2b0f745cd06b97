"""civiltime exception hierarchy.

Every failure the library reports is a CivilTimeError, the single
"invalid calendar/time value" kind. The subclasses only say where the
invalid value came from.
"""

from __future__ import annotations


class CivilTimeError(Exception):
    """Base exception for all civiltime errors."""

    pass


class ValidationError(CivilTimeError):
    """A value is outside its valid range.

    Examples:
        - Hour value 24, minute or second value 60
        - Day 30 in February
        - Month ordinal outside 1-12
        - Negative timestamp
    """

    pass


class ParseError(CivilTimeError):
    """Failed to parse a string representation.

    Examples:
        - Missing '-', 'T' or ':' separated segment
        - Segment that is not a decimal integer
    """

    pass


class ClockError(CivilTimeError):
    """The clock could not produce a whole number of seconds since the epoch.

    Examples:
        - Host clock set before 1970-01-01
        - Clock source raising an OS error
    """

    pass


__all__ = [
    "CivilTimeError",
    "ValidationError",
    "ParseError",
    "ClockError",
]
