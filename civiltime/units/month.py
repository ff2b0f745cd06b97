"""Month and Season enumerations.

This module provides the closed set of calendar months with cyclic
navigation, and the Season classification derived from them.
"""

from __future__ import annotations

import functools
from enum import Enum

from civiltime._internal.calendar import days_in_month
from civiltime._internal.validation import check_bounds, parse_decimal


@functools.total_ordering
class Season(Enum):
    """Season of the year.

    Seasons are derived from months by a fixed table (see Month.get_season).
    The table is not an even three-months-per-season split.

    Examples:
        >>> Season.from_ordinal(4)
        <Season.WINTER: 4>
        >>> Season.MIN
        <Season.SPRING: 1>
    """

    SPRING = 1
    SUMMER = 2
    AUTUMN = 3
    WINTER = 4

    # Aliases
    MIN = 1
    MAX = 4

    @classmethod
    def from_ordinal(cls, value: int) -> Season:
        """Return the season with the given 1-based ordinal.

        Raises:
            ValidationError: If value is not in 1-4.
        """
        return cls(check_bounds("season", value, 1, 4))

    @property
    def ordinal(self) -> int:
        """Return the 1-based ordinal."""
        return self.value

    @property
    def months(self) -> tuple[Month, ...]:
        """Return the months belonging to this season, in calendar order.

        Examples:
            >>> Season.AUTUMN.months
            (<Month.AUGUST: 8>, <Month.SEPTEMBER: 9>)
        """
        return tuple(month for month in Month if _SEASONS[month] is self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Season):
            return NotImplemented
        return self.value < other.value


@functools.total_ordering
class Month(Enum):
    """Calendar month.

    Months are ordered January < ... < December and carry a 1-based
    ordinal. Navigation with next() and previous() is cyclic.

    Examples:
        >>> Month.DECEMBER.next()
        <Month.JANUARY: 1>
        >>> Month.JANUARY.previous()
        <Month.DECEMBER: 12>
        >>> Month.parse("2")
        <Month.FEBRUARY: 2>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    # Aliases
    MIN = 1
    MAX = 12

    @classmethod
    def from_ordinal(cls, value: int) -> Month:
        """Return the month with the given 1-based ordinal.

        Raises:
            ValidationError: If value is not in 1-12.

        Examples:
            >>> Month.from_ordinal(13)
            Traceback (most recent call last):
            ...
            ValidationError: month must be between 1 and 12, got 13
        """
        return cls(check_bounds("month", value, 1, 12))

    @classmethod
    def parse(cls, s: str) -> Month:
        """Parse a month from its decimal ordinal.

        Raises:
            ParseError: If s is not a decimal integer.
            ValidationError: If the ordinal is not in 1-12.
        """
        return cls.from_ordinal(parse_decimal("month", s))

    @property
    def ordinal(self) -> int:
        """Return the 1-based ordinal (January is 1)."""
        return self.value

    def next(self) -> Month:
        """Return the following month, December wrapping to January."""
        return _NEXT[self]

    def previous(self) -> Month:
        """Return the preceding month, January wrapping to December."""
        return _PREVIOUS[self]

    def get_season(self) -> Season:
        """Return the season this month belongs to.

        Examples:
            >>> Month.DECEMBER.get_season()
            <Season.WINTER: 4>
            >>> Month.OCTOBER.get_season()
            <Season.SUMMER: 2>
        """
        return _SEASONS[self]

    def days_in(self, year: int) -> int:
        """Return the number of days in this month for a given year."""
        return days_in_month(year, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.value < other.value


_NEXT: dict[Month, Month] = {
    Month.JANUARY: Month.FEBRUARY,
    Month.FEBRUARY: Month.MARCH,
    Month.MARCH: Month.APRIL,
    Month.APRIL: Month.MAY,
    Month.MAY: Month.JUNE,
    Month.JUNE: Month.JULY,
    Month.JULY: Month.AUGUST,
    Month.AUGUST: Month.SEPTEMBER,
    Month.SEPTEMBER: Month.OCTOBER,
    Month.OCTOBER: Month.NOVEMBER,
    Month.NOVEMBER: Month.DECEMBER,
    Month.DECEMBER: Month.JANUARY,
}

_PREVIOUS: dict[Month, Month] = {
    Month.JANUARY: Month.DECEMBER,
    Month.FEBRUARY: Month.JANUARY,
    Month.MARCH: Month.FEBRUARY,
    Month.APRIL: Month.MARCH,
    Month.MAY: Month.APRIL,
    Month.JUNE: Month.MAY,
    Month.JULY: Month.JUNE,
    Month.AUGUST: Month.JULY,
    Month.SEPTEMBER: Month.AUGUST,
    Month.OCTOBER: Month.SEPTEMBER,
    Month.NOVEMBER: Month.OCTOBER,
    Month.DECEMBER: Month.NOVEMBER,
}

# October sits in SUMMER and January in WINTER; kept as-is for compatibility.
_SEASONS: dict[Month, Season] = {
    Month.JANUARY: Season.WINTER,
    Month.FEBRUARY: Season.SPRING,
    Month.MARCH: Season.SPRING,
    Month.APRIL: Season.SPRING,
    Month.MAY: Season.SUMMER,
    Month.JUNE: Season.SUMMER,
    Month.JULY: Season.SUMMER,
    Month.AUGUST: Season.AUTUMN,
    Month.SEPTEMBER: Season.AUTUMN,
    Month.OCTOBER: Season.SUMMER,
    Month.NOVEMBER: Season.WINTER,
    Month.DECEMBER: Season.WINTER,
}


__all__ = ["Month", "Season"]
