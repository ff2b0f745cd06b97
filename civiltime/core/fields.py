"""Bounded field types for the time and day components of a Date.

Hour, Minute and Second have a fixed range. Day's range depends on the
year and month it belongs to, and that context is passed in explicitly
to every Day operation that needs it.

Every value is validated at construction and every step wraps, so a
field is never observably out of range.
"""

from __future__ import annotations

from typing import ClassVar, Self

from civiltime._internal.calendar import days_in_month
from civiltime._internal.constants import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from civiltime._internal.validation import (
    check_bounds,
    describe_int,
    parse_decimal,
    validate_int,
    validate_year,
)
from civiltime.errors import ValidationError
from civiltime.units.month import Month


class _Field:
    """Shared value behaviour: a single int compared only with its own type."""

    __slots__ = ("_value",)

    _value: int

    @classmethod
    def _from_value(cls, value: int) -> Self:
        """Create a field without validation, for values known to be in range."""
        instance = object.__new__(cls)
        instance._value = value
        return instance

    @property
    def value(self) -> int:
        """Return the integer value."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value <= other._value  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value > other._value  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value >= other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        """Return the bare decimal value, without padding."""
        return str(self._value)


class _ClockField(_Field):
    """A field with a fixed inclusive range [LOWER, UPPER]."""

    __slots__ = ()

    NAME: ClassVar[str]
    LOWER: ClassVar[int]
    UPPER: ClassVar[int]

    def __init__(self, value: int) -> None:
        """Create a field value.

        Raises:
            ValidationError: If value is not an int in [LOWER, UPPER].
        """
        self._value = check_bounds(self.NAME, value, self.LOWER, self.UPPER)

    @classmethod
    def parse(cls, s: str) -> Self:
        """Parse a field value from a decimal string.

        Raises:
            ParseError: If s is not a decimal integer.
            ValidationError: If the value is out of range.
        """
        return cls(parse_decimal(cls.NAME, s))

    @property
    def is_min(self) -> bool:
        return self._value == self.LOWER

    @property
    def is_max(self) -> bool:
        return self._value == self.UPPER

    def next(self) -> Self:
        """Return the successor, wrapping from the maximum to the minimum."""
        if self._value == self.UPPER:
            return self._from_value(self.LOWER)
        return self._from_value(self._value + 1)

    def previous(self) -> Self:
        """Return the predecessor, wrapping from the minimum to the maximum."""
        if self._value == self.LOWER:
            return self._from_value(self.UPPER)
        return self._from_value(self._value - 1)


class Hour(_ClockField):
    """Hour of the day, 0-23.

    Examples:
        >>> Hour(23).next()
        Hour(0)
        >>> Hour(24)
        Traceback (most recent call last):
        ...
        ValidationError: hour must be between 0 and 23, got 24
    """

    __slots__ = ()

    NAME = "hour"
    LOWER = 0
    UPPER = HOURS_PER_DAY - 1

    MIN: ClassVar[Hour]
    MAX: ClassVar[Hour]


class Minute(_ClockField):
    """Minute of the hour, 0-59."""

    __slots__ = ()

    NAME = "minute"
    LOWER = 0
    UPPER = MINUTES_PER_HOUR - 1

    MIN: ClassVar[Minute]
    MAX: ClassVar[Minute]


class Second(_ClockField):
    """Second of the minute, 0-59. There are no leap seconds."""

    __slots__ = ()

    NAME = "second"
    LOWER = 0
    UPPER = SECONDS_PER_MINUTE - 1

    MIN: ClassVar[Second]
    MAX: ClassVar[Second]


Hour.MIN = Hour._from_value(Hour.LOWER)
Hour.MAX = Hour._from_value(Hour.UPPER)
Minute.MIN = Minute._from_value(Minute.LOWER)
Minute.MAX = Minute._from_value(Minute.UPPER)
Second.MIN = Second._from_value(Second.LOWER)
Second.MAX = Second._from_value(Second.UPPER)


class Day(_Field):
    """Day of the month, 1 to the length of the month.

    A Day does not remember which month it was validated against. Every
    operation whose result depends on the month length takes the year
    and month as arguments.

    Examples:
        >>> Day(29, 2024, Month.FEBRUARY)
        Day(29)
        >>> Day(31, 2024, Month.JANUARY).next(2024, Month.JANUARY)
        Day(1)
        >>> Day(1, 2024, Month.MARCH).previous(2024, Month.MARCH)
        Day(29)
        >>> Day(29, 2023, Month.FEBRUARY)
        Traceback (most recent call last):
        ...
        ValidationError: day must be between 1 and 28 for 2023-2, got 29
    """

    __slots__ = ()

    LOWER: ClassVar[int] = 1
    MIN: ClassVar[Day]

    def __init__(self, value: int, year: int, month: Month | int) -> None:
        """Create a Day valid for the given year and month.

        Args:
            value: The day of the month.
            year: The year the day belongs to.
            month: A Month or its ordinal (1-12).

        Raises:
            ValidationError: If year or month is invalid, or value is not
                an int in [1, days in month].
        """
        year = validate_year(year)
        if not isinstance(month, Month):
            month = Month.from_ordinal(month)
        number = validate_int("day", value)
        upper = month.days_in(year)
        if number < self.LOWER or number > upper:
            raise ValidationError(
                f"day must be between {self.LOWER} and {upper} "
                f"for {year}-{month.ordinal}, got {describe_int(number)}"
            )
        self._value = number

    @classmethod
    def parse(cls, s: str, year: int, month: Month | int) -> Day:
        """Parse a day from a decimal string, validated for year and month.

        Raises:
            ParseError: If s is not a decimal integer.
            ValidationError: If the day does not exist in that month.
        """
        return cls(parse_decimal("day", s), year, month)

    @classmethod
    def max(cls, year: int, month: Month) -> Day:
        """Return the last day of the given month."""
        return cls._from_value(month.days_in(year))

    def is_max(self, year: int, month: Month) -> bool:
        """Return True if this is the last day of the given month."""
        return self._value == month.days_in(year)

    def next(self, year: int, month: Month) -> Day:
        """Return the following day, wrapping to 1 after the month's last day.

        The caller is responsible for advancing the month on wrap.
        """
        if self._value >= month.days_in(year):
            return Day.MIN
        return Day._from_value(self._value + 1)

    def previous(self, year: int, month: Month) -> Day:
        """Return the preceding day.

        Day 1 wraps to the last day of the previous month. January wraps
        to December, which has 31 days in every year, so the year is
        used as given.
        """
        if self._value == self.LOWER:
            return Day._from_value(days_in_month(year, month.previous().ordinal))
        return Day._from_value(self._value - 1)


Day.MIN = Day._from_value(Day.LOWER)


__all__ = ["Hour", "Minute", "Second", "Day"]
