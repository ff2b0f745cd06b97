"""Date class representing a civil calendar instant.

This module provides the Date class: year, month, day, hour, minute and
second with no timezone and no sub-second part. Dates are immutable;
every stepping and truncation operation returns a new Date.

Stepping carries like an odometer. Each add_* method looks at its own
field first and, when that field is at its maximum, delegates to the
next coarser add_* before stepping itself. The subtract_* family
mirrors this with borrows.
"""

from __future__ import annotations

from typing import Callable, ClassVar, Iterator

from civiltime._internal.calendar import (
    fields_to_timestamp,
    is_leap_year,
    timestamp_to_fields,
)
from civiltime._internal.constants import (
    EPOCH_DAY,
    EPOCH_MONTH,
    EPOCH_YEAR,
    MAX_YEAR,
)
from civiltime._internal.validation import parse_decimal, validate_year
from civiltime.clock import Clock, SystemClock
from civiltime.core.fields import Day, Hour, Minute, Second
from civiltime.errors import ParseError, ValidationError
from civiltime.units.month import Month, Season
from civiltime.units.timeunit import TimeUnit


class Date:
    """A civil calendar instant with one-second resolution.

    Attributes:
        year: The year, counted from year 0 (0 to MAX_YEAR).
        month: The Month.
        day: The Day, valid for this date's year and month.
        hour: The Hour (0-23).
        minute: The Minute (0-59).
        second: The Second (0-59).

    Examples:
        >>> d = Date(2024, 2, 29, 13, 5, 0)
        >>> d.month
        <Month.FEBRUARY: 2>
        >>> str(d)
        '2024-2-29T13:5:0'

        >>> Date(1970, 12, 31, 23, 59, 59).add_second()
        Date(1971, 1, 1, 0, 0, 0)

        >>> Date(2023, 2, 29)
        Traceback (most recent call last):
        ...
        ValidationError: day must be between 1 and 28 for 2023-2, got 29
    """

    __slots__ = ("_year", "_month", "_day", "_hour", "_minute", "_second")

    EPOCH: ClassVar[Date]

    def __init__(
        self,
        year: int,
        month: Month | int,
        day: Day | int,
        hour: Hour | int = 0,
        minute: Minute | int = 0,
        second: Second | int = 0,
    ) -> None:
        """Create a Date from its components.

        Args:
            year: The year (0 to MAX_YEAR).
            month: A Month or its ordinal (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).

        Raises:
            ValidationError: If any component is out of range. No Date
                is created in that case.
        """
        year = validate_year(year)
        if not isinstance(month, Month):
            month = Month.from_ordinal(month)

        self._year: int = year
        self._month: Month = month
        self._day: Day = Day(int(day) if isinstance(day, Day) else day, year, month)
        self._hour: Hour = hour if isinstance(hour, Hour) else Hour(hour)
        self._minute: Minute = minute if isinstance(minute, Minute) else Minute(minute)
        self._second: Second = second if isinstance(second, Second) else Second(second)

    @classmethod
    def _from_fields(
        cls,
        year: int,
        month: Month,
        day: Day,
        hour: Hour,
        minute: Minute,
        second: Second,
    ) -> Date:
        """Create a Date from already validated fields.

        This is an internal factory method that bypasses validation
        for use when the fields are known to be consistent.
        """
        instance = object.__new__(cls)
        instance._year = year
        instance._month = month
        instance._day = day
        instance._hour = hour
        instance._minute = minute
        instance._second = second
        return instance

    def _with(self, **changes: object) -> Date:
        """Return a copy with some fields swapped, without validation."""
        fields: dict[str, object] = {
            "year": self._year,
            "month": self._month,
            "day": self._day,
            "hour": self._hour,
            "minute": self._minute,
            "second": self._second,
        }
        fields.update(changes)
        return Date._from_fields(**fields)  # type: ignore[arg-type]

    def _clamped_day(self, year: int, month: Month) -> Day:
        """Return this date's day, clamped to the last day of year/month."""
        return min(self._day, Day.max(year, month))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_timestamp(cls, timestamp: int) -> Date:
        """Create a Date from whole seconds since the Unix epoch.

        Raises:
            ValidationError: If timestamp is negative or not an int.

        Examples:
            >>> Date.from_timestamp(0)
            Date(1970, 1, 1, 0, 0, 0)
            >>> Date.from_timestamp(1709164800)
            Date(2024, 2, 29, 0, 0, 0)
        """
        return cls(*timestamp_to_fields(timestamp))

    @classmethod
    def from_string(cls, s: str) -> Date:
        """Parse a Date from its canonical text form ``Y-M-DTh:m:s``.

        Segments are unpadded or padded decimal integers. Exactly three
        '-' separated date segments, a 'T', and three ':' separated time
        segments are required.

        Raises:
            ParseError: If a segment is missing, extra or not decimal.
            ValidationError: If a component is out of range.

        Examples:
            >>> Date.from_string("2004-6-14T23:34:30")
            Date(2004, 6, 14, 23, 34, 30)
            >>> Date.from_string("2004-06-14T07:04:03")
            Date(2004, 6, 14, 7, 4, 3)
            >>> Date.from_string("2004-6-14")
            Traceback (most recent call last):
            ...
            ParseError: invalid date-time '2004-6-14': expected Y-M-DTh:m:s
        """
        if not isinstance(s, str):
            raise ParseError(f"expected str, got {type(s).__name__}")

        date_part, sep, time_part = s.partition("T")
        date_segments = date_part.split("-")
        time_segments = time_part.split(":")
        if not sep or len(date_segments) != 3 or len(time_segments) != 3:
            raise ParseError(f"invalid date-time {s!r}: expected Y-M-DTh:m:s")

        year = parse_decimal("year", date_segments[0])
        month = Month.parse(date_segments[1])
        return cls._from_fields(
            year,
            month,
            Day.parse(date_segments[2], year, month),
            Hour.parse(time_segments[0]),
            Minute.parse(time_segments[1]),
            Second.parse(time_segments[2]),
        )

    @classmethod
    def now(cls, clock: Clock | None = None) -> Date:
        """Return the current instant as read from a clock.

        Args:
            clock: The clock to read. Defaults to the system clock.

        Raises:
            ClockError: If the clock cannot be read.
        """
        if clock is None:
            clock = SystemClock()
        return cls.from_timestamp(clock.seconds_since_epoch())

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> Month:
        return self._month

    @property
    def day(self) -> Day:
        return self._day

    @property
    def hour(self) -> Hour:
        return self._hour

    @property
    def minute(self) -> Minute:
        return self._minute

    @property
    def second(self) -> Second:
        return self._second

    @property
    def season(self) -> Season:
        """Return the season of this date's month."""
        return self._month.get_season()

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self._year)

    def replace(
        self,
        year: int | None = None,
        month: Month | int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Raises:
            ValidationError: If the resulting date is invalid.

        Examples:
            >>> Date(2024, 1, 31).replace(month=3)
            Date(2024, 3, 31, 0, 0, 0)
        """
        return Date(
            self._year if year is None else year,
            self._month if month is None else month,
            int(self._day) if day is None else day,
            self._hour if hour is None else hour,
            self._minute if minute is None else minute,
            self._second if second is None else second,
        )

    # -------------------------------------------------------------------------
    # Stepping forward
    # -------------------------------------------------------------------------

    def add_second(self) -> Date:
        """Return the date one second later."""
        base = self.add_minute() if self._second.is_max else self
        return base._with(second=self._second.next())

    def add_minute(self) -> Date:
        """Return the date one minute later."""
        base = self.add_hour() if self._minute.is_max else self
        return base._with(minute=self._minute.next())

    def add_hour(self) -> Date:
        """Return the date one hour later."""
        base = self.add_day() if self._hour.is_max else self
        return base._with(hour=self._hour.next())

    def add_day(self) -> Date:
        """Return the date one day later.

        Whether the day rolls over is decided with this date's own year
        and month, before any carry changes them.

        Examples:
            >>> Date(2024, 2, 28).add_day()
            Date(2024, 2, 29, 0, 0, 0)
            >>> Date(2023, 2, 28).add_day()
            Date(2023, 3, 1, 0, 0, 0)
        """
        rolls_over = self._day.is_max(self._year, self._month)
        day = self._day.next(self._year, self._month)
        base = self.add_month() if rolls_over else self
        return base._with(day=day)

    def add_month(self) -> Date:
        """Return the date one month later.

        A day that does not exist in the next month is clamped to its
        last day.

        Examples:
            >>> Date(2024, 1, 31).add_month()
            Date(2024, 2, 29, 0, 0, 0)
            >>> Date(2024, 12, 15).add_month()
            Date(2025, 1, 15, 0, 0, 0)
        """
        base = self.add_year() if self._month is Month.MAX else self
        month = self._month.next()
        return base._with(month=month, day=self._clamped_day(base._year, month))

    def add_year(self) -> Date:
        """Return the date one year later.

        February 29 becomes February 28 when the following year is not a
        leap year.

        Raises:
            ValidationError: If the year is already MAX_YEAR.
        """
        if self._year == MAX_YEAR:
            raise ValidationError(f"cannot step past year {MAX_YEAR}")
        year = self._year + 1
        return self._with(year=year, day=self._clamped_day(year, self._month))

    # -------------------------------------------------------------------------
    # Stepping backward
    # -------------------------------------------------------------------------

    def subtract_second(self) -> Date:
        """Return the date one second earlier."""
        base = self.subtract_minute() if self._second.is_min else self
        return base._with(second=self._second.previous())

    def subtract_minute(self) -> Date:
        """Return the date one minute earlier."""
        base = self.subtract_hour() if self._minute.is_min else self
        return base._with(minute=self._minute.previous())

    def subtract_hour(self) -> Date:
        """Return the date one hour earlier."""
        base = self.subtract_day() if self._hour.is_min else self
        return base._with(hour=self._hour.previous())

    def subtract_day(self) -> Date:
        """Return the date one day earlier.

        Day 1 borrows from the month and becomes the last day of the
        previous month.

        Examples:
            >>> Date(2024, 3, 1).subtract_day()
            Date(2024, 2, 29, 0, 0, 0)
        """
        day = self._day.previous(self._year, self._month)
        base = self.subtract_month() if self._day == Day.MIN else self
        return base._with(day=day)

    def subtract_month(self) -> Date:
        """Return the date one month earlier, clamping the day if needed."""
        base = self.subtract_year() if self._month is Month.MIN else self
        month = self._month.previous()
        return base._with(month=month, day=self._clamped_day(base._year, month))

    def subtract_year(self) -> Date:
        """Return the date one year earlier, clamping February 29 if needed.

        Raises:
            ValidationError: If the year is already 0.
        """
        if self._year == 0:
            raise ValidationError("cannot step back before year 0")
        year = self._year - 1
        return self._with(year=year, day=self._clamped_day(year, self._month))

    # -------------------------------------------------------------------------
    # Advance and reset
    # -------------------------------------------------------------------------

    def next_minute(self) -> Date:
        """Return the start of the next minute."""
        return self.add_minute().reset_until_seconds()

    def next_hour(self) -> Date:
        """Return the start of the next hour."""
        return self.add_hour().reset_until_minutes()

    def next_day(self) -> Date:
        """Return the start of the next day.

        Examples:
            >>> Date(2024, 2, 28, 12, 0, 0).next_day()
            Date(2024, 2, 29, 0, 0, 0)
        """
        return self.add_day().reset_until_hours()

    def next_month(self) -> Date:
        """Return the start of the next month."""
        return self.add_month().reset_until_days()

    def next_year(self) -> Date:
        """Return the start of the next year."""
        return self.add_year().reset_until_months()

    def reset_until_seconds(self) -> Date:
        """Return the start of this date's minute."""
        return self._with(second=Second.MIN)

    def reset_until_minutes(self) -> Date:
        """Return the start of this date's hour."""
        return self.reset_until_seconds()._with(minute=Minute.MIN)

    def reset_until_hours(self) -> Date:
        """Return the start of this date's day."""
        return self.reset_until_minutes()._with(hour=Hour.MIN)

    def reset_until_days(self) -> Date:
        """Return the start of this date's month."""
        return self.reset_until_hours()._with(day=Day.MIN)

    def reset_until_months(self) -> Date:
        """Return the start of this date's year."""
        return self.reset_until_days()._with(month=Month.MIN)

    def reset_until_years(self) -> Date:
        """Return the epoch: every field reset, the year to 1970."""
        return self.reset_until_months()._with(year=EPOCH_YEAR)

    # -------------------------------------------------------------------------
    # Unit-generic stepping
    # -------------------------------------------------------------------------

    def add(self, unit: TimeUnit) -> Date:
        """Return the date one ``unit`` later.

        Examples:
            >>> Date(2024, 1, 1).add(TimeUnit.HOUR)
            Date(2024, 1, 1, 1, 0, 0)
        """
        return _ADD[unit](self)

    def subtract(self, unit: TimeUnit) -> Date:
        """Return the date one ``unit`` earlier."""
        return _SUBTRACT[unit](self)

    def next(self, unit: TimeUnit) -> Date:
        """Advance by one ``unit`` and reset every finer field.

        ``next(TimeUnit.SECOND)`` is the same as ``add_second()``.
        """
        advanced = self.add(unit)
        finer = unit.finer()
        if not finer:
            return advanced
        return advanced.reset_until(finer[-1])

    def reset_until(self, unit: TimeUnit) -> Date:
        """Reset ``unit`` and every finer field to its minimum."""
        return _RESET_UNTIL[unit](self)

    def iter_seconds(self) -> Iterator[Date]:
        """Yield this date and then every following second, without end.

        The sequence is unbounded; bound it with itertools.islice or a
        comparison.

        Examples:
            >>> from itertools import islice
            >>> [str(d) for d in islice(Date(1970, 1, 1, 0, 0, 58).iter_seconds(), 3)]
            ['1970-1-1T0:0:58', '1970-1-1T0:0:59', '1970-1-1T0:1:0']
        """
        current = self
        while True:
            yield current
            current = current.add_second()

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_timestamp(self) -> int:
        """Return whole seconds since the Unix epoch.

        Raises:
            ValidationError: If the date is before the epoch.

        Examples:
            >>> Date(1970, 1, 2).to_timestamp()
            86400
        """
        return fields_to_timestamp(*self._key())

    def to_string(self) -> str:
        """Return the canonical text form, without zero padding.

        Examples:
            >>> Date(2004, 6, 14, 3, 4, 5).to_string()
            '2004-6-14T3:4:5'
        """
        return (
            f"{self._year}-{self._month.ordinal}-{self._day}"
            f"T{self._hour}:{self._minute}:{self._second}"
        )

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[int, int, int, int, int, int]:
        return (
            self._year,
            self._month.ordinal,
            self._day.value,
            self._hour.value,
            self._minute.value,
            self._second.value,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Compare lexicographically by year, month, day, hour, minute, second."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a string like 'Date(2024, 1, 15, 14, 30, 0)'."""
        return "Date({}, {}, {}, {}, {}, {})".format(*self._key())

    def __str__(self) -> str:
        return self.to_string()


Date.EPOCH = Date(EPOCH_YEAR, EPOCH_MONTH, EPOCH_DAY)

_ADD: dict[TimeUnit, Callable[[Date], Date]] = {
    TimeUnit.SECOND: Date.add_second,
    TimeUnit.MINUTE: Date.add_minute,
    TimeUnit.HOUR: Date.add_hour,
    TimeUnit.DAY: Date.add_day,
    TimeUnit.MONTH: Date.add_month,
    TimeUnit.YEAR: Date.add_year,
}

_SUBTRACT: dict[TimeUnit, Callable[[Date], Date]] = {
    TimeUnit.SECOND: Date.subtract_second,
    TimeUnit.MINUTE: Date.subtract_minute,
    TimeUnit.HOUR: Date.subtract_hour,
    TimeUnit.DAY: Date.subtract_day,
    TimeUnit.MONTH: Date.subtract_month,
    TimeUnit.YEAR: Date.subtract_year,
}

_RESET_UNTIL: dict[TimeUnit, Callable[[Date], Date]] = {
    TimeUnit.SECOND: Date.reset_until_seconds,
    TimeUnit.MINUTE: Date.reset_until_minutes,
    TimeUnit.HOUR: Date.reset_until_hours,
    TimeUnit.DAY: Date.reset_until_days,
    TimeUnit.MONTH: Date.reset_until_months,
    TimeUnit.YEAR: Date.reset_until_years,
}


__all__ = ["Date"]
