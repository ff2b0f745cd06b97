"""Tests for the Month and Season enumerations."""

from __future__ import annotations

import pytest

from civiltime.errors import ParseError, ValidationError
from civiltime.units.month import Month, Season


class TestMonthConstruction:
    """Tests for Month.from_ordinal() and Month.parse()."""

    def test_from_ordinal(self) -> None:
        """Ordinals 1-12 map to January-December."""
        assert Month.from_ordinal(1) is Month.JANUARY
        assert Month.from_ordinal(12) is Month.DECEMBER

    def test_all_ordinals_round_trip(self) -> None:
        """Every month's ordinal maps back to it."""
        for month in Month:
            assert Month.from_ordinal(month.ordinal) is month

    @pytest.mark.parametrize("value", [0, 13, -1, 100])
    def test_from_ordinal_out_of_range(self, value: int) -> None:
        """Ordinals outside 1-12 raise ValidationError."""
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            Month.from_ordinal(value)

    def test_parse(self) -> None:
        """A decimal string parses to its month."""
        assert Month.parse("1") is Month.MIN
        assert Month.parse("06") is Month.JUNE
        assert Month.parse("12") is Month.DECEMBER

    def test_parse_not_a_number(self) -> None:
        """Non-decimal text raises ParseError."""
        with pytest.raises(ParseError, match="month must be a decimal integer"):
            Month.parse("Hello")

    def test_parse_too_large(self) -> None:
        """A decimal out of range raises ValidationError."""
        with pytest.raises(ValidationError):
            Month.parse("14")

    @pytest.mark.parametrize("text", ["", " 1", "+1", "-1", "1.0", "١"])
    def test_parse_rejects_non_ascii_digits(self, text: str) -> None:
        """Only plain ASCII digits are accepted."""
        with pytest.raises(ParseError):
            Month.parse(text)


class TestMonthNavigation:
    """Tests for Month.next() and Month.previous()."""

    def test_min_max(self) -> None:
        """MIN and MAX are January and December."""
        assert Month.MIN is Month.JANUARY
        assert Month.MAX is Month.DECEMBER

    def test_aliases_not_iterated(self) -> None:
        """Iterating Month yields the twelve months only."""
        assert len(list(Month)) == 12

    def test_next_wraps(self) -> None:
        """December is followed by January."""
        assert Month.MAX.next() is Month.MIN

    def test_previous_wraps(self) -> None:
        """January is preceded by December."""
        assert Month.MIN.previous() is Month.MAX

    def test_next_steps_by_one(self) -> None:
        """next() increments the ordinal for January-November."""
        for month in list(Month)[:-1]:
            assert month.next().ordinal == month.ordinal + 1

    def test_previous_inverts_next(self) -> None:
        """previous() undoes next() for every month."""
        for month in Month:
            assert month.next().previous() is month
            assert month.previous().next() is month

    def test_twelve_steps_is_a_cycle(self) -> None:
        """Twelve next() calls return to the start."""
        month = Month.MARCH
        for _ in range(12):
            month = month.next()
        assert month is Month.MARCH


class TestMonthOrdering:
    """Tests for Month comparisons."""

    def test_calendar_order(self) -> None:
        """Months compare in calendar order."""
        assert Month.JANUARY < Month.FEBRUARY < Month.DECEMBER
        assert Month.DECEMBER > Month.NOVEMBER
        assert Month.MAY <= Month.MAY
        assert Month.MAY >= Month.APRIL

    def test_sorted(self) -> None:
        """Sorting shuffled months gives calendar order."""
        shuffled = [Month.OCTOBER, Month.JANUARY, Month.JULY, Month.MARCH]
        assert sorted(shuffled) == [Month.JANUARY, Month.MARCH, Month.JULY, Month.OCTOBER]

    def test_not_comparable_with_int(self) -> None:
        """Months do not order against plain integers."""
        with pytest.raises(TypeError):
            Month.JANUARY < 2  # noqa: B015

    def test_days_in(self) -> None:
        """days_in() uses the year for February."""
        assert Month.FEBRUARY.days_in(2024) == 29
        assert Month.FEBRUARY.days_in(2023) == 28
        assert Month.APRIL.days_in(2023) == 30


class TestSeason:
    """Tests for Season and Month.get_season()."""

    @pytest.mark.parametrize(
        "month,season",
        [
            (Month.JANUARY, Season.WINTER),
            (Month.FEBRUARY, Season.SPRING),
            (Month.MARCH, Season.SPRING),
            (Month.APRIL, Season.SPRING),
            (Month.MAY, Season.SUMMER),
            (Month.JUNE, Season.SUMMER),
            (Month.JULY, Season.SUMMER),
            (Month.AUGUST, Season.AUTUMN),
            (Month.SEPTEMBER, Season.AUTUMN),
            (Month.OCTOBER, Season.SUMMER),
            (Month.NOVEMBER, Season.WINTER),
            (Month.DECEMBER, Season.WINTER),
        ],
    )
    def test_mapping(self, month: Month, season: Season) -> None:
        """Each month maps to its fixed season."""
        assert month.get_season() is season

    def test_incorrect_season(self) -> None:
        """December is not spring."""
        assert Month.DECEMBER.get_season() is not Season.SPRING

    def test_months_per_season(self) -> None:
        """Season.months lists its months in calendar order."""
        assert Season.WINTER.months == (Month.JANUARY, Month.NOVEMBER, Month.DECEMBER)
        assert Season.SPRING.months == (Month.FEBRUARY, Month.MARCH, Month.APRIL)
        assert Season.SUMMER.months == (Month.MAY, Month.JUNE, Month.JULY, Month.OCTOBER)
        assert Season.AUTUMN.months == (Month.AUGUST, Month.SEPTEMBER)

    def test_seasons_partition_the_year(self) -> None:
        """Every month is in exactly one season."""
        months = [month for season in Season for month in season.months]
        assert sorted(months) == list(Month)

    def test_from_ordinal(self) -> None:
        """Seasons parse from 1-4."""
        assert Season.from_ordinal(1) is Season.SPRING
        assert Season.from_ordinal(2) is Season.SUMMER
        assert Season.from_ordinal(3) is Season.AUTUMN
        assert Season.from_ordinal(4) is Season.WINTER

    @pytest.mark.parametrize("value", [0, 5])
    def test_from_ordinal_out_of_range(self, value: int) -> None:
        """Ordinals outside 1-4 raise ValidationError."""
        with pytest.raises(ValidationError, match="season must be between 1 and 4"):
            Season.from_ordinal(value)

    def test_min_max_and_order(self) -> None:
        """MIN is spring, MAX is winter, ordered by ordinal."""
        assert Season.MIN is Season.SPRING
        assert Season.MAX is Season.WINTER
        assert Season.SPRING < Season.SUMMER < Season.AUTUMN < Season.WINTER
        assert Season.WINTER.ordinal == 4
