"""Tests for canonical text formatting and epoch conversion."""

from __future__ import annotations

import pytest

from civiltime import Date
from civiltime.convert import from_unix_seconds, timestamp_to_fields, to_unix_seconds
from civiltime.errors import ParseError, ValidationError
from civiltime.format import format_canonical, parse_canonical


class TestFormatCanonical:
    """Tests for format_canonical()."""

    @pytest.mark.parametrize(
        "date,expected",
        [
            (Date(1970, 1, 1), "1970-1-1T0:0:0"),
            (Date(2004, 6, 14, 23, 34, 30), "2004-6-14T23:34:30"),
            (Date(2004, 6, 14, 7, 4, 0), "2004-6-14T7:4:0"),
            (Date(0, 12, 31, 23, 59, 59), "0-12-31T23:59:59"),
            (Date(123_456, 2, 29), "123456-2-29T0:0:0"),
        ],
    )
    def test_format(self, date: Date, expected: str) -> None:
        """Every segment is written without padding."""
        assert format_canonical(date) == expected

    def test_not_a_date(self) -> None:
        """Only Dates can be formatted."""
        with pytest.raises(TypeError, match="expected Date"):
            format_canonical("2004-6-14T7:4:0")  # type: ignore[arg-type]


class TestParseCanonical:
    """Tests for parse_canonical()."""

    def test_parse(self) -> None:
        """Canonical text parses to its Date."""
        assert parse_canonical("2004-6-14T23:34:30") == Date(2004, 6, 14, 23, 34, 30)

    def test_parse_padded(self) -> None:
        """Zero padding is accepted on input."""
        assert parse_canonical("0002-01-09T00:00:09") == Date(2, 1, 9, 0, 0, 9)

    def test_padded_input_formats_unpadded(self) -> None:
        """Formatting normalises padded input."""
        assert format_canonical(parse_canonical("2024-02-09T05:06:07")) == "2024-2-9T5:6:7"

    def test_parse_errors(self) -> None:
        """Shape errors and range errors are distinct."""
        with pytest.raises(ParseError):
            parse_canonical("2004-6-14")
        with pytest.raises(ValidationError):
            parse_canonical("2004-6-31T0:0:0")


class TestEpochConversion:
    """Tests for the civiltime.convert helpers."""

    def test_from_unix_seconds(self) -> None:
        """Unix seconds convert to a Date."""
        assert from_unix_seconds(1_705_322_200) == Date(2024, 1, 15, 12, 36, 40)

    def test_to_unix_seconds(self) -> None:
        """A Date converts to Unix seconds."""
        assert to_unix_seconds(Date(2024, 1, 15, 12, 36, 40)) == 1_705_322_200

    def test_round_trip(self) -> None:
        """Conversions invert each other."""
        for seconds in (0, 59, 86_400, 1_000_000_000, 1_709_164_800):
            assert to_unix_seconds(from_unix_seconds(seconds)) == seconds

    def test_timestamp_to_fields(self) -> None:
        """Fields are returned as a plain tuple."""
        assert timestamp_to_fields(1_234_567_890) == (2009, 2, 13, 23, 31, 30)

    def test_before_epoch(self) -> None:
        """Dates before 1970 have no Unix seconds."""
        with pytest.raises(ValidationError):
            to_unix_seconds(Date(1969, 1, 1))

    def test_negative_seconds(self) -> None:
        """Negative seconds are rejected."""
        with pytest.raises(ValidationError):
            from_unix_seconds(-86_400)
