"""Validation utilities for civiltime.

This module provides the range checks and decimal-segment decoding shared
by the field types, the Date constructor and the calendar conversions.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
import re
from typing import Callable, TypeVar, ParamSpec

from civiltime._internal.constants import MAX_YEAR
from civiltime.errors import ParseError, ValidationError

P = ParamSpec("P")
T = TypeVar("T")

_DECIMAL = re.compile(r"[0-9]+", re.ASCII)

# Wider values are described by size in error messages instead of printed
_MAX_SHOWN_BITS = 64


def describe_int(number: int) -> str:
    """Render an integer for an error message.

    Very large values are described by their bit length, so building the
    message never runs into the interpreter's int-to-str digit limit.

    Examples:
        >>> describe_int(24)
        '24'
        >>> describe_int(-(2**100))
        'a 101-bit negative integer'
    """
    bits = number.bit_length()
    if bits <= _MAX_SHOWN_BITS:
        return str(number)
    sign = "negative " if number < 0 else ""
    return f"a {bits}-bit {sign}integer"


def validate_int(name: str, value: object) -> int:
    """Check that a value is a plain integer.

    bool is rejected even though it subclasses int.

    Args:
        name: Field name used in the error message.
        value: The value to check.

    Returns:
        The value, typed as int.

    Raises:
        ValidationError: If value is not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return value


def check_bounds(name: str, value: object, lower: int, upper: int) -> int:
    """Check that an integer lies in [lower, upper].

    Args:
        name: Field name used in the error message.
        value: The value to check.
        lower: Inclusive minimum.
        upper: Inclusive maximum.

    Returns:
        The validated value.

    Raises:
        ValidationError: If value is not an int or is out of range.

    Examples:
        >>> check_bounds("hour", 24, 0, 23)
        Traceback (most recent call last):
        ...
        ValidationError: hour must be between 0 and 23, got 24
    """
    number = validate_int(name, value)
    if number < lower or number > upper:
        raise ValidationError(
            f"{name} must be between {lower} and {upper}, got {describe_int(number)}"
        )
    return number


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Args:
        **limits: Mapping of parameter names to inclusive (min, max) tuples.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(month=(1, 12))
        ... def month_length(year: int, month: int) -> int:
        ...     ...

        >>> month_length(2024, 13)
        Traceback (most recent call last):
        ...
        ValidationError: month must be between 1 and 12, got 13
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        param_names = list(inspect.signature(func).parameters)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            all_args = dict(zip(param_names, args))
            all_args.update(kwargs)

            for param_name, (min_val, max_val) in limits.items():
                if param_name in all_args:
                    check_bounds(param_name, all_args[param_name], min_val, max_val)

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: object) -> int:
    """Validate that a year is an integer in [0, MAX_YEAR].

    Years count from year 0. The upper limit keeps every year printable
    in the canonical text form.

    Raises:
        ValidationError: If year is negative, too large or not an int.
    """
    number = validate_int("year", year)
    if number < 0:
        raise ValidationError(f"year must be non-negative, got {describe_int(number)}")
    if number > MAX_YEAR:
        raise ValidationError(
            f"year must be at most {MAX_YEAR}, got {describe_int(number)}"
        )
    return number


def parse_decimal(name: str, text: str) -> int:
    """Decode one unsigned decimal segment.

    Only ASCII digits are accepted: no sign, no whitespace, no underscores.

    Args:
        name: Field name used in the error message.
        text: The segment to decode.

    Returns:
        The decoded integer.

    Raises:
        ParseError: If text is not a non-empty run of ASCII digits, or is
            too long to convert.
    """
    if not isinstance(text, str) or not _DECIMAL.fullmatch(text):
        raise ParseError(f"{name} must be a decimal integer, got {text!r}")
    try:
        return int(text)
    except ValueError as exc:
        raise ParseError(
            f"{name} has too many digits to convert ({len(text)})"
        ) from exc


__all__ = [
    "describe_int",
    "validate_int",
    "check_bounds",
    "validate_range",
    "validate_year",
    "parse_decimal",
]
