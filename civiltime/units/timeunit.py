"""TimeUnit enumeration for the Date granularities.

This module provides the TimeUnit enum naming the six fields of a Date,
from seconds up to years. Date uses it to dispatch the add/next/reset
families generically.
"""

from __future__ import annotations

from enum import Enum


class TimeUnit(Enum):
    """Granularity of a Date field.

    Units are ordered from finest (SECOND) to coarsest (YEAR).

    Examples:
        >>> TimeUnit.DAY.finer()
        (<TimeUnit.SECOND: 'second'>, <TimeUnit.MINUTE: 'minute'>, <TimeUnit.HOUR: 'hour'>)

        >>> TimeUnit.SECOND.finer()
        ()
    """

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    def finer(self) -> tuple[TimeUnit, ...]:
        """Return the units strictly finer than this one, finest first."""
        units = list(TimeUnit)
        return tuple(units[: units.index(self)])


__all__ = ["TimeUnit"]
