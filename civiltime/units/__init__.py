"""Calendar units and enumerations.

This module provides:
    - Month: the twelve calendar months with cyclic navigation
    - Season: season classification derived from Month
    - TimeUnit: Date granularities (SECOND .. YEAR)
"""

from __future__ import annotations

from civiltime.units.month import Month, Season
from civiltime.units.timeunit import TimeUnit

__all__: list[str] = [
    "Month",
    "Season",
    "TimeUnit",
]
