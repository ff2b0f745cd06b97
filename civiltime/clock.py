"""Clock abstractions for reading "now".

Date never reads the wall clock directly; Date.now() asks a Clock. The
system clock is the default, and FixedClock makes tests deterministic.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Protocol

from civiltime._internal.validation import describe_int, validate_int
from civiltime.errors import ClockError, ValidationError

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """A source of whole seconds since the Unix epoch."""

    def seconds_since_epoch(self) -> int:
        """Return the current time as non-negative whole seconds.

        Raises:
            ClockError: If the time cannot be read or is before the epoch.
        """
        ...


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Clock backed by the host's real-time clock.

    Sub-second parts are truncated, never rounded up.
    """

    def seconds_since_epoch(self) -> int:
        try:
            reading = time.time_ns()
        except OSError as exc:
            logger.warning("system clock unreadable: %s", exc)
            raise ClockError(f"system clock unreadable: {exc}") from exc

        if reading < 0:
            logger.warning("system clock reports %d ns, before the epoch", reading)
            raise ClockError("system clock reports a time before the epoch")

        seconds = reading // 1_000_000_000
        logger.debug("system clock read %d seconds since epoch", seconds)
        return seconds


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock that always returns the same reading (useful for tests).

    Examples:
        >>> FixedClock(86400).seconds_since_epoch()
        86400
        >>> FixedClock(0).advance(60).seconds_since_epoch()
        60
    """

    seconds: int

    def __post_init__(self) -> None:
        try:
            seconds = validate_int("seconds", self.seconds)
        except ValidationError as exc:
            raise ClockError(str(exc)) from exc
        if seconds < 0:
            raise ClockError(
                f"clock reading must be non-negative, got {describe_int(seconds)}"
            )

    def seconds_since_epoch(self) -> int:
        return self.seconds

    def advance(self, seconds: int) -> FixedClock:
        """Return a new FixedClock moved forward by ``seconds``."""
        return FixedClock(self.seconds + seconds)


__all__ = ["Clock", "SystemClock", "FixedClock"]
