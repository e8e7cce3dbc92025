from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional, Protocol

from ratadie import settings
from ratadie.date import Date

logger = logging.getLogger(__name__)

MS_PER_DAY: int = 86_400_000
UNIX_EPOCH_RATA_DIE: int = 719_163  # 1970-01-01


class Clock(Protocol):
    def now(self) -> tuple[int, int]:
        """Return ``(posix_milliseconds, utc_offset_minutes)`` for one instant."""
        ...


class SystemClock:
    """
    Host clock.  The offset is the host's local offset at the instant read,
    unless ``RATADIE_UTC_OFFSET_MINUTES`` fixes it.
    """

    def now(self) -> tuple[int, int]:
        posix_ms = time.time_ns() // 1_000_000
        offset = settings.UTC_OFFSET_MINUTES
        if offset is None:
            offset = time.localtime(posix_ms // 1000).tm_gmtoff // 60
        logger.debug("Read system clock: posix_ms=%s offset_minutes=%s", posix_ms, offset)
        return posix_ms, offset

    def __repr__(self) -> str:
        return f"SystemClock(offset_minutes={settings.UTC_OFFSET_MINUTES!r})"


class FixedClock:
    """Clock that always reports the same instant and offset."""

    def __init__(self, posix_ms: int, offset_minutes: int = 0) -> None:
        self._posix_ms = int(posix_ms)
        self._offset_minutes = int(offset_minutes)

    def now(self) -> tuple[int, int]:
        return self._posix_ms, self._offset_minutes

    def __repr__(self) -> str:
        return f"FixedClock(posix_ms={self._posix_ms}, offset_minutes={self._offset_minutes})"


def from_posix(posix_ms: int, offset_minutes: int = 0) -> Date:
    """Calendar day of a POSIX instant (milliseconds) seen at a UTC offset."""
    local_ms = int(posix_ms) + int(offset_minutes) * 60_000
    return Date(local_ms // MS_PER_DAY + UNIX_EPOCH_RATA_DIE)


def today(clock: Optional[Clock] = None) -> Date:
    """Today's date according to ``clock`` (the host clock by default)."""
    posix_ms, offset = (clock if clock is not None else SystemClock()).now()
    return from_posix(posix_ms, offset)


async def today_async(clock: Optional[Clock] = None) -> Date:
    """:func:`today`, reading the clock in a worker thread."""
    return await asyncio.to_thread(today, clock)
