# src/ratadie/clock/__init__.py
"""
ratadie.clock
~~~~~~~~~~~~~

"What is today": turns a clock reading (POSIX instant + UTC offset) into a
:class:`~ratadie.date.Date`.  This is the only part of the package that
touches the outside world, and it reads the clock exactly once per call.

Basic usage::

    from ratadie.clock import today, from_posix, FixedClock

    today()                                       # host clock, local offset
    from_posix(0)                                 # → 1970-01-01
    today(FixedClock(1_536_969_600_000, -300))    # → 2018-09-14

Public API
----------
Clock          Protocol: ``now() -> (posix_ms, offset_minutes)``.
SystemClock    Host clock.
FixedClock     Constant clock.
from_posix, today, today_async
"""

from __future__ import annotations

from ratadie.clock.clock import (
    Clock,
    FixedClock,
    SystemClock,
    from_posix,
    today,
    today_async,
)

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "from_posix",
    "today",
    "today_async",
]
