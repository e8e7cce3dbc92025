# src/ratadie/interval/__init__.py
"""
ratadie.interval
~~~~~~~~~~~~~~~~

Date arithmetic in calendar units, rounding to interval boundaries, and
boundary ranges.

Basic usage::

    from ratadie.date import Date, Month
    from ratadie.interval import Interval, Unit, add, diff, floor, ceiling, date_range

    jan31 = Date.from_calendar_date(2000, Month.JAN, 31)
    add(Unit.MONTHS, 1, jan31)                    # → 2000-02-29

    d = Date.from_calendar_date(2018, Month.MAY, 11)
    floor(Interval.TUESDAY, d)                    # → 2018-05-08
    ceiling(Interval.TUESDAY, d)                  # → 2018-05-15

    date_range(Interval.DAY, 2, floor(Interval.TUESDAY, d), d)
                                                  # → [May 8, May 10]

Public API
----------
Unit, add, diff
Interval, floor, ceiling, date_range
"""

from __future__ import annotations

from ratadie.interval.arithmetic import Unit, add, diff
from ratadie.interval.interval import Interval, ceiling, date_range, floor

__all__ = [
    "Interval",
    "Unit",
    "add",
    "ceiling",
    "date_range",
    "diff",
    "floor",
]
