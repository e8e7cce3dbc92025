# src/ratadie/__init__.py
"""
ratadie
~~~~~~~

Proleptic Gregorian date engine built on Rata Die day counts.

Basic usage::

    import ratadie
    from ratadie import Date, Month, Interval, Unit

    d = ratadie.from_iso_string("2007-03-15")
    ratadie.format_date("EEEE, MMMM d, y", d)       # → "Thursday, March 15, 2007"
    ratadie.add(Unit.MONTHS, 6, d).to_iso_string()  # → "2007-09-15"
    ratadie.floor(Interval.QUARTER, d)              # → 2007-01-01

Subpackages
-----------
ratadie.calendar   Calendar arithmetic (NumPy-vectorized).
ratadie.date       The Date value, enums, constructors and errors.
ratadie.iso8601    ISO 8601 parser.
ratadie.pattern    Pattern formatter.
ratadie.interval   add / diff / floor / ceiling / date_range.
ratadie.clock      today() and POSIX conversion.
"""

from __future__ import annotations

from ratadie.clock import from_posix, today, today_async
from ratadie.date import (
    CalendarDate,
    Date,
    DateError,
    InvalidCalendarDate,
    InvalidOrdinalDate,
    InvalidWeekDate,
    Month,
    OrdinalDate,
    ParseError,
    ValidationError,
    WeekDate,
    Weekday,
    clamp,
    compare,
    is_between,
    max_date,
    min_date,
)
from ratadie.interval import Interval, Unit, add, ceiling, date_range, diff, floor
from ratadie.iso8601 import from_iso_string
from ratadie.pattern import format_date

__all__ = [
    "CalendarDate",
    "Date",
    "DateError",
    "Interval",
    "InvalidCalendarDate",
    "InvalidOrdinalDate",
    "InvalidWeekDate",
    "Month",
    "OrdinalDate",
    "ParseError",
    "Unit",
    "ValidationError",
    "WeekDate",
    "Weekday",
    "add",
    "ceiling",
    "clamp",
    "compare",
    "date_range",
    "diff",
    "floor",
    "format_date",
    "from_iso_string",
    "from_posix",
    "is_between",
    "max_date",
    "min_date",
    "today",
    "today_async",
]
