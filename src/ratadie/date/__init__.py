# src/ratadie/date/__init__.py
"""
ratadie.date
~~~~~~~~~~~~

The immutable :class:`Date` value and its conversions to and from calendar
dates, ordinal dates and ISO week dates.

Basic usage::

    from ratadie.date import Date, Month, Weekday

    d = Date.from_calendar_date(2007, Month.MAR, 15)
    d.rata_die                  # → 732750
    d.to_week_date()            # → WeekDate(2007, 11, Weekday.THU)
    Date.from_week_date(2007, 11, Weekday.THU) == d   # → True

Clamping constructors normalize out-of-range parts; strict ones raise::

    Date.from_calendar_date(2018, Month.FEB, 31)   # → 2018-02-28
    Date.from_calendar_parts(2018, 2, 29)          # InvalidCalendarDate

Public API
----------
Date                 The day-count value.
Month, Weekday       Closed enumerations (JAN=1.., MON=1..).
CalendarDate, OrdinalDate, WeekDate
                     Derived shapes returned by the converters.
DateError            Base exception for all errors.
ParseError           Input is not ISO 8601.
ValidationError      Parts out of range; see InvalidCalendarDate,
                     InvalidOrdinalDate, InvalidWeekDate.
"""

from __future__ import annotations

from ratadie.date._exceptions import (
    DateError,
    InvalidCalendarDate,
    InvalidOrdinalDate,
    InvalidWeekDate,
    ParseError,
    ValidationError,
)
from ratadie.date.date import (
    CalendarDate,
    Date,
    Month,
    OrdinalDate,
    WeekDate,
    Weekday,
    clamp,
    compare,
    is_between,
    max_date,
    min_date,
    month_to_number,
    month_to_quarter,
    number_to_month,
    number_to_weekday,
    quarter_to_month,
    weekday_to_number,
)

__all__ = [
    "CalendarDate",
    "Date",
    "DateError",
    "InvalidCalendarDate",
    "InvalidOrdinalDate",
    "InvalidWeekDate",
    "Month",
    "OrdinalDate",
    "ParseError",
    "ValidationError",
    "WeekDate",
    "Weekday",
    "clamp",
    "compare",
    "is_between",
    "max_date",
    "min_date",
    "month_to_number",
    "month_to_quarter",
    "number_to_month",
    "number_to_weekday",
    "quarter_to_month",
    "weekday_to_number",
]
