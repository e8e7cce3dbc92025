from __future__ import annotations

from enum import Enum

from ratadie.date import Date, Weekday, quarter_to_month

from .arithmetic import Unit, add


class Interval(Enum):
    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK = "week"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    DAY = "day"


_WEEK_START = {
    Interval.WEEK: Weekday.MON,
    Interval.MONDAY: Weekday.MON,
    Interval.TUESDAY: Weekday.TUE,
    Interval.WEDNESDAY: Weekday.WED,
    Interval.THURSDAY: Weekday.THU,
    Interval.FRIDAY: Weekday.FRI,
    Interval.SATURDAY: Weekday.SAT,
    Interval.SUNDAY: Weekday.SUN,
}

_STEP = {
    Interval.YEAR: (Unit.YEARS, 1),
    Interval.QUARTER: (Unit.MONTHS, 3),
    Interval.MONTH: (Unit.MONTHS, 1),
    Interval.DAY: (Unit.DAYS, 1),
    **{interval: (Unit.WEEKS, 1) for interval in _WEEK_START},
}


def _days_since(weekday: Weekday, date: Date) -> int:
    return (date.weekday_number + 7 - int(weekday)) % 7


def floor(interval: Interval, date: Date) -> Date:
    """Start of the ``interval`` containing ``date``; WEEK starts on Monday."""
    if interval is Interval.YEAR:
        return Date.from_ordinal_date(date.year, 1)
    if interval is Interval.QUARTER:
        return Date.from_calendar_date(date.year, quarter_to_month(date.quarter), 1)
    if interval is Interval.MONTH:
        return Date.from_calendar_date(date.year, date.month, 1)
    if interval is Interval.DAY:
        return date
    return Date(date.rata_die - _days_since(_WEEK_START[interval], date))


def ceiling(interval: Interval, date: Date) -> Date:
    """``date`` if it is an ``interval`` boundary, otherwise the next boundary."""
    floored = floor(interval, date)
    if floored == date:
        return date
    unit, n = _STEP[interval]
    return add(unit, n, floored)


def date_range(interval: Interval, step: int, start: Date, until: Date) -> list[Date]:
    """
    Interval boundaries from ``ceiling(interval, start)`` up to, but not
    including, ``until``, every ``step`` intervals.

    Steps below 1 are treated as 1.
    """
    unit, n = _STEP[interval]
    n *= max(1, step)

    dates: list[Date] = []
    current = ceiling(interval, start)
    while current < until:
        dates.append(current)
        current = add(unit, n, current)
    return dates
