from __future__ import annotations

from enum import Enum

from ratadie.date import Date, Month


class Unit(Enum):
    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"


def _quot(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _month_index(date: Date) -> int:
    y, m, _ = date.to_calendar_date()
    return 12 * (y - 1) + (int(m) - 1)


def _hundredths_of_months(date: Date) -> int:
    # day / 100 orders days within a month without reaching the next month
    return 100 * _month_index(date) + date.day


def add(unit: Unit, n: int, date: Date) -> Date:
    """
    Move ``date`` by ``n`` units.

    Month and year steps keep the day of month, clamped to the last day of
    the target month: Jan 31 + 1 month is Feb 28 (or 29).
    """
    if unit is Unit.YEARS:
        return add(Unit.MONTHS, 12 * n, date)
    if unit is Unit.MONTHS:
        y, m, d = date.to_calendar_date()
        whole_months = 12 * (y - 1) + (int(m) - 1) + n
        target_year = whole_months // 12 + 1
        target_month = Month(whole_months % 12 + 1)
        return Date.from_calendar_date(target_year, target_month, d)
    if unit is Unit.WEEKS:
        return Date(date.rata_die + 7 * n)
    if unit is Unit.DAYS:
        return Date(date.rata_die + n)
    raise ValueError(f"Unsupported unit: {unit!r}")


def diff(unit: Unit, d1: Date, d2: Date) -> int:
    """
    Whole units from ``d1`` to ``d2``, truncated toward zero.

    Negative when ``d2`` is before ``d1``.  A month only counts once its day of
    month has been reached: Mar 15 → Sep 1 is 5 months, Mar 15 → Sep 15 is 6.
    """
    if unit is Unit.YEARS:
        return _quot(diff(Unit.MONTHS, d1, d2), 12)
    if unit is Unit.MONTHS:
        return _quot(_hundredths_of_months(d2) - _hundredths_of_months(d1), 100)
    if unit is Unit.WEEKS:
        return _quot(d2.rata_die - d1.rata_die, 7)
    if unit is Unit.DAYS:
        return d2.rata_die - d1.rata_die
    raise ValueError(f"Unsupported unit: {unit!r}")
