from __future__ import annotations

from typing import Union

import numpy as np

IntLike = Union[int, "np.ndarray"]
BoolLike = Union[bool, "np.ndarray"]

DAYS_IN_400_YEARS: int = 146097
DAYS_IN_100_YEARS: int = 36524
DAYS_IN_4_YEARS: int = 1461
DAYS_IN_YEAR: int = 365

_DAYS_IN_MONTH = np.array([31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64)
_DAYS_BEFORE_MONTH = np.concatenate([[0], np.cumsum(_DAYS_IN_MONTH)[:-1]]).astype(np.int64)


# ── scalar / array plumbing ─────────────────────────────────────────────────
#
# Scalars stay Python ints end to end so years and day counts are unbounded;
# only array inputs go through int64.

def _ints(*values: IntLike) -> tuple[bool, list[IntLike]]:
    if all(np.ndim(v) == 0 for v in values):
        return True, [int(v) for v in values]
    arrays = np.broadcast_arrays(*(np.asarray(v, dtype=np.int64) for v in values))
    return False, list(arrays)


def _out(result: IntLike, scalar: bool, cast: type = int):
    return cast(result) if scalar else result


def _where(cond: BoolLike, a: IntLike, b: IntLike) -> IntLike:
    if isinstance(cond, np.ndarray):
        return np.where(cond, a, b)
    return a if cond else b


def _take(table: np.ndarray, m: IntLike) -> IntLike:
    return table[m - 1] if isinstance(m, np.ndarray) else int(table[m - 1])


# ── leap years ──────────────────────────────────────────────────────────────

def _is_leap(y: IntLike) -> BoolLike:
    return ((y % 4 == 0) & (y % 100 != 0)) | (y % 400 == 0)


def is_leap_year(year: IntLike) -> BoolLike:
    scalar, (y,) = _ints(year)
    return _out(_is_leap(y), scalar, bool)


def days_in_year(year: IntLike) -> IntLike:
    scalar, (y,) = _ints(year)
    return _out(_where(_is_leap(y), 366, 365), scalar)


# ── day counts ──────────────────────────────────────────────────────────────

def _days_before_year(y: IntLike) -> IntLike:
    y1 = y - 1
    return 365 * y1 + y1 // 4 - y1 // 100 + y1 // 400


def days_before_year(year: IntLike) -> IntLike:
    """Days strictly before January 1 of ``year`` (0 for year 1)."""
    scalar, (y,) = _ints(year)
    return _out(_days_before_year(y), scalar)


def _days_before_month(y: IntLike, m: IntLike) -> IntLike:
    return _take(_DAYS_BEFORE_MONTH, m) + ((m > 2) & _is_leap(y))


def days_before_month(year: IntLike, month: IntLike) -> IntLike:
    """Days in ``year`` before the first of ``month`` (1-12)."""
    scalar, (y, m) = _ints(year, month)
    return _out(_days_before_month(y, m), scalar)


def _days_in_month(y: IntLike, m: IntLike) -> IntLike:
    return _take(_DAYS_IN_MONTH, m) + ((m == 2) & _is_leap(y))


def days_in_month(year: IntLike, month: IntLike) -> IntLike:
    scalar, (y, m) = _ints(year, month)
    return _out(_days_in_month(y, m), scalar)


# ── weekdays and ISO weeks ──────────────────────────────────────────────────

def _weekday_number(rd: IntLike) -> IntLike:
    wdn = rd % 7
    return _where(wdn == 0, 7, wdn)


def weekday_number(rata_die: IntLike) -> IntLike:
    """Monday=1 .. Sunday=7. Rata Die 1 (0001-01-01) is a Monday."""
    scalar, (rd,) = _ints(rata_die)
    return _out(_weekday_number(rd), scalar)


def _days_before_week_year(y: IntLike) -> IntLike:
    jan4 = _days_before_year(y) + 4
    return jan4 - _weekday_number(jan4)


def days_before_week_year(year: IntLike) -> IntLike:
    """Rata Die of the Sunday preceding ISO week 1 of ``year``."""
    scalar, (y,) = _ints(year)
    return _out(_days_before_week_year(y), scalar)


def _is_53_week_year(y: IntLike) -> BoolLike:
    wdn_jan1 = _weekday_number(_days_before_year(y) + 1)
    return (wdn_jan1 == 4) | ((wdn_jan1 == 3) & _is_leap(y))


def is_53_week_year(year: IntLike) -> BoolLike:
    scalar, (y,) = _ints(year)
    return _out(_is_53_week_year(y), scalar, bool)


def weeks_in_year(year: IntLike) -> IntLike:
    scalar, (y,) = _ints(year)
    return _out(_where(_is_53_week_year(y), 53, 52), scalar)


# ── Rata Die decomposition ──────────────────────────────────────────────────

def _year_of(rd: IntLike) -> IntLike:
    n400, r400 = divmod(rd, DAYS_IN_400_YEARS)
    n100, r100 = divmod(r400, DAYS_IN_100_YEARS)
    n4, r4 = divmod(r100, DAYS_IN_4_YEARS)
    n1, r1 = divmod(r4, DAYS_IN_YEAR)
    # r1 == 0 is the last day of a 4/100/400-year cycle, still in year n
    return n400 * 400 + n100 * 100 + n4 * 4 + n1 + (r1 != 0)


def year_of(rata_die: IntLike) -> IntLike:
    """Calendar year containing ``rata_die``, without iterating over years."""
    scalar, (rd,) = _ints(rata_die)
    return _out(_year_of(rd), scalar)


def calendar_parts(rata_die: IntLike) -> tuple[IntLike, IntLike, IntLike]:
    """
    Split Rata Die values into ``(year, month, day)``.

    Scalars give a tuple of ints, arrays give a tuple of arrays shaped like
    the input.
    """
    scalar, (rd,) = _ints(rata_die)
    y = _year_of(rd)
    ordinal = rd - _days_before_year(y)

    m = 1
    for month in range(2, 13):
        m = m + (ordinal > _days_before_month(y, month))
    d = ordinal - _days_before_month(y, m)

    return _out(y, scalar), _out(m, scalar), _out(d, scalar)
