from __future__ import annotations

from typing import Callable, Dict

from ratadie.date import Date, Month, Weekday

from .tokens import Field, Literal, tokenize

_MONTH_NAMES = {
    Month.JAN: "January",
    Month.FEB: "February",
    Month.MAR: "March",
    Month.APR: "April",
    Month.MAY: "May",
    Month.JUN: "June",
    Month.JUL: "July",
    Month.AUG: "August",
    Month.SEP: "September",
    Month.OCT: "October",
    Month.NOV: "November",
    Month.DEC: "December",
}

_WEEKDAY_NAMES = {
    Weekday.MON: "Monday",
    Weekday.TUE: "Tuesday",
    Weekday.WED: "Wednesday",
    Weekday.THU: "Thursday",
    Weekday.FRI: "Friday",
    Weekday.SAT: "Saturday",
    Weekday.SUN: "Sunday",
}


def month_name(month: Month) -> str:
    return _MONTH_NAMES[Month(month)]


def month_name_short(month: Month) -> str:
    return month_name(month)[:3]


def weekday_name(weekday: Weekday) -> str:
    return _WEEKDAY_NAMES[Weekday(weekday)]


def weekday_name_short(weekday: Weekday) -> str:
    return weekday_name(weekday)[:3]


def with_ordinal_suffix(n: int) -> str:
    """``1`` → ``"1st"``, ``12`` → ``"12th"``, ``23`` → ``"23rd"``."""
    nn = n % 100
    last = nn if nn < 20 else nn % 10
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(last, "th")
    return f"{n}{suffix}"


def pad_signed_int(n: int, width: int) -> str:
    """Zero-pad ``n`` to ``width`` digits, keeping a leading ``-``."""
    sign = "-" if n < 0 else ""
    return sign + str(abs(n)).zfill(width)


def _last_two(n: int) -> str:
    return str(n).zfill(2)[-2:]


# ── field renderers ─────────────────────────────────────────────────────────

def _year(date: Date, length: int) -> str:
    y = date.year
    if length == 2:
        return _last_two(y)
    return pad_signed_int(y, length)


def _week_year(date: Date, length: int) -> str:
    y = date.week_year
    if length == 2:
        return _last_two(y)
    if length in (1, 3, 4):
        return pad_signed_int(y, length)
    return ""


def _quarter(date: Date, length: int) -> str:
    q = date.quarter
    if length in (1, 2, 5):
        return str(q)
    if length == 3:
        return f"Q{q}"
    if length == 4:
        return with_ordinal_suffix(q)
    return ""


def _month(date: Date, length: int) -> str:
    m = date.month
    if length == 1:
        return str(int(m))
    if length == 2:
        return f"{int(m):02d}"
    if length == 3:
        return month_name_short(m)
    if length == 4:
        return month_name(m)
    if length == 5:
        return month_name(m)[:1]
    return ""


def _week_number(date: Date, length: int) -> str:
    wn = date.week_number
    if length == 1:
        return str(wn)
    if length == 2:
        return f"{wn:02d}"
    return ""


def _day(date: Date, length: int) -> str:
    d = date.day
    if length == 1:
        return str(d)
    if length == 2:
        return f"{d:02d}"
    if length == 3:
        # non-standard
        return with_ordinal_suffix(d)
    return ""


def _ordinal_day(date: Date, length: int) -> str:
    od = date.ordinal_day
    if 1 <= length <= 3:
        return pad_signed_int(od, length)
    return ""


def _weekday(date: Date, length: int) -> str:
    wd = date.weekday
    if length in (1, 2, 3):
        return weekday_name_short(wd)
    if length == 4:
        return weekday_name(wd)
    if length == 5:
        return weekday_name(wd)[:1]
    if length == 6:
        return weekday_name(wd)[:2]
    return ""


def _weekday_number(date: Date, length: int) -> str:
    if length in (1, 2):
        return str(date.weekday_number)
    return ""


_FIELDS: Dict[str, Callable[[Date, int], str]] = {
    "y": _year,
    "Y": _week_year,
    "Q": _quarter,
    "M": _month,
    "w": _week_number,
    "d": _day,
    "D": _ordinal_day,
    "E": _weekday,
    "e": _weekday_number,
}


def format_field(char: str, length: int, date: Date) -> str:
    """Render one field; unknown characters and lengths give ``""``."""
    render = _FIELDS.get(char)
    return render(date, length) if render is not None else ""


def format_date(pattern: str, date: Date) -> str:
    """
    Render ``date`` with a pattern such as ``"EEEE, MMMM d, y"``.

    ======  ===============================================================
    y       year (``yy`` last two digits, ``yyyy`` zero-padded)
    Y       ISO week-numbering year
    Q       quarter (``Q`` 1, ``QQQ`` Q1, ``QQQQ`` 1st)
    M       month (``M`` 3, ``MM`` 03, ``MMM`` Mar, ``MMMM`` March, ``MMMMM`` M)
    w       ISO week number
    d       day of month (``ddd`` 15th)
    D       day of year
    E       weekday (``E`` Thu, ``EEEE`` Thursday, ``EEEEE`` T, ``EEEEEE`` Th)
    e       weekday number, Monday = 1
    ======  ===============================================================

    Text in single quotes is copied verbatim; ``''`` is a literal quote.
    """
    out = []
    for token in tokenize(pattern):
        if isinstance(token, Field):
            out.append(format_field(token.char, token.length, date))
        elif isinstance(token, Literal):
            out.append(token.text)
    return "".join(out)
