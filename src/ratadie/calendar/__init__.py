# src/ratadie/calendar/__init__.py
"""
ratadie.calendar
~~~~~~~~~~~~~~~~

Proleptic Gregorian calendar arithmetic on Rata Die day counts, where day 1
is 0001-01-01 (a Monday).  Leap years, cumulative month lengths, ISO week
anchoring and constant-time year extraction.

Basic usage::

    from ratadie.calendar import year_of, weekday_number, days_in_month

    year_of(733_000)          # → 2007
    weekday_number(1)         # → 1 (Monday)
    days_in_month(2000, 2)    # → 29

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    years = year_of(np.array([1, 365, 366, 146_097]))   # → [1, 1, 2, 400]

Public API
----------
is_leap_year, days_in_year, days_in_month,
days_before_year, days_before_month,
weekday_number, days_before_week_year, is_53_week_year, weeks_in_year,
year_of, calendar_parts
"""

from __future__ import annotations

from ratadie.calendar.calendar import (
    calendar_parts,
    days_before_month,
    days_before_week_year,
    days_before_year,
    days_in_month,
    days_in_year,
    is_53_week_year,
    is_leap_year,
    weekday_number,
    weeks_in_year,
    year_of,
)

__all__ = [
    "calendar_parts",
    "days_before_month",
    "days_before_week_year",
    "days_before_year",
    "days_in_month",
    "days_in_year",
    "is_53_week_year",
    "is_leap_year",
    "weekday_number",
    "weeks_in_year",
    "year_of",
]
