"""
Day-number arithmetic for the proleptic Gregorian calendar.

Day 0 is 0000-01-01.  Year 0 exists and is a leap year; negative years count
backwards from it.  All divisions truncate toward zero, which fixes where the
negative-year boundaries fall.
"""

from __future__ import annotations

from typing import Optional

_MONTH_DAYS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Day-of-year on which months 2..12 start in a common year.
_MONTH_STARTS: tuple[int, ...] = (31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

DAYS_PER_400_YEARS: int = 146097


def _quot(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _rem(a: int, b: int) -> int:
    return a - b * _quot(a, b)


# ── calendar rules ───────────────────────────────────────────────────────────

def is_leap_year(year: int) -> bool:
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> Optional[int]:
    if month < 1 or month > 12:
        return None
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    dim = days_in_month(year, month)
    return dim is not None and 1 <= day <= dim


# ── (year, month, day) -> day number ─────────────────────────────────────────

def days_from_year(year: int) -> int:
    """Day number of January 1st of ``year``."""
    if year > 0:
        y = year - 1
        return 366 + y * 365 + _quot(y, 4) - _quot(y, 100) + _quot(y, 400)
    if year < 0:
        return year * 365 + _quot(year, 4) - _quot(year, 100) + _quot(year, 400)
    return 0


def days_from_year_month(year: int, month: int) -> int:
    """Days between January 1st and the first day of ``month``."""
    return sum(days_in_month(year, m) or 0 for m in range(1, month))


def days_from_year_month_day(year: int, month: int, day: int) -> int:
    return days_from_year(year) + days_from_year_month(year, month) + (day - 1)


# ── day number -> (year, month, day) ─────────────────────────────────────────

def year_from_days(days: int) -> int:
    # The estimate overshoots by at most one year inside a 400-year block.
    year = _quot(days, 365)
    if days <= days_from_year(year):
        return year - 1
    return year


def date_from_days(days: int) -> tuple[int, int, int]:
    blocks = _quot(days, DAYS_PER_400_YEARS)
    rest = _rem(days, DAYS_PER_400_YEARS)

    year = year_from_days(rest + 1)
    day_of_year = rest - days_from_year(year)
    leap = 1 if is_leap_year(year) else 0

    month = 1
    month_start = 0
    for i, start in enumerate(_MONTH_STARTS):
        boundary = start + (leap if i >= 1 else 0)
        if day_of_year < boundary:
            break
        month = i + 2
        month_start = boundary

    return year + blocks * 400, month, day_of_year - month_start + 1


def weekday_from_days(days: int) -> int:
    """ISO weekday (Monday = 1 .. Sunday = 7); day 0 was a Saturday."""
    return (days + 5) % 7 + 1
