"""
calzone.calendar
~~~~~~~~~~~~~~~~

Proleptic-Gregorian date arithmetic.  A Date is an immutable, always-valid
(year, month, day) value; arithmetic goes through absolute day numbers, with
day 0 being 0000-01-01.

Basic usage::

    from calzone.calendar import Date

    d = Date(2000, 2, 29)
    d.add_years(1)                 # → Date(2001, 2, 28)
    d.add_months(1)                # → Date(2000, 3, 29)
    d.add_days(-60)                # → Date(1999, 12, 31)
    d.delta(Date(1999, 12, 31))    # → DateDelta(years=1, months=2, days=60)

Constructors and setters raise InvalidDateError for impossible dates; the
``add_*`` methods never fail.

Public API
----------
Date              The date value.
DateDelta         Descriptive difference between two dates.
Weekday           ISO weekday enumeration.
CalendarError     Base exception for all calendar-related errors.
InvalidDateError  Raised for an invalid (year, month, day) triple.
"""

from __future__ import annotations

from calzone.calendar._exceptions import CalendarError, InvalidDateError
from calzone.calendar.date import (
    Date,
    DateDelta,
    Weekday,
    add_days,
    add_months,
    add_years,
    delta,
    from_tuple,
    make_date,
    to_tuple,
)
from calzone.calendar.days import (
    date_from_days,
    days_from_year,
    days_from_year_month_day,
    days_in_month,
    is_leap_year,
    is_valid_date,
    year_from_days,
)

__all__ = [
    "Date",
    "DateDelta",
    "Weekday",
    "CalendarError",
    "InvalidDateError",
    "make_date",
    "from_tuple",
    "to_tuple",
    "add_years",
    "add_months",
    "add_days",
    "delta",
    "is_leap_year",
    "is_valid_date",
    "days_in_month",
    "days_from_year",
    "days_from_year_month_day",
    "date_from_days",
    "year_from_days",
]
