"""
tests/calendar/test_days.py

Covers:
  - Leap-year rules and days-per-month table
  - Day numbers of year starts, including year 0 and negative years
  - date_from_days as the inverse of days_from_year_month_day
  - Weekdays from day numbers
"""

import pytest

from calzone.calendar.days import (
    DAYS_PER_400_YEARS,
    date_from_days,
    days_from_year,
    days_from_year_month,
    days_from_year_month_day,
    days_in_month,
    is_leap_year,
    is_valid_date,
    weekday_from_days,
    year_from_days,
)


# ── Calendar rules ────────────────────────────────────────────────────────────

class TestLeapYears:

    @pytest.mark.parametrize("year", [2000, 2004, 1600, 2400, 0, -4, -400])
    def test_leap(self, year):
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [1900, 2001, 2100, 1800, -1, -100])
    def test_not_leap(self, year):
        assert not is_leap_year(year)


class TestDaysInMonth:

    def test_february(self):
        assert days_in_month(2000, 2) == 29
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2004, 2) == 29
        assert days_in_month(2023, 2) == 28

    def test_thirty_day_months(self):
        for month in (4, 6, 9, 11):
            assert days_in_month(2023, month) == 30

    def test_thirty_one_day_months(self):
        for month in (1, 3, 5, 7, 8, 10, 12):
            assert days_in_month(2023, month) == 31

    def test_month_out_of_range_is_none(self):
        assert days_in_month(2023, 0) is None
        assert days_in_month(2023, 13) is None
        assert days_in_month(2023, -1) is None

    def test_is_valid_date(self):
        assert is_valid_date(2000, 2, 29)
        assert not is_valid_date(2001, 2, 29)
        assert not is_valid_date(2023, 4, 31)
        assert not is_valid_date(2023, 1, 0)
        assert not is_valid_date(2023, 13, 1)


# ── Day numbers ───────────────────────────────────────────────────────────────

class TestDayNumbers:

    def test_epoch_is_year_zero(self):
        assert days_from_year(0) == 0
        assert days_from_year_month_day(0, 1, 1) == 0

    def test_year_zero_is_366_days(self):
        assert days_from_year(1) == 366

    def test_400_year_block(self):
        assert days_from_year(400) == DAYS_PER_400_YEARS
        assert days_from_year(800) == 2 * DAYS_PER_400_YEARS

    def test_negative_years(self):
        assert days_from_year(-1) == -365
        assert days_from_year(-4) == -1461
        assert days_from_year(-3) == -1095
        assert days_from_year(-400) == -DAYS_PER_400_YEARS

    def test_year_lengths_are_consistent(self):
        for year in range(-410, 410):
            length = days_from_year(year + 1) - days_from_year(year)
            assert length == (366 if is_leap_year(year) else 365), year

    def test_days_from_year_month(self):
        assert days_from_year_month(2023, 1) == 0
        assert days_from_year_month(2023, 3) == 59
        assert days_from_year_month(2024, 3) == 60
        assert days_from_year_month(2023, 12) == 334

    def test_year_from_days(self):
        assert year_from_days(1) == 0
        assert year_from_days(366) == 0
        assert year_from_days(367) == 1
        assert year_from_days(0) == -1


# ── Inverse conversion ────────────────────────────────────────────────────────

class TestDateFromDays:

    def test_epoch(self):
        assert date_from_days(0) == (0, 1, 1)

    def test_day_before_epoch(self):
        assert date_from_days(-1) == (-1, 12, 31)

    def test_leap_day(self):
        n = days_from_year_month_day(2000, 2, 29)
        assert date_from_days(n) == (2000, 2, 29)
        assert date_from_days(n + 1) == (2000, 3, 1)

    def test_block_boundaries(self):
        assert date_from_days(DAYS_PER_400_YEARS) == (400, 1, 1)
        assert date_from_days(DAYS_PER_400_YEARS - 1) == (399, 12, 31)
        assert date_from_days(-DAYS_PER_400_YEARS) == (-400, 1, 1)
        assert date_from_days(-DAYS_PER_400_YEARS - 1) == (-401, 12, 31)

    @pytest.mark.parametrize("start", [-150_000, -1_000, 729_000, 1_000_000])
    def test_inverse_over_consecutive_days(self, start):
        for n in range(start, start + 1_500):
            y, m, d = date_from_days(n)
            assert is_valid_date(y, m, d)
            assert days_from_year_month_day(y, m, d) == n

    def test_inverse_on_month_ends(self):
        for year in (-401, -400, -101, -4, -1, 0, 1, 1900, 2000, 2023, 2400):
            for month in range(1, 13):
                last = days_in_month(year, month)
                for day in (1, last):
                    n = days_from_year_month_day(year, month, day)
                    assert date_from_days(n) == (year, month, day)


# ── Weekdays ──────────────────────────────────────────────────────────────────

class TestWeekday:

    def test_epoch_is_saturday(self):
        assert weekday_from_days(0) == 6

    def test_known_dates(self):
        assert weekday_from_days(days_from_year_month_day(2000, 1, 1)) == 6
        assert weekday_from_days(days_from_year_month_day(1970, 1, 1)) == 4

    def test_before_epoch(self):
        assert weekday_from_days(-1) == 5
        assert weekday_from_days(-7) == 6
