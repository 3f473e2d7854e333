from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import IntEnum

from . import days as _days
from ._exceptions import InvalidDateError

# A day-preserving year or month shift lands at most 3 days past the end of
# the target month (31 -> 28).
MAX_DAY_WALK: int = 3


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


@dataclass(frozen=True, slots=True)
class DateDelta:
    """
    Signed difference between two dates.

    The fields are computed independently of each other: ``years`` and
    ``months`` come from raw year/month arithmetic, ``days`` is the exact
    day count.  Not meant to be added back to a Date.
    """

    years: int
    months: int
    days: int


@dataclass(frozen=True, slots=True, order=True)
class Date:
    """
    Immutable proleptic-Gregorian calendar date.

    Every instance is a valid date: construction raises InvalidDateError for
    any other (year, month, day) triple.  Ordering is chronological.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not _days.is_valid_date(self.year, self.month, self.day):
            raise InvalidDateError(self.year, self.month, self.day)

    # ── alternative constructors ─────────────────────────────────────────

    @classmethod
    def from_tuple(cls, ymd: tuple[int, int, int]) -> Date:
        year, month, day = ymd
        return cls(year, month, day)

    @classmethod
    def from_days(cls, days: int) -> Date:
        return cls(*_days.date_from_days(days))

    @classmethod
    def clamped(cls, year: int, month: int, day: int) -> Date:
        """Nearest valid date: month clamped to 1..12, day to the month's range."""
        month = min(max(month, 1), 12)
        dim = _days.days_in_month(year, month)
        assert dim is not None
        return cls(year, month, min(max(day, 1), dim))

    # ── conversions ──────────────────────────────────────────────────────

    def to_tuple(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day

    def to_days(self) -> int:
        return _days.days_from_year_month_day(self.year, self.month, self.day)

    # ── setters (validating) ─────────────────────────────────────────────

    def set_year(self, year: int) -> Date:
        return dataclasses.replace(self, year=year)

    def set_month(self, month: int) -> Date:
        return dataclasses.replace(self, month=month)

    def set_day(self, day: int) -> Date:
        return dataclasses.replace(self, day=day)

    # ── arithmetic (total) ───────────────────────────────────────────────

    def add_years(self, years: int) -> Date:
        return _walk_back(self.year + years, self.month, self.day)

    def add_months(self, months: int) -> Date:
        sign = -1 if self.year < 0 else 1
        total = abs(self.year) * 12 + (self.month - 1) + months
        year = sign * _days._quot(total, 12)
        month = total % 12 + 1
        return _walk_back(year, month, self.day)

    def add_days(self, days: int) -> Date:
        return Date.from_days(self.to_days() + days)

    def delta(self, other: Date) -> DateDelta:
        return DateDelta(
            years=self.year - other.year,
            months=(abs(self.year) * 12 + self.month) - (abs(other.year) * 12 + other.month),
            days=self.to_days() - other.to_days(),
        )

    # ── queries ──────────────────────────────────────────────────────────

    def weekday(self) -> Weekday:
        return Weekday(_days.weekday_from_days(self.to_days()))

    def is_leap_year(self) -> bool:
        return _days.is_leap_year(self.year)

    def days_in_month(self) -> int:
        dim = _days.days_in_month(self.year, self.month)
        assert dim is not None
        return dim

    def __repr__(self) -> str:
        return f"Date({self.year}, {self.month}, {self.day})"


def _walk_back(year: int, month: int, day: int) -> Date:
    for step in range(MAX_DAY_WALK + 1):
        if _days.is_valid_date(year, month, day - step):
            return Date(year, month, day - step)
    raise AssertionError(
        f"No valid day within {MAX_DAY_WALK} days before {year}-{month}-{day}."
    )


# ── function forms ───────────────────────────────────────────────────────────

def make_date(year: int, month: int, day: int) -> Date:
    return Date(year, month, day)


def from_tuple(ymd: tuple[int, int, int]) -> Date:
    return Date.from_tuple(ymd)


def to_tuple(date: Date) -> tuple[int, int, int]:
    return date.to_tuple()


def add_years(years: int, date: Date) -> Date:
    return date.add_years(years)


def add_months(months: int, date: Date) -> Date:
    return date.add_months(months)


def add_days(days: int, date: Date) -> Date:
    return date.add_days(days)


def delta(a: Date, b: Date) -> DateDelta:
    return a.delta(b)
