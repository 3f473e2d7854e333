class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidDateError(CalendarError, ValueError):
    """A (year, month, day) triple that is not a Gregorian calendar date."""

    def __init__(self, year: int, month: int, day: int) -> None:
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"Invalid date: year={year}, month={month}, day={day}.")
