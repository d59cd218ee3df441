"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the Gregorian calendar, from its first day (1582-10-15) onwards.
"""

from __future__ import annotations

from typing import ClassVar

from gregoria._internal.constants import FIRST_DATE
from gregoria._internal.validation import validate_day, validate_not_before_cutover
from gregoria.core.year import Year
from gregoria.units.month import Month


def _as_year(year: int | Year) -> Year:
    return year if isinstance(year, Year) else Year(year)


def _as_month(month: Month | int) -> Month:
    return month if isinstance(month, Month) else Month.from_ordinal(month)


class Date:
    """A calendar date in the Gregorian calendar.

    Date holds a year, month and day of month. A Date can only exist
    if the day fits the month for that year and the date is on or
    after 1582-10-15, when the Gregorian calendar came into use.

    Attributes:
        year: The Year.
        month: The Month.
        day_of_month: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, Month.FEBRUARY, 29)
        >>> d.is_leap_year
        True
        >>> d.day_of_year
        60

        >>> Date.from_day_of_year(2023, 365)
        Date(2023, 12, 31)

        >>> Date(1582, Month.OCTOBER, 14)
        Traceback (most recent call last):
        ...
        InvalidDate: date must be on or after 1582-10-15, got 1582-10-14
    """

    __slots__ = ("_year", "_month", "_day")

    MIN: ClassVar[Date]

    def __init__(self, year: int | Year, month: Month | int, day: int) -> None:
        """Create a Date from year, month, and day of month.

        Args:
            year: The year, as an integer (0-65535) or a Year.
            month: The month, as a Month or its number (1-12).
            day: The day of the month.

        Raises:
            ValidationError: If year or day is not an integer, or the
                year is out of range.
            InvalidMonthNumber: If month is a number outside 1-12.
            InvalidDay: If day does not exist in that month and year.
            InvalidDate: If the date is before 1582-10-15.
        """
        y = _as_year(year)
        m = _as_month(month)
        validate_day(y.table, m, day, y.value)
        validate_not_before_cutover(y.value, m.value, day)

        self._year = y
        self._month = m
        self._day = day

    @classmethod
    def from_day_of_year(cls, year: int | Year, day_of_year: int) -> Date:
        """Create a Date from a year and a day of that year.

        Args:
            year: The year, as an integer (0-65535) or a Year.
            day_of_year: Day of the year (1-365, or 1-366 in leap years).

        Returns:
            The corresponding Date.

        Raises:
            InvalidDayOfYear: If day_of_year is outside the year.
            InvalidDate: If the date is before 1582-10-15.

        Examples:
            >>> Date.from_day_of_year(2024, 60)
            Date(2024, 2, 29)
            >>> Date.from_day_of_year(2023, 60)
            Date(2023, 3, 1)
        """
        y = _as_year(year)
        month, day = y.decode_day_of_year(day_of_year)
        validate_not_before_cutover(y.value, month.value, day)

        date = cls.__new__(cls)
        date._year = y
        date._month = month
        date._day = day
        return date

    @property
    def year(self) -> Year:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> Month:
        """Return the month component."""
        return self._month

    @property
    def day_of_month(self) -> int:
        """Return the day of the month (1-31)."""
        return self._day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> Date(2000, 1, 1).is_leap_year
            True
            >>> Date(2100, 1, 1).is_leap_year
            False
        """
        return self._year.is_leap

    @property
    def year_days(self) -> int:
        """Return the number of days in this date's year (365 or 366)."""
        return self._year.total_days

    @property
    def month_days(self) -> int:
        """Return the number of days in this date's month."""
        return self._year.month_days(self._month)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year.

        Returns:
            Day of year (1-366).

        Examples:
            >>> Date(2024, 12, 31).day_of_year  # Leap year
            366
            >>> Date(2023, 12, 31).day_of_year  # Non-leap year
            365
        """
        return self._year.first_of_month(self._month) + self._day - 1

    def to_tuple(self) -> tuple[int, int, int]:
        """Return the date as a (year, month, day) tuple of integers."""
        return (self._year.value, self._month.value, self._day)

    def _key(self) -> tuple[int, int, int]:
        return (self._year.value, self._month.value, self._day)

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Examples:
            >>> Date(2024, 1, 15) == Date(2024, Month.JANUARY, 15)
            True
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another.

        Examples:
            >>> Date(2024, 1, 31) < Date(2024, 2, 1)
            True
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(1582, 10, 15)'.
        """
        year, month, day = self._key()
        return f"Date({year}, {month}, {day})"

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


Date.MIN = Date(*FIRST_DATE)


__all__ = ["Date"]
