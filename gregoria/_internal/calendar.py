"""Calendar tables for Gregoria.

This module provides the leap year rule, the month length tables and
day-of-year decoding. Leap-ness is the only input that varies the
tables, so exactly two MonthTable instances exist: one for common
years and one for leap years, both built at import time.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import accumulate

from gregoria._internal.constants import DAYS_IN_MONTH, FEBRUARY_LEAP_DAYS
from gregoria._internal.validation import validate_day, validate_day_of_year
from gregoria.errors import InvalidDayOfYear
from gregoria.units.month import Month

logger = logging.getLogger(__name__)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(2100)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2004)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2001)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@dataclass(frozen=True)
class MonthTable:
    """Month lengths and day-of-year bounds for one leap-ness.

    All sequences are indexed by ``month.ordinal - 1``. Use
    ``month_table(leap)`` to get one of the two shared instances rather
    than constructing a table directly.

    Attributes:
        leap: Whether this is the leap year table.
        days: Number of days in each month.
        firsts: Day of year of the first day of each month (1-based).
        total_days: Number of days in the year.
    """

    leap: bool
    days: tuple[int, ...]
    firsts: tuple[int, ...]
    total_days: int

    @classmethod
    def build(cls, leap: bool) -> MonthTable:
        """Derive the table for the given leap-ness.

        Examples:
            >>> MonthTable.build(True).total_days
            366
            >>> MonthTable.build(False).firsts[2]  # March 1
            60
        """
        days = list(DAYS_IN_MONTH[1:])
        if leap:
            days[Month.FEBRUARY.ordinal - 1] = FEBRUARY_LEAP_DAYS
        # first_of_month(m) = first_of_month(prev(m)) + month_days(prev(m))
        firsts = tuple(accumulate(days[:-1], initial=1))
        return cls(
            leap=leap,
            days=tuple(days),
            firsts=firsts,
            total_days=firsts[-1] + days[-1] - 1,
        )

    def month_days(self, month: Month) -> int:
        """Return the number of days in ``month``."""
        return self.days[month.value - 1]

    def first_of_month(self, month: Month) -> int:
        """Return the day of year of the first day of ``month``."""
        return self.firsts[month.value - 1]

    def last_of_month(self, month: Month) -> int:
        """Return the day of year of the last day of ``month``."""
        index = month.value - 1
        return self.firsts[index] + self.days[index] - 1

    def day_of_year(self, month: Month, day: int, year: int | None = None) -> int:
        """Encode a month and day of month as a day of year.

        Args:
            month: The month.
            day: The day of the month.
            year: The year, if known, for error messages.

        Raises:
            ValidationError: If day is not an integer.
            InvalidDay: If day is outside the month.

        Examples:
            >>> month_table(False).day_of_year(Month.MARCH, 1)
            60
            >>> month_table(True).day_of_year(Month.MARCH, 1)
            61
        """
        validate_day(self, month, day, year)
        return self.first_of_month(month) + day - 1

    def decode(
        self, day_of_year: int, year: int | None = None
    ) -> tuple[Month, int]:
        """Convert a day of year to a month and day of month.

        Months are scanned in calendar order; the day belongs to the
        first month whose [first, last] range contains it.

        Args:
            day_of_year: Day of year (1 to total_days).
            year: The year, if known, for error messages.

        Returns:
            Tuple of (month, day of month).

        Raises:
            ValidationError: If day_of_year is not an integer.
            InvalidDayOfYear: If day_of_year is outside the year, or the
                table cannot place it in any month.

        Examples:
            >>> month_table(False).decode(60)
            (<Month.MARCH: 3>, 1)
            >>> month_table(True).decode(60)
            (<Month.FEBRUARY: 2>, 29)
        """
        validate_day_of_year(self, day_of_year, year)

        for month in Month:
            if day_of_year <= self.last_of_month(month):
                return (month, day_of_year - self.first_of_month(month) + 1)

        # Unreachable while total_days == last_of_month(DECEMBER)
        logger.error(
            "Month table (leap=%s) is inconsistent: total_days=%d but "
            "December ends on day %d",
            self.leap,
            self.total_days,
            self.last_of_month(Month.DECEMBER),
        )
        raise InvalidDayOfYear(
            f"day of year {day_of_year} does not fall in any month"
        )


# Indexed by the leap flag: _TABLES[False] is common, _TABLES[True] is leap
_TABLES: tuple[MonthTable, MonthTable] = (
    MonthTable.build(False),
    MonthTable.build(True),
)


def month_table(leap: bool) -> MonthTable:
    """Return the shared month table for the given leap-ness."""
    return _TABLES[leap]


def decode_day_of_year(day_of_year: int, leap: bool) -> tuple[Month, int]:
    """Convert a day of year to (month, day) for the given leap-ness.

    Raises:
        ValidationError: If day_of_year is not an integer.
        InvalidDayOfYear: If day_of_year is outside the year.
    """
    return _TABLES[leap].decode(day_of_year)


__all__ = [
    "is_leap_year",
    "MonthTable",
    "month_table",
    "decode_day_of_year",
]
