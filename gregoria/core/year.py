"""Year class representing a calendar year.

A Year classifies itself as leap or common exactly once, at
construction, and answers every month-length and day-of-year query
from the shared month table for that leap-ness.
"""

from __future__ import annotations

from gregoria._internal.calendar import MonthTable, is_leap_year, month_table
from gregoria._internal.validation import validate_year
from gregoria.units.month import Month


class Year:
    """A calendar year in the proleptic Gregorian calendar.

    Every integer in 0-65535 is a valid year. Equality, ordering and
    hashing use the year number only.

    Examples:
        >>> y = Year(2024)
        >>> y.is_leap
        True
        >>> y.total_days
        366
        >>> y.month_days(Month.FEBRUARY)
        29
        >>> y.decode_day_of_year(60)
        (<Month.FEBRUARY: 2>, 29)
    """

    __slots__ = ("_value", "_leap", "_table")

    def __init__(self, year: int) -> None:
        """Create a Year.

        Args:
            year: The year number (0-65535).

        Raises:
            ValidationError: If year is not an integer in range.
        """
        validate_year(year)
        self._value = year
        self._leap = is_leap_year(year)
        self._table = month_table(self._leap)

    @property
    def value(self) -> int:
        """Return the year number."""
        return self._value

    @property
    def is_leap(self) -> bool:
        """Return True if this is a leap year."""
        return self._leap

    @property
    def table(self) -> MonthTable:
        """Return the month table for this year's leap-ness."""
        return self._table

    @property
    def total_days(self) -> int:
        """Return the number of days in this year (365 or 366)."""
        return self._table.total_days

    def month_days(self, month: Month) -> int:
        """Return the number of days in ``month`` of this year."""
        return self._table.month_days(month)

    def first_of_month(self, month: Month) -> int:
        """Return the day of year on which ``month`` starts."""
        return self._table.first_of_month(month)

    def last_of_month(self, month: Month) -> int:
        """Return the day of year on which ``month`` ends."""
        return self._table.last_of_month(month)

    def day_of_year(self, month: Month, day: int) -> int:
        """Return the day of year for ``day`` of ``month``.

        Raises:
            ValidationError: If day is not an integer.
            InvalidDay: If day is outside the month.

        Examples:
            >>> Year(2023).day_of_year(Month.DECEMBER, 31)
            365
        """
        return self._table.day_of_year(month, day, year=self._value)

    def decode_day_of_year(self, day_of_year: int) -> tuple[Month, int]:
        """Return the (month, day of month) for a day of this year.

        Raises:
            ValidationError: If day_of_year is not an integer.
            InvalidDayOfYear: If day_of_year is outside this year.
        """
        return self._table.decode(day_of_year, year=self._value)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        """Check equality with another Year or a plain integer.

        Examples:
            >>> Year(2000) == Year(2000)
            True
            >>> Year(2000) == 2000
            True
        """
        if isinstance(other, Year):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        """Check inequality with another Year or a plain integer."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Year({self._value})"


__all__ = ["Year"]
