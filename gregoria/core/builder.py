"""DateBuilder for assembling a Date step by step.

The builder accumulates a year and one of two mutually exclusive day
selections: an explicit month and day of month, or a day of year.
Nothing is validated until ``build()``, apart from converting month
numbers to Month members as they are set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from gregoria._internal.constants import (
    DEFAULT_BUILDER_DAY,
    DEFAULT_BUILDER_MONTH,
    DEFAULT_BUILDER_YEAR,
)
from gregoria.core.date import Date
from gregoria.errors import BuilderModeError
from gregoria.units.month import Month

logger = logging.getLogger(__name__)


class BuilderMode(Enum):
    """Which day selection a DateBuilder currently holds."""

    MONTH_DAY = "month_day"
    DAY_OF_YEAR = "day_of_year"


@dataclass(frozen=True)
class _MonthDay:
    month: Month
    day: int


@dataclass(frozen=True)
class _DayOfYear:
    ordinal: int


_Selection = _MonthDay | _DayOfYear

_DEFAULT_SELECTION = _MonthDay(
    Month.from_ordinal(DEFAULT_BUILDER_MONTH), DEFAULT_BUILDER_DAY
)


class DateBuilder:
    """Mutable accumulator that produces a validated Date.

    A new builder holds year 2000, January 1. Setters return the
    builder so calls can be chained. Setting a day of year discards
    any month and day; setting a month or day while a day of year is
    held switches back to month/day mode, with the other component
    reset to its default (day 1, or January).

    With ``strict=True`` that implicit switch is refused instead and
    ``month()``/``day()`` raise BuilderModeError while a day of year is
    held. Call ``reset()`` to change modes on a strict builder.

    A builder is not thread-safe and is not itself a date.

    Examples:
        >>> DateBuilder().year(2024).month(Month.MARCH).day(5).build()
        Date(2024, 3, 5)

        >>> DateBuilder().year(2024).day_of_year(60).build()
        Date(2024, 2, 29)

        >>> DateBuilder().day_of_year(100).month(Month.MAY).build()
        Date(2000, 5, 1)
    """

    __slots__ = ("_year", "_selection", "_strict")

    def __init__(self, strict: bool = False) -> None:
        self._year: int = DEFAULT_BUILDER_YEAR
        self._selection: _Selection = _DEFAULT_SELECTION
        self._strict = strict

    @property
    def strict(self) -> bool:
        """Return True if implicit mode switches are refused."""
        return self._strict

    @property
    def mode(self) -> BuilderMode:
        """Return the current day selection mode."""
        if isinstance(self._selection, _DayOfYear):
            return BuilderMode.DAY_OF_YEAR
        return BuilderMode.MONTH_DAY

    @property
    def pending(self) -> tuple[int, Month, int] | tuple[int, int]:
        """Return the accumulated values.

        Returns:
            (year, month, day) in month/day mode, or (year, day_of_year)
            in day-of-year mode.
        """
        selection = self._selection
        if isinstance(selection, _DayOfYear):
            return (self._year, selection.ordinal)
        return (self._year, selection.month, selection.day)

    def year(self, year: int) -> DateBuilder:
        """Set the year. The day selection is unchanged."""
        self._year = year
        return self

    def month(self, month: Month | int) -> DateBuilder:
        """Set the month, keeping the day of month if one is held.

        Raises:
            InvalidMonthNumber: If month is a number outside 1-12.
            BuilderModeError: On a strict builder holding a day of year.
        """
        m = month if isinstance(month, Month) else Month.from_ordinal(month)
        selection = self._selection
        if isinstance(selection, _MonthDay):
            self._selection = _MonthDay(m, selection.day)
        else:
            self._leave_day_of_year("month")
            self._selection = _MonthDay(m, DEFAULT_BUILDER_DAY)
        return self

    def day(self, day: int) -> DateBuilder:
        """Set the day of month, keeping the month if one is held.

        Raises:
            BuilderModeError: On a strict builder holding a day of year.
        """
        selection = self._selection
        if isinstance(selection, _MonthDay):
            self._selection = _MonthDay(selection.month, day)
        else:
            self._leave_day_of_year("day")
            self._selection = _MonthDay(_DEFAULT_SELECTION.month, day)
        return self

    def day_of_year(self, day_of_year: int) -> DateBuilder:
        """Set the day of year, discarding any month and day of month."""
        if isinstance(self._selection, _MonthDay):
            logger.debug("DateBuilder switching to day-of-year mode")
        self._selection = _DayOfYear(day_of_year)
        return self

    def reset(self) -> DateBuilder:
        """Return the day selection to the default, January 1.

        The year is kept.
        """
        self._selection = _DEFAULT_SELECTION
        return self

    def build(self) -> Date:
        """Validate the accumulated values and return a Date.

        The builder is not modified, so build() may be called again.

        Raises:
            ValidationError: If the year is not an integer in range.
            InvalidDay: If the day does not exist in the month.
            InvalidDayOfYear: If the day of year is outside the year.
            InvalidDate: If the date is before 1582-10-15.
        """
        selection = self._selection
        if isinstance(selection, _DayOfYear):
            return Date.from_day_of_year(self._year, selection.ordinal)
        return Date(self._year, selection.month, selection.day)

    def _leave_day_of_year(self, setter: str) -> None:
        if self._strict:
            raise BuilderModeError(
                f"cannot set {setter} while a day of year is set on a "
                "strict builder; call reset() first"
            )
        logger.debug(
            "DateBuilder switching to month/day mode via %s(); "
            "day of year discarded",
            setter,
        )

    def __repr__(self) -> str:
        selection = self._selection
        if isinstance(selection, _DayOfYear):
            detail = f"day_of_year={selection.ordinal}"
        else:
            detail = f"month={selection.month.name}, day={selection.day}"
        return f"DateBuilder(year={self._year}, {detail})"


__all__ = ["BuilderMode", "DateBuilder"]
