"""Validation utilities for Gregoria.

This module provides the checks that stand between raw constructor
arguments and a live Year or Date. Each check raises the most specific
exception available for the failing component.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gregoria._internal.constants import FIRST_DATE, MAX_YEAR, MIN_YEAR
from gregoria.errors import (
    InvalidDate,
    InvalidDay,
    InvalidDayOfYear,
    ValidationError,
)

if TYPE_CHECKING:
    from gregoria._internal.calendar import MonthTable
    from gregoria.units.month import Month

logger = logging.getLogger(__name__)


def require_int(name: str, value: object) -> int:
    """Return ``value`` if it is a plain integer.

    Raises:
        ValidationError: If value is not an int, or is a bool.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return value


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is not an integer in MIN_YEAR to MAX_YEAR.
    """
    require_int("year", year)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_day(
    table: MonthTable, month: Month, day: int, year: int | None = None
) -> None:
    """Validate that a day exists in the given month.

    Args:
        table: The month table for the year's leap-ness.
        month: The month.
        day: The day to validate.
        year: The year, if known, for the error message.

    Raises:
        ValidationError: If day is not an integer.
        InvalidDay: If day is invalid for the month.
    """
    require_int("day", day)
    max_day = table.month_days(month)
    if day < 1 or day > max_day:
        where = (
            month.name.title() if year is None else f"{year}-{month.value:02d}"
        )
        logger.debug("Rejected day %d for %s", day, where)
        raise InvalidDay(
            f"day must be between 1 and {max_day} for {where}, got {day}"
        )


def validate_day_of_year(
    table: MonthTable, day_of_year: int, year: int | None = None
) -> None:
    """Validate that a day of year falls inside the year.

    Raises:
        ValidationError: If day_of_year is not an integer.
        InvalidDayOfYear: If day_of_year is outside 1 to total_days.
    """
    require_int("day_of_year", day_of_year)
    if day_of_year < 1 or day_of_year > table.total_days:
        where = "" if year is None else f" for {year}"
        logger.debug("Rejected day of year %d%s", day_of_year, where)
        raise InvalidDayOfYear(
            f"day of year must be between 1 and {table.total_days}"
            f"{where}, got {day_of_year}"
        )


def validate_not_before_cutover(year: int, month: int, day: int) -> None:
    """Validate that a date is on or after the Gregorian cutover.

    The comparison is lexicographic on (year, month, day).

    Raises:
        InvalidDate: If the date is earlier than FIRST_DATE.
    """
    if (year, month, day) < FIRST_DATE:
        logger.debug("Rejected pre-Gregorian date %d-%02d-%02d", year, month, day)
        first_year, first_month, first_day = FIRST_DATE
        raise InvalidDate(
            f"date must be on or after "
            f"{first_year}-{first_month:02d}-{first_day:02d}, "
            f"got {year}-{month:02d}-{day:02d}"
        )


__all__ = [
    "require_int",
    "validate_year",
    "validate_day",
    "validate_day_of_year",
    "validate_not_before_cutover",
]
