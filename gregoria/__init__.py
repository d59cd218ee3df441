"""Gregoria: Gregorian calendar dates from the 1582 cutover onwards.

Gregoria validates and decomposes (year, month, day) triples, classifies
leap years, and converts between month/day and day-of-year forms. Dates
before 1582-10-15, the first day of the Gregorian calendar, are rejected.

Core Types:
    Date: Calendar date (year, month, day of month)
    DateBuilder: Chained construction from month/day or day of year
    Year: Calendar year with cached leap-ness

Units:
    Month: The twelve calendar months

Calendar Functions:
    is_leap_year: Gregorian leap year rule
    month_table: Month lengths and day-of-year bounds for a leap-ness

Exceptions:
    GregoriaError: Base exception
    ValidationError: Invalid input values
    InvalidMonthNumber: Month number outside 1-12
    InvalidDay: Day outside its month
    InvalidDayOfYear: Day of year outside its year
    InvalidDate: Date before 1582-10-15
    BuilderModeError: Strict builder mode conflict

Example:
    >>> from gregoria import Date, DateBuilder, Month
    >>> Date(2024, Month.FEBRUARY, 29).day_of_year
    60
    >>> DateBuilder().year(2023).day_of_year(256).build()
    Date(2023, 9, 13)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from gregoria.core.builder import BuilderMode, DateBuilder
from gregoria.core.date import Date
from gregoria.core.year import Year

# Units
from gregoria.units.month import Month

# Calendar functions
from gregoria._internal.calendar import MonthTable, is_leap_year, month_table
from gregoria._internal.constants import FIRST_DATE

# Exceptions
from gregoria.errors import (
    BuilderModeError,
    GregoriaError,
    InvalidDate,
    InvalidDay,
    InvalidDayOfYear,
    InvalidMonthNumber,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "BuilderMode",
    "Date",
    "DateBuilder",
    "Year",
    # Units
    "Month",
    # Calendar functions
    "MonthTable",
    "is_leap_year",
    "month_table",
    "FIRST_DATE",
    # Exceptions
    "GregoriaError",
    "ValidationError",
    "InvalidMonthNumber",
    "InvalidDay",
    "InvalidDayOfYear",
    "InvalidDate",
    "BuilderModeError",
]
