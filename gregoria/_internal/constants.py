"""Internal constants for Gregoria.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Year limits (an unsigned 16-bit calendar year)
MIN_YEAR: int = 0
MAX_YEAR: int = 65535

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

FEBRUARY_LEAP_DAYS: int = 29

# First day of the Gregorian calendar, as (year, month, day)
FIRST_DATE: tuple[int, int, int] = (1582, 10, 15)

# DateBuilder defaults
DEFAULT_BUILDER_YEAR: int = 2000
DEFAULT_BUILDER_MONTH: int = 1
DEFAULT_BUILDER_DAY: int = 1


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "FEBRUARY_LEAP_DAYS",
    "FIRST_DATE",
    "DEFAULT_BUILDER_YEAR",
    "DEFAULT_BUILDER_MONTH",
    "DEFAULT_BUILDER_DAY",
]
