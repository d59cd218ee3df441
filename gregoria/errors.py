"""Gregoria exception hierarchy.

All Gregoria-specific exceptions inherit from GregoriaError.
"""

from __future__ import annotations


class GregoriaError(Exception):
    """Base exception for all Gregoria errors."""

    pass


class ValidationError(GregoriaError):
    """Invalid input values.

    Raised when a calendar value is out of range or of the wrong type.
    The more specific subclasses below are raised wherever the failing
    component is known.

    Examples:
        - Year outside 0-65535
        - Non-integer day passed to a constructor
    """

    pass


class InvalidMonthNumber(ValidationError):
    """Integer outside 1-12 passed to month conversion."""

    pass


class InvalidDay(ValidationError):
    """Day of month outside the valid range for that month and year.

    Examples:
        - Day 0
        - February 29 in a non-leap year
        - April 31
    """

    pass


class InvalidDayOfYear(ValidationError):
    """Day of year outside [1, days in that year].

    Also raised when the decoder cannot place a day of year in any month,
    which only happens if a month table is internally inconsistent.
    """

    pass


class InvalidDate(ValidationError):
    """Structurally valid date earlier than the Gregorian cutover.

    Gregoria only models dates on or after 1582-10-15, the first day of
    the Gregorian calendar. Earlier dates have no representation.
    """

    pass


class BuilderModeError(GregoriaError):
    """Conflicting setter call on a strict DateBuilder.

    Raised when month or day is set on a strict builder that currently
    holds a day of year.
    """

    pass


__all__ = [
    "GregoriaError",
    "ValidationError",
    "InvalidMonthNumber",
    "InvalidDay",
    "InvalidDayOfYear",
    "InvalidDate",
    "BuilderModeError",
]
