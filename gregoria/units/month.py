"""Month enumeration.

This module provides the Month enum for the twelve months of the
Gregorian calendar, with cyclic navigation and a bijective mapping
to the integers 1-12.
"""

from __future__ import annotations

import functools
from enum import Enum

from gregoria.errors import InvalidMonthNumber


@functools.total_ordering
class Month(Enum):
    """Calendar month.

    Each member's value is its ordinal (January = 1, December = 12).
    Months are ordered by ordinal, and ``next``/``prev`` wrap around
    the year boundary.

    Examples:
        >>> Month.OCTOBER.ordinal
        10

        >>> Month.from_ordinal(2)
        <Month.FEBRUARY: 2>

        >>> Month.DECEMBER.next()
        <Month.JANUARY: 1>

        >>> Month.MARCH < Month.APRIL
        True
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_ordinal(cls, n: int) -> Month:
        """Return the month with ordinal ``n``.

        Args:
            n: The month number (1-12).

        Returns:
            The corresponding Month.

        Raises:
            InvalidMonthNumber: If n is not an integer in 1-12.

        Examples:
            >>> Month.from_ordinal(12)
            <Month.DECEMBER: 12>

            >>> Month.from_ordinal(13)
            Traceback (most recent call last):
            ...
            InvalidMonthNumber: month must be between 1 and 12, got 13
        """
        # bool is an int subclass; Month(True) would silently be January
        if not isinstance(n, int) or isinstance(n, bool):
            raise InvalidMonthNumber(
                f"month must be an integer, got {type(n).__name__}"
            )
        try:
            return cls(n)
        except ValueError:
            raise InvalidMonthNumber(
                f"month must be between 1 and 12, got {n}"
            ) from None

    @property
    def ordinal(self) -> int:
        """Return the month number (1-12)."""
        return self.value

    def next(self) -> Month:
        """Return the following month, wrapping December to January.

        Examples:
            >>> Month.JANUARY.next()
            <Month.FEBRUARY: 2>
        """
        return Month(self.value % 12 + 1)

    def prev(self) -> Month:
        """Return the preceding month, wrapping January to December.

        Examples:
            >>> Month.JANUARY.prev()
            <Month.DECEMBER: 12>
        """
        return Month((self.value - 2) % 12 + 1)

    def __int__(self) -> int:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.value < other.value


__all__ = ["Month"]
