"""Tests for the Month enum."""

from __future__ import annotations

import pytest

from gregoria.errors import InvalidMonthNumber, ValidationError
from gregoria.units.month import Month


class TestMonthOrdinal:
    """Tests for Month ordinals and integer conversion."""

    def test_ordinals_run_one_to_twelve(self) -> None:
        """Months are numbered 1-12 in calendar order."""
        assert [m.ordinal for m in Month] == list(range(1, 13))

    def test_int_conversion(self) -> None:
        """int() of a Month is its ordinal."""
        assert int(Month.OCTOBER) == 10

    def test_from_ordinal_round_trip(self) -> None:
        """from_ordinal inverts ordinal for every month."""
        for month in Month:
            assert Month.from_ordinal(month.ordinal) is month

    def test_from_ordinal_zero(self) -> None:
        """Month 0 raises InvalidMonthNumber."""
        with pytest.raises(InvalidMonthNumber, match="between 1 and 12, got 0"):
            Month.from_ordinal(0)

    def test_from_ordinal_thirteen(self) -> None:
        """Month 13 raises InvalidMonthNumber."""
        with pytest.raises(InvalidMonthNumber, match="between 1 and 12, got 13"):
            Month.from_ordinal(13)

    def test_from_ordinal_negative(self) -> None:
        """Negative months raise InvalidMonthNumber."""
        with pytest.raises(InvalidMonthNumber):
            Month.from_ordinal(-1)

    def test_from_ordinal_rejects_bool(self) -> None:
        """True is not accepted as January."""
        with pytest.raises(InvalidMonthNumber, match="must be an integer"):
            Month.from_ordinal(True)

    def test_from_ordinal_rejects_string(self) -> None:
        """Strings are not month numbers."""
        with pytest.raises(InvalidMonthNumber, match="got str"):
            Month.from_ordinal("3")  # type: ignore[arg-type]

    def test_invalid_month_is_validation_error(self) -> None:
        """InvalidMonthNumber can be caught as ValidationError."""
        with pytest.raises(ValidationError):
            Month.from_ordinal(99)


class TestMonthNavigation:
    """Tests for Month.next() and Month.prev()."""

    def test_next(self) -> None:
        """next() moves forward one month."""
        assert Month.JANUARY.next() is Month.FEBRUARY
        assert Month.NOVEMBER.next() is Month.DECEMBER

    def test_next_wraps_december(self) -> None:
        """December is followed by January."""
        assert Month.DECEMBER.next() is Month.JANUARY

    def test_prev(self) -> None:
        """prev() moves back one month."""
        assert Month.MARCH.prev() is Month.FEBRUARY
        assert Month.DECEMBER.prev() is Month.NOVEMBER

    def test_prev_wraps_january(self) -> None:
        """January is preceded by December."""
        assert Month.JANUARY.prev() is Month.DECEMBER

    def test_next_and_prev_are_inverse(self) -> None:
        """prev() undoes next() for every month."""
        for month in Month:
            assert month.next().prev() is month
            assert month.prev().next() is month

    def test_twelve_steps_is_identity(self) -> None:
        """Twelve next() calls return to the starting month."""
        month = Month.JUNE
        for _ in range(12):
            month = month.next()
        assert month is Month.JUNE


class TestMonthOrdering:
    """Tests for Month comparison."""

    def test_less_than(self) -> None:
        """Months compare by ordinal."""
        assert Month.JANUARY < Month.FEBRUARY
        assert not Month.DECEMBER < Month.JANUARY

    def test_derived_comparisons(self) -> None:
        """<=, > and >= follow the ordinal order."""
        assert Month.MAY <= Month.MAY
        assert Month.MAY <= Month.JUNE
        assert Month.DECEMBER > Month.NOVEMBER
        assert Month.APRIL >= Month.APRIL

    def test_sorted(self) -> None:
        """Sorting months gives calendar order."""
        shuffled = [Month.MARCH, Month.JANUARY, Month.DECEMBER, Month.JULY]
        assert sorted(shuffled) == [
            Month.JANUARY,
            Month.MARCH,
            Month.JULY,
            Month.DECEMBER,
        ]

    def test_compare_with_int_raises(self) -> None:
        """Months are not ordered against plain integers."""
        with pytest.raises(TypeError):
            Month.MARCH < 4  # noqa: B015
