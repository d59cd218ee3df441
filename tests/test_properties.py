"""Hypothesis property-based tests for the calendar engine.

Tests invariants that must hold across all valid years, months and
days of year.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gregoria import Date, DateBuilder, Month, Year, is_leap_year
from gregoria.errors import InvalidDate, InvalidDayOfYear

years = st.integers(min_value=0, max_value=65535)
gregorian_years = st.integers(min_value=1583, max_value=65535)
months = st.sampled_from(list(Month))


class TestLeapProperties:
    """Properties of the leap year rule and year lengths."""

    @given(year=years)
    def test_leap_rule(self, year: int) -> None:
        """is_leap_year matches the divisibility rule."""
        expected = year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
        assert is_leap_year(year) is expected
        assert Year(year).is_leap is expected

    @given(year=years)
    def test_total_days(self, year: int) -> None:
        """A year has 366 days iff it is a leap year."""
        y = Year(year)
        assert y.total_days == (366 if y.is_leap else 365)

    @given(year=years)
    def test_month_days_sum_to_total(self, year: int) -> None:
        """Month lengths add up to the year length."""
        y = Year(year)
        assert sum(y.month_days(m) for m in Month) == y.total_days

    @given(year=years)
    def test_february(self, year: int) -> None:
        """February has 29 days iff the year is leap."""
        y = Year(year)
        assert (y.month_days(Month.FEBRUARY) == 29) is y.is_leap


class TestDayOfYearProperties:
    """Properties of day-of-year encoding and decoding."""

    @given(year=years, month=months, data=st.data())
    def test_round_trip(self, year: int, month: Month, data: st.DataObject) -> None:
        """Decoding an encoded (month, day) gives back the same pair."""
        y = Year(year)
        day = data.draw(st.integers(min_value=1, max_value=y.month_days(month)))
        encoded = y.first_of_month(month) + day - 1
        assert y.day_of_year(month, day) == encoded
        assert y.decode_day_of_year(encoded) == (month, day)

    @given(year=years)
    def test_boundaries(self, year: int) -> None:
        """The first and last days decode; the days around them do not."""
        y = Year(year)
        assert y.decode_day_of_year(1) == (Month.JANUARY, 1)
        assert y.decode_day_of_year(y.total_days) == (Month.DECEMBER, 31)
        with pytest.raises(InvalidDayOfYear):
            y.decode_day_of_year(0)
        with pytest.raises(InvalidDayOfYear):
            y.decode_day_of_year(y.total_days + 1)

    @given(year=gregorian_years, data=st.data())
    def test_date_paths_agree(self, year: int, data: st.DataObject) -> None:
        """from_day_of_year and the direct constructor agree."""
        y = Year(year)
        doy = data.draw(st.integers(min_value=1, max_value=y.total_days))
        decoded = Date.from_day_of_year(year, doy)
        direct = Date(year, decoded.month, decoded.day_of_month)
        assert decoded == direct
        assert direct.day_of_year == doy


class TestCutoverProperties:
    """Properties of the 1582-10-15 lower bound."""

    @given(year=st.integers(min_value=0, max_value=1581), month=months)
    def test_years_before_1582_rejected(self, year: int, month: Month) -> None:
        """Every valid day before 1582 raises InvalidDate."""
        with pytest.raises(InvalidDate):
            Date(year, month, 1)

    @given(year=gregorian_years, month=months)
    def test_years_after_1582_accepted(self, year: int, month: Month) -> None:
        """Every year after 1582 is entirely representable."""
        assert Date(year, month, 1) >= Date.MIN


class TestBuilderProperties:
    """Properties of DateBuilder."""

    @given(year=gregorian_years, month=months, data=st.data())
    def test_builder_matches_constructor(
        self, year: int, month: Month, data: st.DataObject
    ) -> None:
        """Month/day mode builds the same date as the constructor."""
        day = data.draw(st.integers(min_value=1, max_value=Year(year).month_days(month)))
        built = DateBuilder().year(year).month(month).day(day).build()
        assert built == Date(year, month, day)

    @given(year=gregorian_years, month=months, doy=st.integers(min_value=1, max_value=365))
    def test_day_of_year_discards_month(self, year: int, month: Month, doy: int) -> None:
        """Setting a day of year ignores an earlier month."""
        built = DateBuilder().year(year).month(month).day_of_year(doy).build()
        assert built == Date.from_day_of_year(year, doy)

    @given(year=gregorian_years, month=months, doy=st.integers(min_value=1, max_value=365))
    def test_month_after_day_of_year_resets_day(
        self, year: int, month: Month, doy: int
    ) -> None:
        """Setting a month after a day of year gives the first of that month."""
        built = DateBuilder().year(year).day_of_year(doy).month(month).build()
        assert built == Date(year, month, 1)
