"""Pytest configuration and fixtures for Gregoria tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so gregoria can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from gregoria.units.month import Month  # noqa: E402

# Reference month lengths, (month, common, leap)
MONTH_LENGTHS: list[tuple[Month, int, int]] = [
    (Month.JANUARY, 31, 31),
    (Month.FEBRUARY, 28, 29),
    (Month.MARCH, 31, 31),
    (Month.APRIL, 30, 30),
    (Month.MAY, 31, 31),
    (Month.JUNE, 30, 30),
    (Month.JULY, 31, 31),
    (Month.AUGUST, 31, 31),
    (Month.SEPTEMBER, 30, 30),
    (Month.OCTOBER, 31, 31),
    (Month.NOVEMBER, 30, 30),
    (Month.DECEMBER, 31, 31),
]


@pytest.fixture
def month_lengths() -> list[tuple[Month, int, int]]:
    """Reference table of (month, common year days, leap year days)."""
    return MONTH_LENGTHS
