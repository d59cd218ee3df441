"""Internal utilities for Gregoria.

This module contains private implementation details:
    - Constants and calendar limits
    - Leap year rule and month tables
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from gregoria._internal.calendar import (
    MonthTable,
    decode_day_of_year,
    is_leap_year,
    month_table,
)
from gregoria._internal.validation import (
    require_int,
    validate_day,
    validate_day_of_year,
    validate_not_before_cutover,
    validate_year,
)

__all__: list[str] = [
    "MonthTable",
    "decode_day_of_year",
    "is_leap_year",
    "month_table",
    "require_int",
    "validate_day",
    "validate_day_of_year",
    "validate_not_before_cutover",
    "validate_year",
]
