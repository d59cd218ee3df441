"""Core calendar types.

This module provides the fundamental calendar types:
    - Year: Calendar year with its cached leap-ness
    - Date: Gregorian calendar date on or after 1582-10-15
    - DateBuilder: Step-by-step Date construction
"""

from __future__ import annotations

from gregoria.core.builder import BuilderMode, DateBuilder
from gregoria.core.date import Date
from gregoria.core.year import Year

__all__: list[str] = [
    "BuilderMode",
    "Date",
    "DateBuilder",
    "Year",
]
