"""Calendar units and enumerations.

This module provides:
    - Month: The twelve calendar months with 1-12 ordinals
"""

from __future__ import annotations

from gregoria.units.month import Month

__all__: list[str] = [
    "Month",
]
