"""Core runtime components for SolarEngine."""

from __future__ import annotations

from .angles import (
    normalize_degrees,
    normalize_fraction,
    normalize_half_turn,
    normalize_signed,
    wrap_minutes,
)
from .time import TimeScales, calendar_fields, ensure_utc, julian_day, time_scales

__all__ = [
    "TimeScales",
    "calendar_fields",
    "ensure_utc",
    "julian_day",
    "normalize_degrees",
    "normalize_fraction",
    "normalize_half_turn",
    "normalize_signed",
    "time_scales",
    "wrap_minutes",
]
