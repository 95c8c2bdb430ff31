"""Angular utilities shared across the solar position stages.

Every intermediate angle produced by the algorithm is wrapped into a
documented range before the next stage consumes it.  Doing so with raw
modulo arithmetic invites subtle bugs around the 0°/360° boundary, so
the helpers in this module centralise the wrapping rules together with
the day-fraction and equation-of-time variants used by the rise, transit
and set solver.
"""

from __future__ import annotations

import math
from typing import Final

__all__ = [
    "clamp_unit",
    "normalize_degrees",
    "normalize_fraction",
    "normalize_half_turn",
    "normalize_signed",
    "wrap_minutes",
]


EPSILON_DEG: Final[float] = 1e-9
MINUTES_PER_DAY: Final[float] = 1440.0


def normalize_degrees(angle: float) -> float:
    """Return ``angle`` normalised to the ``[0, 360)`` interval.

    Parameters
    ----------
    angle:
        Value in **degrees**. Inputs outside the canonical range are
        wrapped by multiples of 360°.

    Returns
    -------
    float
        A degree value in ``[0, 360)``. Values within ``1e-9`` of
        ``360`` are coerced to ``0`` so azimuths and right ascensions
        never report a full turn.
    """

    wrapped = float(angle) % 360.0
    if wrapped >= 360.0 - EPSILON_DEG:
        wrapped = 0.0
    return wrapped if wrapped >= 0.0 else wrapped + 360.0


def normalize_signed(angle: float) -> float:
    """Return ``angle`` wrapped to the ``(-180, 180]`` interval."""

    wrapped = normalize_degrees(angle)
    if wrapped > 180.0:
        return wrapped - 360.0
    return wrapped


def normalize_half_turn(angle: float) -> float:
    """Return ``angle`` wrapped to the ``[0, 180)`` interval."""

    wrapped = float(angle) % 180.0
    if wrapped >= 180.0 - EPSILON_DEG:
        wrapped = 0.0
    return wrapped if wrapped >= 0.0 else wrapped + 180.0


def normalize_fraction(value: float) -> float:
    """Return the fractional part of ``value`` in ``[0, 1)``."""

    limited = float(value) - math.floor(value)
    if limited >= 1.0:
        limited = 0.0
    return limited if limited >= 0.0 else limited + 1.0


def wrap_minutes(minutes: float) -> float:
    """Fold a daily-periodic quantity in minutes into ``[-20, 20]``.

    Values beyond twenty minutes either side are shifted by one day
    (1440 minutes); the equation of time never legitimately exceeds that
    bound.
    """

    if minutes < -20.0:
        return minutes + MINUTES_PER_DAY
    if minutes > 20.0:
        return minutes - MINUTES_PER_DAY
    return minutes


def clamp_unit(value: float) -> float:
    """Clamp ``value`` into ``[-1, 1]`` before feeding ``asin``/``acos``."""

    return max(-1.0, min(1.0, value))
