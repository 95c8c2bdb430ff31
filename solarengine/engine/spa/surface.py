"""Incidence angle of the sun on a tilted surface."""

from __future__ import annotations

import math

from ...core.angles import clamp_unit

__all__ = ["surface_incidence_angle"]


def surface_incidence_angle(
    zenith: float, azimuth_astro: float, azm_rotation: float, slope: float
) -> float:
    """Return the angle between the sun and the surface normal, in degrees.

    ``slope`` is measured from the horizontal plane and ``azm_rotation``
    from south towards west (negative east), matching the astronomer
    azimuth convention of ``azimuth_astro``.
    """

    zenith_rad = math.radians(zenith)
    slope_rad = math.radians(slope)
    return math.degrees(
        math.acos(
            clamp_unit(
                math.cos(zenith_rad) * math.cos(slope_rad)
                + math.sin(slope_rad)
                * math.sin(zenith_rad)
                * math.cos(math.radians(azimuth_astro - azm_rotation))
            )
        )
    )
