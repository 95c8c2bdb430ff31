"""Topocentric sun coordinates and refraction utilities.

Starting from the apparent geocentric position, the observer's offset
from Earth's centre is removed with an oblate-Earth parallax correction,
then the standard altitude formula yields the geometric elevation.  The
refraction term is only applied while the sun's upper limb can still be
above the apparent horizon.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ...core.angles import clamp_unit, normalize_degrees
from .geocentric import GeocentricSun

__all__ = [
    "EARTH_FLATTENING_FACTOR",
    "EARTH_RADIUS_M",
    "SUN_RADIUS_DEG",
    "TopocentricSun",
    "atmospheric_refraction_correction",
    "observer_hour_angle",
    "right_ascension_parallax_and_topocentric_dec",
    "sun_equatorial_horizontal_parallax",
    "topocentric_azimuth_angle",
    "topocentric_azimuth_angle_astro",
    "topocentric_elevation_angle",
    "topocentric_local_hour_angle",
    "topocentric_right_ascension",
    "topocentric_sun",
    "topocentric_zenith_angle",
]

SUN_RADIUS_DEG = 0.26667
EARTH_FLATTENING_FACTOR = 0.99664719
EARTH_RADIUS_M = 6_378_140.0


@dataclass(frozen=True)
class TopocentricSun:
    """Sun position as seen by the observer, with refraction applied."""

    h: float  # observer hour angle [deg]
    xi: float  # equatorial horizontal parallax [deg]
    del_alpha: float  # right ascension parallax [deg]
    delta_prime: float  # topocentric declination [deg]
    alpha_prime: float  # topocentric right ascension [deg]
    h_prime: float  # topocentric local hour angle [deg]
    e0: float  # elevation without refraction [deg]
    del_e: float  # refraction correction [deg]
    e: float  # elevation with refraction [deg]
    zenith: float  # [deg]
    azimuth_astro: float  # westward from south [deg]
    azimuth: float  # eastward from north [deg]


def observer_hour_angle(nu: float, longitude: float, alpha_deg: float) -> float:
    return normalize_degrees(nu + longitude - alpha_deg)


def sun_equatorial_horizontal_parallax(r: float) -> float:
    return 8.794 / (3600.0 * r)


def right_ascension_parallax_and_topocentric_dec(
    latitude: float, elevation: float, xi: float, h: float, delta: float
) -> tuple[float, float]:
    """Return ``(del_alpha, delta_prime)`` in degrees."""

    lat_rad = math.radians(latitude)
    xi_rad = math.radians(xi)
    h_rad = math.radians(h)
    delta_rad = math.radians(delta)
    u = math.atan(EARTH_FLATTENING_FACTOR * math.tan(lat_rad))
    y = EARTH_FLATTENING_FACTOR * math.sin(u) + elevation * math.sin(lat_rad) / EARTH_RADIUS_M
    x = math.cos(u) + elevation * math.cos(lat_rad) / EARTH_RADIUS_M

    denominator = math.cos(delta_rad) - x * math.sin(xi_rad) * math.cos(h_rad)
    delta_alpha_rad = math.atan2(-x * math.sin(xi_rad) * math.sin(h_rad), denominator)
    delta_prime = math.degrees(
        math.atan2(
            (math.sin(delta_rad) - y * math.sin(xi_rad)) * math.cos(delta_alpha_rad),
            denominator,
        )
    )
    return math.degrees(delta_alpha_rad), delta_prime


def topocentric_right_ascension(alpha_deg: float, delta_alpha: float) -> float:
    return alpha_deg + delta_alpha


def topocentric_local_hour_angle(h: float, delta_alpha: float) -> float:
    return h - delta_alpha


def topocentric_elevation_angle(latitude: float, delta_prime: float, h_prime: float) -> float:
    lat_rad = math.radians(latitude)
    delta_prime_rad = math.radians(delta_prime)
    return math.degrees(
        math.asin(
            clamp_unit(
                math.sin(lat_rad) * math.sin(delta_prime_rad)
                + math.cos(lat_rad) * math.cos(delta_prime_rad) * math.cos(math.radians(h_prime))
            )
        )
    )


def atmospheric_refraction_correction(
    pressure: float, temperature: float, atmos_refract: float, e0: float
) -> float:
    """Return the refraction correction in degrees for geometric elevation ``e0``.

    Zero once the sun has sunk below the refracted horizon, or below the
    -5.11 degree pole of the refraction formula.
    """

    if e0 < -1 * (SUN_RADIUS_DEG + atmos_refract) or e0 + 5.11 <= 0.0:
        return 0.0
    return (
        (pressure / 1010.0)
        * (283.0 / (273.0 + temperature))
        * 1.02
        / (60.0 * math.tan(math.radians(e0 + 10.3 / (e0 + 5.11))))
    )


def topocentric_zenith_angle(e: float) -> float:
    return 90.0 - e


def topocentric_azimuth_angle_astro(h_prime: float, latitude: float, delta_prime: float) -> float:
    h_prime_rad = math.radians(h_prime)
    lat_rad = math.radians(latitude)
    return normalize_degrees(
        math.degrees(
            math.atan2(
                math.sin(h_prime_rad),
                math.cos(h_prime_rad) * math.sin(lat_rad)
                - math.tan(math.radians(delta_prime)) * math.cos(lat_rad),
            )
        )
    )


def topocentric_azimuth_angle(azimuth_astro: float) -> float:
    return normalize_degrees(azimuth_astro + 180.0)


def topocentric_sun(
    sun: GeocentricSun,
    r: float,
    *,
    latitude: float,
    longitude: float,
    elevation: float,
    pressure: float,
    temperature: float,
    atmos_refract: float,
) -> TopocentricSun:
    """Correct the geocentric position ``sun`` (at distance ``r`` AU) for the observer."""

    h = observer_hour_angle(sun.nu, longitude, sun.alpha)
    xi = sun_equatorial_horizontal_parallax(r)
    del_alpha, delta_prime = right_ascension_parallax_and_topocentric_dec(
        latitude, elevation, xi, h, sun.delta
    )
    h_prime = topocentric_local_hour_angle(h, del_alpha)
    e0 = topocentric_elevation_angle(latitude, delta_prime, h_prime)
    del_e = atmospheric_refraction_correction(pressure, temperature, atmos_refract, e0)
    e = e0 + del_e
    azimuth_astro = topocentric_azimuth_angle_astro(h_prime, latitude, delta_prime)
    return TopocentricSun(
        h=h,
        xi=xi,
        del_alpha=del_alpha,
        delta_prime=delta_prime,
        alpha_prime=topocentric_right_ascension(sun.alpha, del_alpha),
        h_prime=h_prime,
        e0=e0,
        del_e=del_e,
        e=e,
        zenith=topocentric_zenith_angle(e),
        azimuth_astro=azimuth_astro,
        azimuth=topocentric_azimuth_angle(azimuth_astro),
    )
