"""Apparent geocentric sun coordinates and Greenwich sidereal time."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ...core.angles import clamp_unit, normalize_degrees
from ...core.time import JD_J2000, TimeScales, time_scales
from .earth import EarthPosition, earth_position
from .nutation import Nutation, nutation

__all__ = [
    "GeocentricChain",
    "GeocentricSun",
    "aberration_correction",
    "apparent_sun_longitude",
    "geocentric_chain",
    "geocentric_declination",
    "geocentric_right_ascension",
    "geocentric_sun",
    "greenwich_mean_sidereal_time",
    "greenwich_sidereal_time",
]


@dataclass(frozen=True)
class GeocentricSun:
    """Aberration-corrected apparent sun position seen from Earth's centre."""

    del_tau: float  # aberration correction [deg]
    lamda: float  # apparent sun longitude [deg]
    nu0: float  # Greenwich mean sidereal time [deg]
    nu: float  # Greenwich apparent sidereal time [deg]
    alpha: float  # geocentric right ascension [deg]
    delta: float  # geocentric declination [deg]


@dataclass(frozen=True)
class GeocentricChain:
    """Every stage needed to locate the sun from Earth's centre at one instant."""

    time: TimeScales
    earth: EarthPosition
    nutation: Nutation
    sun: GeocentricSun


def aberration_correction(r: float) -> float:
    return -20.4898 / (3600.0 * r)


def apparent_sun_longitude(theta: float, delta_psi: float, delta_tau: float) -> float:
    return theta + delta_psi + delta_tau


def greenwich_mean_sidereal_time(jd: float, jc: float) -> float:
    return normalize_degrees(
        280.46061837
        + 360.98564736629 * (jd - JD_J2000)
        + jc * jc * (0.000387933 - jc / 38710000.0)
    )


def greenwich_sidereal_time(nu0: float, delta_psi: float, epsilon: float) -> float:
    return nu0 + delta_psi * math.cos(math.radians(epsilon))


def geocentric_right_ascension(lamda: float, epsilon: float, beta: float) -> float:
    lamda_rad = math.radians(lamda)
    epsilon_rad = math.radians(epsilon)
    return normalize_degrees(
        math.degrees(
            math.atan2(
                math.sin(lamda_rad) * math.cos(epsilon_rad)
                - math.tan(math.radians(beta)) * math.sin(epsilon_rad),
                math.cos(lamda_rad),
            )
        )
    )


def geocentric_declination(beta: float, epsilon: float, lamda: float) -> float:
    beta_rad = math.radians(beta)
    epsilon_rad = math.radians(epsilon)
    return math.degrees(
        math.asin(
            clamp_unit(
                math.sin(beta_rad) * math.cos(epsilon_rad)
                + math.cos(beta_rad) * math.sin(epsilon_rad) * math.sin(math.radians(lamda))
            )
        )
    )


def geocentric_sun(time: TimeScales, earth: EarthPosition, nut: Nutation) -> GeocentricSun:
    """Apply aberration and nutation, then convert to equatorial coordinates."""

    del_tau = aberration_correction(earth.r)
    lamda = apparent_sun_longitude(earth.theta, nut.del_psi, del_tau)
    nu0 = greenwich_mean_sidereal_time(time.jd, time.jc)
    return GeocentricSun(
        del_tau=del_tau,
        lamda=lamda,
        nu0=nu0,
        nu=greenwich_sidereal_time(nu0, nut.del_psi, nut.epsilon),
        alpha=geocentric_right_ascension(lamda, nut.epsilon, earth.beta),
        delta=geocentric_declination(earth.beta, nut.epsilon, lamda),
    )


def geocentric_chain(jd: float, delta_t: float) -> GeocentricChain:
    """Run the time, Earth, nutation and geocentric stages for ``jd``."""

    time = time_scales(jd, delta_t)
    earth = earth_position(time.jme)
    nut = nutation(time.jce, time.jme)
    return GeocentricChain(time=time, earth=earth, nutation=nut, sun=geocentric_sun(time, earth, nut))
