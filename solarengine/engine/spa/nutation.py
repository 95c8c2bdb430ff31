"""Nutation in longitude/obliquity and the obliquity of the ecliptic.

The five fundamental arguments are cubic polynomials in the Julian
ephemeris century.  Each of the 63 nutation rows combines them linearly
with integer multipliers; the resulting angle drives a sine series for
the nutation in longitude and a cosine series for the nutation in
obliquity.  The mean obliquity uses the tenth-degree polynomial of
Laskar in units of ten Julian millennia and is returned in arc seconds.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .tables import NUTATION_ARGUMENT_TERMS, NUTATION_COEFFICIENTS

__all__ = [
    "Nutation",
    "argument_latitude_moon",
    "ascending_longitude_moon",
    "ecliptic_mean_obliquity",
    "ecliptic_true_obliquity",
    "fundamental_arguments",
    "mean_anomaly_moon",
    "mean_anomaly_sun",
    "mean_elongation_moon_sun",
    "nutation",
    "nutation_longitude_and_obliquity",
    "third_order_polynomial",
]

_NUTATION_SCALE = 36_000_000.0
_OBLIQUITY_COEFFICIENTS = (
    84381.448,
    -4680.93,
    -1.55,
    1999.25,
    -51.38,
    -249.67,
    -39.05,
    7.12,
    27.87,
    5.79,
    2.45,
)


@dataclass(frozen=True)
class Nutation:
    """Fundamental arguments, nutation terms and ecliptic obliquity."""

    x0: float  # mean elongation moon-sun [deg]
    x1: float  # mean anomaly sun [deg]
    x2: float  # mean anomaly moon [deg]
    x3: float  # argument of latitude moon [deg]
    x4: float  # ascending node longitude moon [deg]
    del_psi: float  # nutation in longitude [deg]
    del_epsilon: float  # nutation in obliquity [deg]
    epsilon0: float  # mean obliquity [arcsec]
    epsilon: float  # true obliquity [deg]


def third_order_polynomial(a: float, b: float, c: float, d: float, x: float) -> float:
    return ((a * x + b) * x + c) * x + d


def mean_elongation_moon_sun(jce: float) -> float:
    return third_order_polynomial(1.0 / 189474.0, -0.0019142, 445267.11148, 297.85036, jce)


def mean_anomaly_sun(jce: float) -> float:
    return third_order_polynomial(-1.0 / 300000.0, -0.0001603, 35999.05034, 357.52772, jce)


def mean_anomaly_moon(jce: float) -> float:
    return third_order_polynomial(1.0 / 56250.0, 0.0086972, 477198.867398, 134.96298, jce)


def argument_latitude_moon(jce: float) -> float:
    return third_order_polynomial(1.0 / 327270.0, -0.0036825, 483202.017538, 93.27191, jce)


def ascending_longitude_moon(jce: float) -> float:
    return third_order_polynomial(1.0 / 450000.0, 0.0020708, -1934.136261, 125.04452, jce)


def fundamental_arguments(jce: float) -> tuple[float, float, float, float, float]:
    return (
        mean_elongation_moon_sun(jce),
        mean_anomaly_sun(jce),
        mean_anomaly_moon(jce),
        argument_latitude_moon(jce),
        ascending_longitude_moon(jce),
    )


def nutation_longitude_and_obliquity(
    jce: float, arguments: Sequence[float]
) -> tuple[float, float]:
    """Return ``(del_psi, del_epsilon)`` in degrees."""

    sum_psi = 0.0
    sum_epsilon = 0.0
    for multipliers, (a, b, c, d) in zip(NUTATION_ARGUMENT_TERMS, NUTATION_COEFFICIENTS):
        angle = math.radians(sum(x * y for x, y in zip(arguments, multipliers)))
        sum_psi += (a + jce * b) * math.sin(angle)
        sum_epsilon += (c + jce * d) * math.cos(angle)
    return sum_psi / _NUTATION_SCALE, sum_epsilon / _NUTATION_SCALE


def ecliptic_mean_obliquity(jme: float) -> float:
    """Return the mean obliquity of the ecliptic in arc seconds."""

    u = jme / 10.0
    total = 0.0
    for coefficient in reversed(_OBLIQUITY_COEFFICIENTS):
        total = total * u + coefficient
    return total


def ecliptic_true_obliquity(delta_epsilon: float, epsilon0: float) -> float:
    return delta_epsilon + epsilon0 / 3600.0


def nutation(jce: float, jme: float) -> Nutation:
    """Evaluate the nutation and obliquity stage."""

    x = fundamental_arguments(jce)
    del_psi, del_epsilon = nutation_longitude_and_obliquity(jce, x)
    epsilon0 = ecliptic_mean_obliquity(jme)
    return Nutation(
        x0=x[0],
        x1=x[1],
        x2=x[2],
        x3=x[3],
        x4=x[4],
        del_psi=del_psi,
        del_epsilon=del_epsilon,
        epsilon0=epsilon0,
        epsilon=ecliptic_true_obliquity(del_epsilon, epsilon0),
    )
