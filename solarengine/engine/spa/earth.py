"""Earth heliocentric position and the derived geocentric sun coordinates."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from ...core.angles import normalize_degrees
from .tables import B_TERMS, L_TERMS, R_TERMS, Series, Term

__all__ = [
    "EarthPosition",
    "earth_heliocentric_latitude",
    "earth_heliocentric_longitude",
    "earth_position",
    "earth_radius_vector",
    "earth_values",
    "geocentric_latitude",
    "geocentric_longitude",
    "periodic_term_sum",
]


@dataclass(frozen=True)
class EarthPosition:
    """Heliocentric Earth position and the opposite geocentric sun direction."""

    l: float  # heliocentric longitude [deg]
    b: float  # heliocentric latitude [deg]
    r: float  # radius vector [AU]
    theta: float  # geocentric longitude [deg]
    beta: float  # geocentric latitude [deg]


def periodic_term_sum(terms: Sequence[Term], jme: float) -> float:
    """Return ``Σ A·cos(B + C·jme)`` over one sub-series."""

    return sum(a * math.cos(b + c * jme) for a, b, c in terms)


def earth_values(term_sums: Sequence[float], jme: float) -> float:
    """Combine sub-series sums as a power series in ``jme`` scaled by 1e-8."""

    total = 0.0
    for power, term_sum in enumerate(term_sums):
        total += term_sum * jme**power
    return total / 1.0e8


def _series_value(series: Series, jme: float) -> float:
    return earth_values([periodic_term_sum(terms, jme) for terms in series], jme)


def earth_heliocentric_longitude(jme: float) -> float:
    return normalize_degrees(math.degrees(_series_value(L_TERMS, jme)))


def earth_heliocentric_latitude(jme: float) -> float:
    return math.degrees(_series_value(B_TERMS, jme))


def earth_radius_vector(jme: float) -> float:
    return _series_value(R_TERMS, jme)


def geocentric_longitude(l: float) -> float:
    return normalize_degrees(l + 180.0)


def geocentric_latitude(b: float) -> float:
    return -b


def earth_position(jme: float) -> EarthPosition:
    """Evaluate the Earth tables at Julian ephemeris millennium ``jme``."""

    l = earth_heliocentric_longitude(jme)
    b = earth_heliocentric_latitude(jme)
    return EarthPosition(
        l=l,
        b=b,
        r=earth_radius_vector(jme),
        theta=geocentric_longitude(l),
        beta=geocentric_latitude(b),
    )
