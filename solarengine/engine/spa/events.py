"""Equation of time and sunrise, transit and sunset for one local day.

The solver evaluates the geocentric sun at 0h UT of the requested date
and on the days either side, then interpolates right ascension and
declination quadratically to the approximate event times.  Each event
time is refined once with the ratio of the altitude error to the rate of
altitude change with hour angle.  When the sun never crosses the
refracted horizon (polar day or night) every event field is set to
:data:`NO_EVENT`.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from ...core.angles import (
    clamp_unit,
    normalize_degrees,
    normalize_fraction,
    normalize_half_turn,
    normalize_signed,
    wrap_minutes,
)
from ...core.time import SECONDS_PER_DAY, julian_day
from .geocentric import geocentric_chain
from .models import SpaInput
from .topocentric import SUN_RADIUS_DEG

__all__ = [
    "NO_EVENT",
    "RiseTransitSet",
    "approx_sun_rise_and_set",
    "approx_sun_transit_time",
    "dayfrac_to_local_hr",
    "equation_of_time",
    "interpolate_alpha_delta",
    "rise_transit_set",
    "rts_sun_altitude",
    "sun_hour_angle_at_rise_set",
    "sun_mean_longitude",
    "sun_rise_and_set",
]

LOG = logging.getLogger(__name__)

NO_EVENT = -99999.0
_SIDEREAL_DEG_PER_DAY = 360.985647


@dataclass(frozen=True)
class RiseTransitSet:
    """Equation of time plus local rise, transit and set for one day."""

    eot: float  # equation of time [minutes]
    srha: float  # sunrise hour angle [deg]
    ssha: float  # sunset hour angle [deg]
    sta: float  # sun transit altitude [deg]
    suntransit: float  # local solar noon [fractional hour]
    sunrise: float  # [fractional hour]
    sunset: float  # [fractional hour]

    @property
    def has_events(self) -> bool:
        return self.suntransit != NO_EVENT


@dataclass(frozen=True)
class _EventSample:
    m: float  # event time as a day fraction
    delta_prime: float
    h_prime: float
    altitude: float


def sun_mean_longitude(jme: float) -> float:
    return normalize_degrees(
        280.4664567
        + jme
        * (
            360007.6982779
            + jme * (0.03032028 + jme * (1 / 49931.0 + jme * (-1 / 15300.0 + jme * (-1 / 2000000.0))))
        )
    )


def equation_of_time(m: float, alpha: float, del_psi: float, epsilon: float) -> float:
    """Return the equation of time in minutes, folded into ±20 minutes."""

    return wrap_minutes(4.0 * (m - 0.0057183 - alpha + del_psi * math.cos(math.radians(epsilon))))


def approx_sun_transit_time(alpha_zero: float, longitude: float, nu: float) -> float:
    return (alpha_zero - longitude - nu) / 360.0


def sun_hour_angle_at_rise_set(
    latitude: float, delta_zero: float, h0_prime: float
) -> float | None:
    """Return the hour angle at which the sun reaches ``h0_prime``.

    ``None`` means the sun stays above or below that altitude all day.
    """

    latitude_rad = math.radians(latitude)
    delta_zero_rad = math.radians(delta_zero)
    argument = (
        math.sin(math.radians(h0_prime)) - math.sin(latitude_rad) * math.sin(delta_zero_rad)
    ) / (math.cos(latitude_rad) * math.cos(delta_zero_rad))
    if abs(argument) > 1:
        return None
    return normalize_half_turn(math.degrees(math.acos(argument)))


def approx_sun_rise_and_set(m_transit: float, h0: float) -> tuple[float, float, float]:
    """Return ``(transit, rise, set)`` day fractions, each in ``[0, 1)``."""

    h0_dfrac = h0 / 360.0
    return (
        normalize_fraction(m_transit),
        normalize_fraction(m_transit - h0_dfrac),
        normalize_fraction(m_transit + h0_dfrac),
    )


def interpolate_alpha_delta(samples: Sequence[float], n: float) -> float:
    """Interpolate day-spaced ``(minus, zero, plus)`` samples at offset ``n``.

    First differences of two or more are treated as a 360° wrap and
    reduced to their fractional part.
    """

    minus, zero, plus = samples
    a = zero - minus
    b = plus - zero
    if abs(a) >= 2.0:
        a = normalize_fraction(a)
    if abs(b) >= 2.0:
        b = normalize_fraction(b)
    return zero + n * (a + b + (b - a) * n) / 2.0


def rts_sun_altitude(latitude: float, delta_prime: float, h_prime: float) -> float:
    latitude_rad = math.radians(latitude)
    delta_prime_rad = math.radians(delta_prime)
    return math.degrees(
        math.asin(
            clamp_unit(
                math.sin(latitude_rad) * math.sin(delta_prime_rad)
                + math.cos(latitude_rad) * math.cos(delta_prime_rad) * math.cos(math.radians(h_prime))
            )
        )
    )


def sun_rise_and_set(
    m: float, altitude: float, delta_prime: float, latitude: float, h_prime: float, h0_prime: float
) -> float:
    """Refine the approximate day fraction ``m`` of a rise or set event."""

    return m + (altitude - h0_prime) / (
        360.0
        * math.cos(math.radians(delta_prime))
        * math.cos(math.radians(latitude))
        * math.sin(math.radians(h_prime))
    )


def dayfrac_to_local_hr(dayfrac: float, timezone: float) -> float:
    return 24.0 * normalize_fraction(dayfrac + timezone / 24.0)


def _event_sample(
    m: float,
    nu: float,
    alpha: Sequence[float],
    delta: Sequence[float],
    spa: SpaInput,
) -> _EventSample:
    n = m + spa.delta_t / SECONDS_PER_DAY
    alpha_prime = interpolate_alpha_delta(alpha, n)
    delta_prime = interpolate_alpha_delta(delta, n)
    h_prime = normalize_signed(nu + _SIDEREAL_DEG_PER_DAY * m + spa.longitude - alpha_prime)
    return _EventSample(
        m=m,
        delta_prime=delta_prime,
        h_prime=h_prime,
        altitude=rts_sun_altitude(spa.latitude, delta_prime, h_prime),
    )


def rise_transit_set(
    spa: SpaInput, *, jme: float, alpha: float, del_psi: float, epsilon: float
) -> RiseTransitSet:
    """Compute the equation of time and the day's sun events for ``spa``.

    ``jme``, ``alpha``, ``del_psi`` and ``epsilon`` come from the main
    evaluation at the requested instant and only feed the equation of
    time.  The events themselves are solved for the calendar date of
    ``spa`` at 0h UT.
    """

    h0_prime = -1 * (SUN_RADIUS_DEG + spa.atmos_refract)
    eot = equation_of_time(sun_mean_longitude(jme), alpha, del_psi, epsilon)

    jd_day = julian_day(spa.year, spa.month, spa.day)
    nu = geocentric_chain(jd_day, spa.delta_t).sun.nu

    suns = [geocentric_chain(jd_day + offset, 0.0).sun for offset in (-1.0, 0.0, 1.0)]
    alpha_samples = [sun.alpha for sun in suns]
    delta_samples = [sun.delta for sun in suns]

    m_transit = approx_sun_transit_time(alpha_samples[1], spa.longitude, nu)
    h0 = sun_hour_angle_at_rise_set(spa.latitude, delta_samples[1], h0_prime)
    if h0 is None:
        LOG.debug(
            "No sunrise/sunset on %04d-%02d-%02d at latitude %.4f",
            spa.year,
            spa.month,
            spa.day,
            spa.latitude,
        )
        return RiseTransitSet(
            eot=eot,
            srha=NO_EVENT,
            ssha=NO_EVENT,
            sta=NO_EVENT,
            suntransit=NO_EVENT,
            sunrise=NO_EVENT,
            sunset=NO_EVENT,
        )

    transit, rise, set_ = (
        _event_sample(m, nu, alpha_samples, delta_samples, spa)
        for m in approx_sun_rise_and_set(m_transit, h0)
    )

    def _refined(event: _EventSample) -> float:
        return sun_rise_and_set(
            event.m, event.altitude, event.delta_prime, spa.latitude, event.h_prime, h0_prime
        )

    return RiseTransitSet(
        eot=eot,
        srha=rise.h_prime,
        ssha=set_.h_prime,
        sta=transit.altitude,
        suntransit=dayfrac_to_local_hr(transit.m - transit.h_prime / 360.0, spa.timezone),
        sunrise=dayfrac_to_local_hr(_refined(rise), spa.timezone),
        sunset=dayfrac_to_local_hr(_refined(set_), spa.timezone),
    )
