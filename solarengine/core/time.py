"""Time conversion helpers used by the solar position algorithm.

This module centralises the conversion from calendar fields to the
Julian day axis the algorithm runs on, and from there to the ephemeris
time scales (Julian ephemeris day, century and millennium).  The
conversion from Universal Time to Terrestrial Time is driven entirely by
the caller supplied ``delta_t``; nothing here models ΔT or leap seconds.

Calendar inputs are plain integers rather than ``datetime`` objects
because the algorithm covers years -2000 to 6000, well outside what the
standard library can represent.  :func:`calendar_fields` bridges the two
for callers that do hold a ``datetime``.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Final

__all__ = [
    "CalendarFields",
    "TimeScales",
    "calendar_fields",
    "ensure_utc",
    "julian_century",
    "julian_day",
    "julian_ephemeris_century",
    "julian_ephemeris_day",
    "julian_ephemeris_millennium",
    "time_scales",
]


SECONDS_PER_DAY: Final[float] = 86_400.0
DAYS_PER_CENTURY: Final[float] = 36_525.0
JD_J2000: Final[float] = 2_451_545.0
GREGORIAN_REFORM_JD: Final[float] = 2_299_160.0


@dataclass(frozen=True)
class TimeScales:
    """Julian day and the ephemeris scales derived from it."""

    jd: float
    jc: float
    jde: float
    jce: float
    jme: float


@dataclass(frozen=True)
class CalendarFields:
    """Local civil date/time split into the fields the algorithm expects."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float
    timezone: float


def ensure_utc(moment: _dt.datetime) -> _dt.datetime:
    """Return ``moment`` converted to UTC."""

    tzinfo = moment.tzinfo
    if tzinfo is None:
        return moment.replace(tzinfo=_dt.UTC)
    return moment.astimezone(_dt.UTC)


def calendar_fields(moment: _dt.datetime) -> CalendarFields:
    """Split ``moment`` into local calendar fields plus its UTC offset in hours.

    Naive datetimes are interpreted as UTC.  Sub-second precision is kept
    by folding microseconds into ``second``.
    """

    if moment.tzinfo is None:
        moment = ensure_utc(moment)
    offset = moment.utcoffset() or _dt.timedelta(0)
    return CalendarFields(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        hour=moment.hour,
        minute=moment.minute,
        second=moment.second + moment.microsecond / 1e6,
        timezone=offset.total_seconds() / 3600.0,
    )


def julian_day(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
    dut1: float = 0.0,
    tz: float = 0.0,
) -> float:
    """Return the Julian day for a local civil date/time.

    ``tz`` is the observer's offset from UTC in hours (negative west of
    Greenwich) and ``dut1`` the UT1-UTC correction in seconds.  January
    and February count as months 13 and 14 of the previous year.  The
    Gregorian correction only applies after the 1582 calendar reform.
    """

    day_decimal = day + (hour - tz + (minute + (second + dut1) / 60.0) / 60.0) / 24.0

    if month < 3:
        month += 12
        year -= 1

    jd = int(365.25 * (year + 4716.0)) + int(30.6001 * (month + 1)) + day_decimal - 1524.5

    if jd > GREGORIAN_REFORM_JD:
        a = int(year / 100)
        jd += 2 - a + int(a / 4)

    return jd


def julian_century(jd: float) -> float:
    return (jd - JD_J2000) / DAYS_PER_CENTURY


def julian_ephemeris_day(jd: float, delta_t: float) -> float:
    return jd + delta_t / SECONDS_PER_DAY


def julian_ephemeris_century(jde: float) -> float:
    return (jde - JD_J2000) / DAYS_PER_CENTURY


def julian_ephemeris_millennium(jce: float) -> float:
    return jce / 10.0


def time_scales(jd: float, delta_t: float) -> TimeScales:
    """Derive every time scale the algorithm needs from ``jd`` and ΔT (seconds)."""

    jde = julian_ephemeris_day(jd, delta_t)
    jce = julian_ephemeris_century(jde)
    return TimeScales(
        jd=jd,
        jc=julian_century(jd),
        jde=jde,
        jce=jce,
        jme=julian_ephemeris_millennium(jce),
    )
