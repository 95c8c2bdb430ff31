"""Input record and output selector for the solar position algorithm."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from ...core.time import calendar_fields

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ...config.settings import Settings

__all__ = ["SpaFunction", "SpaInput"]


class SpaFunction(IntEnum):
    """Selects which optional outputs accompany zenith and azimuth."""

    ZA = 0
    ZA_INC = 1
    ZA_RTS = 2
    ZA_ALL = 3

    @property
    def includes_incidence(self) -> bool:
        return self in (SpaFunction.ZA_INC, SpaFunction.ZA_ALL)

    @property
    def includes_rise_transit_set(self) -> bool:
        return self in (SpaFunction.ZA_RTS, SpaFunction.ZA_ALL)

    @classmethod
    def parse(cls, value: SpaFunction | int | str) -> SpaFunction:
        """Return the selector for a member, its value, or its name in any case.

        Names may drop the ``ZA_`` prefix, so ``"ALL"`` selects :attr:`ZA_ALL`.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if not key.startswith("ZA"):
                key = f"ZA_{key}"
            try:
                return cls[key]
            except KeyError:
                raise ValueError(f"Unknown SPA function selector: {value!r}") from None
        return cls(int(value))


@dataclass(frozen=True)
class SpaInput:
    """One immutable snapshot of everything the algorithm consumes.

    Times are local civil time; ``timezone`` is the offset from UTC in
    hours (negative west of Greenwich).  ``delta_ut1`` is UT1-UTC and
    ``delta_t`` is TT-UT, both in seconds.  Angles are degrees, elevation
    meters, pressure millibars and temperature degrees Celsius.
    ``slope`` and ``azm_rotation`` describe a tilted surface (rotation is
    measured from south, negative east) and only matter when incidence
    is requested.  ``atmos_refract`` is the refraction assumed at sunrise
    and sunset.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float
    delta_ut1: float
    delta_t: float
    timezone: float
    longitude: float
    latitude: float
    elevation: float
    pressure: float
    temperature: float
    slope: float
    azm_rotation: float
    atmos_refract: float
    function: SpaFunction

    def replace(self, **changes: Any) -> SpaInput:
        """Return a copy of the snapshot with ``changes`` applied."""

        return replace(self, **changes)

    @classmethod
    def from_datetime(
        cls,
        moment: _dt.datetime,
        *,
        latitude: float,
        longitude: float,
        elevation: float = 0.0,
        pressure: float = 1010.0,
        temperature: float = 10.0,
        delta_ut1: float = 0.0,
        delta_t: float = 0.0,
        slope: float = 0.0,
        azm_rotation: float = 0.0,
        atmos_refract: float = 0.5667,
        function: SpaFunction | int | str = SpaFunction.ZA,
    ) -> SpaInput:
        """Build a snapshot from a ``datetime``.

        The local calendar fields of ``moment`` are used as-is and its UTC
        offset becomes ``timezone``.  Naive datetimes are taken as UTC.
        """

        fields = calendar_fields(moment)
        return cls(
            year=fields.year,
            month=fields.month,
            day=fields.day,
            hour=fields.hour,
            minute=fields.minute,
            second=fields.second,
            delta_ut1=float(delta_ut1),
            delta_t=float(delta_t),
            timezone=fields.timezone,
            longitude=float(longitude),
            latitude=float(latitude),
            elevation=float(elevation),
            pressure=float(pressure),
            temperature=float(temperature),
            slope=float(slope),
            azm_rotation=float(azm_rotation),
            atmos_refract=float(atmos_refract),
            function=SpaFunction.parse(function),
        )

    @classmethod
    def from_settings(cls, moment: _dt.datetime, settings: Settings) -> SpaInput:
        """Build a snapshot for ``moment`` using observer defaults from ``settings``.

        A naive ``moment`` is interpreted in the configured observer
        timezone rather than UTC.
        """

        if moment.tzinfo is None:
            offset = _dt.timedelta(hours=settings.observer.timezone_hours)
            moment = moment.replace(tzinfo=_dt.timezone(offset))
        return cls.from_datetime(
            moment,
            latitude=settings.observer.latitude_deg,
            longitude=settings.observer.longitude_deg,
            elevation=settings.observer.elevation_m,
            pressure=settings.atmosphere.pressure_mbar,
            temperature=settings.atmosphere.temperature_c,
            delta_ut1=settings.time.delta_ut1_s,
            delta_t=settings.time.delta_t_s,
            slope=settings.observer.slope_deg,
            azm_rotation=settings.observer.azm_rotation_deg,
            atmos_refract=settings.atmosphere.atmos_refract_deg,
            function=settings.output.function,
        )
