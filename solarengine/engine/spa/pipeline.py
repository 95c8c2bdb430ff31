"""Orchestration of the solar position algorithm.

:func:`evaluate` validates the input snapshot and then runs the stages
in dependency order, each one a pure function of the records produced
before it::

    validate -> time scales -> Earth position -> nutation -> geocentric sun
             -> topocentric sun -> [incidence] -> [rise/transit/set]

Validation failure is reported, not raised, unless ``strict`` is set:
the pipeline still runs so callers can inspect the non-date fields, but
the Julian day is pinned to ``0.0`` and every output must be treated as
meaningless while the returned code is non-zero.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from ...core.time import TimeScales, julian_day
from .earth import EarthPosition
from .errors import SpaErrorCode, SpaValidationError
from .events import RiseTransitSet, rise_transit_set
from .geocentric import GeocentricSun, geocentric_chain
from .models import SpaFunction, SpaInput
from .nutation import Nutation
from .surface import surface_incidence_angle
from .topocentric import TopocentricSun, topocentric_sun
from .validation import validate_inputs

__all__ = ["SpaResult", "evaluate"]

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpaResult:
    """Every record produced by one evaluation.

    Stages that were not requested, or not reached while processing a
    rejected input, are ``None``.
    """

    input: SpaInput
    error_code: SpaErrorCode
    time: TimeScales | None = None
    earth: EarthPosition | None = None
    nutation: Nutation | None = None
    geocentric: GeocentricSun | None = None
    topocentric: TopocentricSun | None = None
    incidence: float | None = None
    rise_transit_set: RiseTransitSet | None = None

    @property
    def ok(self) -> bool:
        return self.error_code == SpaErrorCode.OK

    @property
    def zenith(self) -> float:
        return self._topocentric().zenith

    @property
    def elevation(self) -> float:
        return self._topocentric().e

    @property
    def azimuth(self) -> float:
        return self._topocentric().azimuth

    @property
    def azimuth_astro(self) -> float:
        return self._topocentric().azimuth_astro

    @property
    def eot(self) -> float | None:
        return self.rise_transit_set.eot if self.rise_transit_set else None

    @property
    def sunrise(self) -> float | None:
        return self.rise_transit_set.sunrise if self.rise_transit_set else None

    @property
    def suntransit(self) -> float | None:
        return self.rise_transit_set.suntransit if self.rise_transit_set else None

    @property
    def sunset(self) -> float | None:
        return self.rise_transit_set.sunset if self.rise_transit_set else None

    def _topocentric(self) -> TopocentricSun:
        if self.topocentric is None:
            raise ValueError(
                f"Topocentric position unavailable (error code {int(self.error_code)})"
            )
        return self.topocentric

    def as_dict(self) -> dict[str, Any]:
        """Flatten inputs, intermediates and outputs into one mapping."""

        data: dict[str, Any] = asdict(self.input)
        data["function"] = SpaFunction.parse(self.input.function).name
        data["error_code"] = int(self.error_code)
        for record in (
            self.time,
            self.earth,
            self.nutation,
            self.geocentric,
            self.topocentric,
            self.rise_transit_set,
        ):
            if record is not None:
                data.update(asdict(record))
        data["incidence"] = self.incidence
        return data


def evaluate(spa_input: SpaInput, *, strict: bool = False) -> tuple[SpaResult, int]:
    """Compute the sun's position for ``spa_input``.

    Returns the assembled :class:`SpaResult` and the validation code
    (``0`` on success).  With ``strict=True`` an invalid input raises
    :class:`SpaValidationError` before anything is computed.
    """

    code = validate_inputs(spa_input)
    if code != SpaErrorCode.OK:
        if strict:
            raise SpaValidationError(code)
        LOG.warning(
            "SPA input rejected with code %d (%s); outputs are unreliable",
            int(code),
            code.describe(),
        )

    function = SpaFunction.parse(spa_input.function)
    jd = 0.0
    if code == SpaErrorCode.OK:
        jd = julian_day(
            spa_input.year,
            spa_input.month,
            spa_input.day,
            spa_input.hour,
            spa_input.minute,
            spa_input.second,
            spa_input.delta_ut1,
            spa_input.timezone,
        )

    stages: dict[str, Any] = {}
    try:
        chain = geocentric_chain(jd, spa_input.delta_t)
        stages.update(
            time=chain.time,
            earth=chain.earth,
            nutation=chain.nutation,
            geocentric=chain.sun,
        )
        topo = topocentric_sun(
            chain.sun,
            chain.earth.r,
            latitude=spa_input.latitude,
            longitude=spa_input.longitude,
            elevation=spa_input.elevation,
            pressure=spa_input.pressure,
            temperature=spa_input.temperature,
            atmos_refract=spa_input.atmos_refract,
        )
        stages["topocentric"] = topo

        if function.includes_incidence:
            stages["incidence"] = surface_incidence_angle(
                topo.zenith, topo.azimuth_astro, spa_input.azm_rotation, spa_input.slope
            )

        if function.includes_rise_transit_set:
            stages["rise_transit_set"] = rise_transit_set(
                spa_input,
                jme=chain.time.jme,
                alpha=chain.sun.alpha,
                del_psi=chain.nutation.del_psi,
                epsilon=chain.nutation.epsilon,
            )
    except (ArithmeticError, ValueError) as exc:
        if code == SpaErrorCode.OK:
            raise
        LOG.debug("Pipeline stopped after %s on rejected input: %s", sorted(stages), exc)

    LOG.debug(
        "Evaluated SPA for %04d-%02d-%02d %02d:%02d:%06.3f (function=%s, code=%d)",
        spa_input.year,
        spa_input.month,
        spa_input.day,
        spa_input.hour,
        spa_input.minute,
        spa_input.second,
        function.name,
        int(code),
    )
    return SpaResult(input=spa_input, error_code=code, **stages), int(code)
