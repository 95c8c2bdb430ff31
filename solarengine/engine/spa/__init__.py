"""Solar position algorithm: zenith, azimuth, incidence and daily sun events."""

from __future__ import annotations

from .earth import EarthPosition, earth_position
from .errors import SpaErrorCode, SpaValidationError
from .events import NO_EVENT, RiseTransitSet, rise_transit_set
from .geocentric import GeocentricChain, GeocentricSun, geocentric_chain
from .models import SpaFunction, SpaInput
from .nutation import Nutation
from .pipeline import SpaResult, evaluate
from .surface import surface_incidence_angle
from .topocentric import TopocentricSun, atmospheric_refraction_correction, topocentric_sun
from .validation import validate_inputs

__all__ = [
    "EarthPosition",
    "GeocentricChain",
    "GeocentricSun",
    "NO_EVENT",
    "Nutation",
    "RiseTransitSet",
    "SpaErrorCode",
    "SpaFunction",
    "SpaInput",
    "SpaResult",
    "SpaValidationError",
    "TopocentricSun",
    "atmospheric_refraction_correction",
    "earth_position",
    "evaluate",
    "geocentric_chain",
    "rise_transit_set",
    "surface_incidence_angle",
    "topocentric_sun",
    "validate_inputs",
]
