"""Input range checks for the solar position algorithm."""

from __future__ import annotations

from .errors import SpaErrorCode
from .models import SpaFunction, SpaInput

__all__ = ["validate_inputs"]


def validate_inputs(spa: SpaInput) -> SpaErrorCode:
    """Return the first violated constraint, or :attr:`SpaErrorCode.OK`.

    The order matches the published algorithm so that the reported code
    is deterministic when several inputs are out of range.  The hour 24
    rules are checked after the pressure, temperature and UT1 ranges.
    """

    if spa.year < -2000 or spa.year > 6000:
        return SpaErrorCode.YEAR
    if spa.month < 1 or spa.month > 12:
        return SpaErrorCode.MONTH
    if spa.day < 1 or spa.day > 31:
        return SpaErrorCode.DAY
    if spa.hour < 0 or spa.hour > 24:
        return SpaErrorCode.HOUR
    if spa.minute < 0 or spa.minute > 59:
        return SpaErrorCode.MINUTE
    if spa.second < 0 or spa.second >= 60:
        return SpaErrorCode.SECOND
    if spa.pressure < 0 or spa.pressure > 5000:
        return SpaErrorCode.PRESSURE
    if spa.temperature <= -273 or spa.temperature > 6000:
        return SpaErrorCode.TEMPERATURE
    if spa.delta_ut1 <= -1 or spa.delta_ut1 >= 1:
        return SpaErrorCode.DELTA_UT1
    if spa.hour == 24 and spa.minute > 0:
        return SpaErrorCode.MINUTE
    if spa.hour == 24 and spa.second > 0:
        return SpaErrorCode.SECOND

    if abs(spa.delta_t) > 8000:
        return SpaErrorCode.DELTA_T
    if abs(spa.timezone) > 18:
        return SpaErrorCode.TIMEZONE
    if abs(spa.longitude) > 180:
        return SpaErrorCode.LONGITUDE
    if abs(spa.latitude) > 90:
        return SpaErrorCode.LATITUDE
    if abs(spa.atmos_refract) > 5:
        return SpaErrorCode.ATMOS_REFRACT
    if spa.elevation < -6_500_000:
        return SpaErrorCode.ELEVATION

    if SpaFunction.parse(spa.function).includes_incidence:
        if abs(spa.slope) > 360:
            return SpaErrorCode.SLOPE
        if abs(spa.azm_rotation) > 360:
            return SpaErrorCode.AZM_ROTATION

    return SpaErrorCode.OK
