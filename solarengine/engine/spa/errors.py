"""Validation error taxonomy for the solar position algorithm."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["SpaErrorCode", "SpaValidationError"]


class SpaErrorCode(IntEnum):
    """Numeric status codes, stable with the published algorithm's table."""

    OK = 0
    YEAR = 1
    MONTH = 2
    DAY = 3
    HOUR = 4
    MINUTE = 5
    SECOND = 6
    DELTA_T = 7
    TIMEZONE = 8
    LONGITUDE = 9
    LATITUDE = 10
    ELEVATION = 11
    PRESSURE = 12
    TEMPERATURE = 13
    SLOPE = 14
    AZM_ROTATION = 15
    ATMOS_REFRACT = 16
    DELTA_UT1 = 17

    def describe(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[SpaErrorCode, str] = {
    SpaErrorCode.OK: "valid input",
    SpaErrorCode.YEAR: "year outside [-2000, 6000]",
    SpaErrorCode.MONTH: "month outside [1, 12]",
    SpaErrorCode.DAY: "day outside [1, 31]",
    SpaErrorCode.HOUR: "hour outside [0, 24]",
    SpaErrorCode.MINUTE: "minute outside [0, 59] or non-zero at hour 24",
    SpaErrorCode.SECOND: "second outside [0, 60) or non-zero at hour 24",
    SpaErrorCode.DELTA_T: "|delta_t| above 8000 seconds",
    SpaErrorCode.TIMEZONE: "|timezone| above 18 hours",
    SpaErrorCode.LONGITUDE: "|longitude| above 180 degrees",
    SpaErrorCode.LATITUDE: "|latitude| above 90 degrees",
    SpaErrorCode.ELEVATION: "elevation below -6,500,000 meters",
    SpaErrorCode.PRESSURE: "pressure outside [0, 5000] millibars",
    SpaErrorCode.TEMPERATURE: "temperature outside (-273, 6000] degrees Celsius",
    SpaErrorCode.SLOPE: "|slope| above 360 degrees",
    SpaErrorCode.AZM_ROTATION: "|azm_rotation| above 360 degrees",
    SpaErrorCode.ATMOS_REFRACT: "|atmos_refract| above 5 degrees",
    SpaErrorCode.DELTA_UT1: "|delta_ut1| not below 1 second",
}


class SpaValidationError(ValueError):
    """Raised in strict mode when an input violates a documented range."""

    def __init__(self, code: SpaErrorCode | int) -> None:
        self.code = SpaErrorCode(code)
        super().__init__(f"SPA input rejected (code {int(self.code)}): {self.code.describe()}")
