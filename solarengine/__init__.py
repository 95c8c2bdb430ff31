"""SolarEngine package bootstrap and curated public API surface."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("solarengine")
except PackageNotFoundError:  # pragma: no cover - metadata may be unavailable when running from source
    __version__ = "0.0.0"

from .engine.spa import (  # noqa: E402
    NO_EVENT,
    RiseTransitSet,
    SpaErrorCode,
    SpaFunction,
    SpaInput,
    SpaResult,
    SpaValidationError,
    evaluate,
    validate_inputs,
)


def get_version() -> str:
    """Return the resolved SolarEngine package version."""

    return __version__


__all__ = [
    "NO_EVENT",
    "RiseTransitSet",
    "SpaErrorCode",
    "SpaFunction",
    "SpaInput",
    "SpaResult",
    "SpaValidationError",
    "__version__",
    "evaluate",
    "get_version",
    "validate_inputs",
]
