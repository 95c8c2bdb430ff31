"""Configuration models and helpers for SolarEngine settings."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 2

_FUNCTION_NAMES = ("za", "za_inc", "za_rts", "za_all")

# -------------------- Settings Schema --------------------


class ObserverCfg(BaseModel):
    """Default observer location and tilted-surface geometry."""

    latitude_deg: float = 0.0
    longitude_deg: float = 0.0
    elevation_m: float = 0.0
    timezone_hours: float = 0.0
    slope_deg: float = 0.0
    azm_rotation_deg: float = 0.0


class AtmosphereCfg(BaseModel):
    """Atmospheric conditions used when modelling refraction."""

    pressure_mbar: float = 1010.0
    temperature_c: float = 10.0
    atmos_refract_deg: float = 0.5667


class TimeCorrectionCfg(BaseModel):
    """Caller supplied time-scale corrections, in seconds."""

    delta_ut1_s: float = 0.0
    delta_t_s: float = 69.184


class OutputCfg(BaseModel):
    """Which outputs to compute and how to treat rejected input."""

    function: str = "za"
    strict: bool = False

    @field_validator("function", mode="before")
    @classmethod
    def _normalise_function(cls, value: object) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            if 0 <= value < len(_FUNCTION_NAMES):
                return _FUNCTION_NAMES[value]
            raise ValueError(f"function index out of range: {value}")
        name = str(value).strip().lower()
        if not name.startswith("za"):
            name = f"za_{name}"
        if name not in _FUNCTION_NAMES:
            raise ValueError(f"function must be one of {', '.join(_FUNCTION_NAMES)}")
        return name


class Settings(BaseModel):
    """Top level SolarEngine configuration."""

    schema_version: int = CURRENT_SETTINGS_SCHEMA_VERSION
    observer: ObserverCfg = Field(default_factory=ObserverCfg)
    atmosphere: AtmosphereCfg = Field(default_factory=AtmosphereCfg)
    time: TimeCorrectionCfg = Field(default_factory=TimeCorrectionCfg)
    output: OutputCfg = Field(default_factory=OutputCfg)


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "config.yaml"


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    override = os.environ.get("SOLARENGINE_HOME")
    if override:
        return Path(override)
    if os.name == "nt":
        base = Path(
            os.environ.get(
                "LOCALAPPDATA", str(Path.home() / "AppData" / "Local")
            )
        )
        return base / "SolarEngine"
    return Path.home() / ".solarengine"


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def _coerce_schema_version(raw: object) -> int:
    """Return a normalised schema version value with sane bounds."""

    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def _upgrade_settings_payload(
    data: dict[str, object], *, schema_version: int
) -> tuple[dict[str, object], bool]:
    """Apply in-place upgrades required for older settings payloads."""

    upgraded = deepcopy(data)
    version = max(1, schema_version)
    changed = False

    if version < 2:
        # v2 introduces the explicit schema version marker; the layout is unchanged.
        version = 2
        changed = True

    if upgraded.get("schema_version") != version:
        upgraded["schema_version"] = version
        changed = True

    return upgraded, changed


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        LOG.info("No settings at %s; writing defaults", source_path)
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("Ignoring malformed settings payload in %s", source_path)
        raw = {}
    schema_version = _coerce_schema_version(raw.get("schema_version"))
    data, upgraded = _upgrade_settings_payload(raw, schema_version=schema_version)
    settings = Settings(**data)
    if upgraded:
        LOG.info("Upgraded settings at %s to schema v%d", source_path, settings.schema_version)
        save_settings(settings, source_path)
    return settings


def ensure_default_config() -> Path:
    """Ensure a configuration file exists on disk and return its path."""

    target = config_path()
    if not target.exists():
        save_settings(default_settings(), target)
    return target
