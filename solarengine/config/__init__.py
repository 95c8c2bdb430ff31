"""Configuration helpers exposed at :mod:`solarengine.config`."""

from __future__ import annotations

from .settings import (
    AtmosphereCfg,
    ObserverCfg,
    OutputCfg,
    Settings,
    TimeCorrectionCfg,
    config_path,
    default_settings,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "Settings",
    "ObserverCfg",
    "AtmosphereCfg",
    "TimeCorrectionCfg",
    "OutputCfg",
    "config_path",
    "get_config_home",
    "default_settings",
    "load_settings",
    "save_settings",
    "ensure_default_config",
]
