from __future__ import annotations

from datetime import datetime

import pytest
import yaml
from pydantic import ValidationError

from solarengine.config import (
    Settings,
    config_path,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)
from solarengine.config.settings import CURRENT_SETTINGS_SCHEMA_VERSION, OutputCfg
from solarengine.engine.spa import SpaFunction, SpaInput, SpaValidationError, evaluate


def test_config_home_honours_environment(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SOLARENGINE_HOME", str(tmp_path / "custom"))

    assert get_config_home() == tmp_path / "custom"
    assert config_path() == tmp_path / "custom" / "config.yaml"
    assert (tmp_path / "custom").is_dir()


def test_load_writes_defaults_when_missing() -> None:
    settings = load_settings()

    assert settings == Settings()
    assert config_path().exists()
    assert ensure_default_config() == config_path()


def test_round_trip(tmp_path) -> None:
    settings = Settings()
    settings.observer.latitude_deg = 39.742476
    settings.observer.longitude_deg = -105.1786
    settings.output.function = "za_all"
    target = save_settings(settings, tmp_path / "observer.yaml")

    loaded = load_settings(target)

    assert loaded == settings
    assert loaded.schema_version == CURRENT_SETTINGS_SCHEMA_VERSION


def test_version_one_payload_is_upgraded(tmp_path) -> None:
    target = tmp_path / "legacy.yaml"
    target.write_text(
        yaml.safe_dump(
            {
                "schema_version": 1,
                "atmosphere": {"pressure_mbar": 820.0, "temperature_c": 11.0},
                "observer": {"latitude_deg": 10.0},
            }
        ),
        encoding="utf-8",
    )

    settings = load_settings(target)

    assert settings.schema_version == 2
    assert settings.observer.latitude_deg == 10.0
    assert settings.atmosphere.pressure_mbar == 820.0
    assert settings.atmosphere.atmos_refract_deg == pytest.approx(0.5667)
    on_disk = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert on_disk["schema_version"] == 2
    assert on_disk["atmosphere"]["temperature_c"] == 11.0


def test_unversioned_payload_gets_marker(tmp_path) -> None:
    target = tmp_path / "bare.yaml"
    target.write_text(yaml.safe_dump({"output": {"function": "za_rts"}}), encoding="utf-8")

    settings = load_settings(target)

    assert settings.schema_version == CURRENT_SETTINGS_SCHEMA_VERSION
    assert settings.output.function == "za_rts"
    assert "schema_version" in yaml.safe_load(target.read_text(encoding="utf-8"))


def test_malformed_payload_falls_back_to_defaults(tmp_path) -> None:
    target = tmp_path / "broken.yaml"
    target.write_text("- just\n- a list\n", encoding="utf-8")

    assert load_settings(target).observer == Settings().observer


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("ZA_INC", "za_inc"),
        (3, "za_all"),
        (" za_rts ", "za_rts"),
        ("ALL", "za_all"),
        ("inc", "za_inc"),
    ],
)
def test_output_function_normalised(raw, expected) -> None:
    assert OutputCfg(function=raw).function == expected


@pytest.mark.parametrize("raw", ["sunrise", 4, -1])
def test_output_function_rejects_unknown(raw) -> None:
    with pytest.raises(ValidationError):
        OutputCfg(function=raw)


def test_input_from_settings_uses_observer_timezone() -> None:
    settings = Settings()
    settings.observer.latitude_deg = 39.742476
    settings.observer.longitude_deg = -105.1786
    settings.observer.elevation_m = 1830.14
    settings.observer.timezone_hours = -7.0
    settings.observer.slope_deg = 30.0
    settings.observer.azm_rotation_deg = -10.0
    settings.atmosphere.pressure_mbar = 820.0
    settings.atmosphere.temperature_c = 11.0
    settings.time.delta_t_s = 67.0
    settings.output.function = "za_all"

    spa = SpaInput.from_settings(datetime(2003, 10, 17, 12, 30, 30), settings)

    assert spa.timezone == -7.0
    assert spa.function is SpaFunction.ZA_ALL
    result, code = evaluate(spa, strict=settings.output.strict)
    assert code == 0
    assert result.zenith == pytest.approx(50.11162, abs=1e-4)


def test_strict_output_setting_raises() -> None:
    settings = Settings()
    settings.output.strict = True
    settings.atmosphere.pressure_mbar = 6000.0

    spa = SpaInput.from_settings(datetime(2020, 1, 1), settings)

    with pytest.raises(SpaValidationError):
        evaluate(spa, strict=settings.output.strict)
