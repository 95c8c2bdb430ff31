from __future__ import annotations

import pytest

from solarengine.engine.spa import SpaFunction, SpaInput


@pytest.fixture
def nrel_input() -> SpaInput:
    """The worked example published with the algorithm (Golden, Colorado)."""

    return SpaInput(
        year=2003,
        month=10,
        day=17,
        hour=12,
        minute=30,
        second=30.0,
        delta_ut1=0.0,
        delta_t=67.0,
        timezone=-7.0,
        longitude=-105.1786,
        latitude=39.742476,
        elevation=1830.14,
        pressure=820.0,
        temperature=11.0,
        slope=30.0,
        azm_rotation=-10.0,
        atmos_refract=0.5667,
        function=SpaFunction.ZA_ALL,
    )


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path, monkeypatch) -> None:
    """Keep settings writes inside the test's temporary directory."""

    monkeypatch.setenv("SOLARENGINE_HOME", str(tmp_path / "solarengine-home"))
