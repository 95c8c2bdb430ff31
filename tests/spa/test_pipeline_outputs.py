from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from solarengine import SpaResult, evaluate
from solarengine.engine.spa import (
    SpaErrorCode,
    SpaFunction,
    SpaInput,
    atmospheric_refraction_correction,
    surface_incidence_angle,
)
from solarengine.engine.spa.topocentric import SUN_RADIUS_DEG


@pytest.mark.parametrize(
    ("function", "has_incidence", "has_events"),
    [
        (SpaFunction.ZA, False, False),
        (SpaFunction.ZA_INC, True, False),
        (SpaFunction.ZA_RTS, False, True),
        (SpaFunction.ZA_ALL, True, True),
    ],
)
def test_function_selects_optional_outputs(nrel_input, function, has_incidence, has_events) -> None:
    result, _ = evaluate(nrel_input.replace(function=function))

    assert (result.incidence is not None) is has_incidence
    assert (result.rise_transit_set is not None) is has_events
    assert (result.sunrise is not None) is has_events
    assert result.zenith == pytest.approx(50.11162, abs=1e-4)


def test_selector_accepts_names_and_ints() -> None:
    assert SpaFunction.parse("za_inc") is SpaFunction.ZA_INC
    assert SpaFunction.parse(" ZA_ALL ") is SpaFunction.ZA_ALL
    assert SpaFunction.parse(2) is SpaFunction.ZA_RTS
    assert SpaFunction.parse("ALL") is SpaFunction.ZA_ALL
    assert SpaFunction.parse("inc") is SpaFunction.ZA_INC
    assert SpaFunction.parse("Rts") is SpaFunction.ZA_RTS
    assert SpaFunction.parse("za") is SpaFunction.ZA
    assert SpaFunction.ZA_ALL.includes_incidence and SpaFunction.ZA_ALL.includes_rise_transit_set
    with pytest.raises(ValueError):
        SpaFunction.parse("azimuth_only")
    with pytest.raises(ValueError):
        SpaFunction.parse(7)


def test_integer_selector_in_input(nrel_input) -> None:
    result, code = evaluate(nrel_input.replace(function=1))

    assert code == 0
    assert result.incidence == pytest.approx(25.18700, abs=1e-4)
    assert result.as_dict()["function"] == "ZA_INC"


def test_as_dict_flattens_every_stage(nrel_input) -> None:
    data = evaluate(nrel_input)[0].as_dict()

    for key in ("year", "jd", "jme", "l", "r", "del_psi", "epsilon", "alpha", "delta", "nu"):
        assert key in data
    for key in ("zenith", "azimuth", "azimuth_astro", "e", "eot", "sunrise", "sunset"):
        assert key in data
    assert data["function"] == "ZA_ALL"
    assert data["error_code"] == 0
    assert data["incidence"] == pytest.approx(25.18700, abs=1e-4)


def test_missing_topocentric_stage_raises(nrel_input) -> None:
    empty = SpaResult(input=nrel_input, error_code=SpaErrorCode.MONTH)

    with pytest.raises(ValueError, match="error code 2"):
        _ = empty.zenith
    assert empty.eot is None and empty.sunset is None


def test_hour_twenty_four_is_next_midnight(nrel_input) -> None:
    end_of_day = nrel_input.replace(hour=24, minute=0, second=0.0, function=SpaFunction.ZA)
    next_start = nrel_input.replace(day=18, hour=0, minute=0, second=0.0, function=SpaFunction.ZA)

    late, code = evaluate(end_of_day)
    early, _ = evaluate(next_start)

    assert code == 0
    assert late.time.jd == pytest.approx(early.time.jd, abs=1e-9)
    assert late.zenith == pytest.approx(early.zenith, abs=1e-6)


def test_refraction_vanishes_below_refracted_horizon() -> None:
    threshold = -(SUN_RADIUS_DEG + 0.5667)

    assert atmospheric_refraction_correction(1010.0, 10.0, 0.5667, threshold - 0.01) == 0.0
    at_horizon = atmospheric_refraction_correction(1010.0, 10.0, 0.5667, 0.0)
    assert at_horizon == pytest.approx(0.4827, abs=5e-3)
    overhead = atmospheric_refraction_correction(1010.0, 10.0, 0.5667, 45.0)
    assert 0.0 < overhead < at_horizon


def test_refraction_zero_at_formula_pole() -> None:
    # With the widest allowed horizon refraction the gate admits e0 = -5.11.
    assert atmospheric_refraction_correction(1010.0, 10.0, 5.0, -5.11) == 0.0
    assert atmospheric_refraction_correction(1010.0, 10.0, 5.0, -5.2) == 0.0


def test_wide_horizon_refraction_evaluates(nrel_input) -> None:
    result, code = evaluate(nrel_input.replace(atmos_refract=5.0))

    assert code == 0
    assert result.rise_transit_set.has_events


def test_refraction_scales_with_pressure() -> None:
    sea_level = atmospheric_refraction_correction(1010.0, 10.0, 0.5667, 10.0)
    mountain = atmospheric_refraction_correction(505.0, 10.0, 0.5667, 10.0)
    assert mountain == pytest.approx(sea_level / 2.0)


def test_flat_surface_incidence_equals_zenith() -> None:
    assert surface_incidence_angle(35.0, 120.0, 0.0, 0.0) == pytest.approx(35.0)
    # Facing the sun with a slope equal to its zenith angle.
    assert surface_incidence_angle(35.0, 20.0, 20.0, 35.0) == pytest.approx(0.0, abs=1e-5)


def test_from_datetime_matches_reference(nrel_input) -> None:
    moment = datetime(2003, 10, 17, 12, 30, 30, tzinfo=timezone(timedelta(hours=-7)))
    spa = SpaInput.from_datetime(
        moment,
        latitude=39.742476,
        longitude=-105.1786,
        elevation=1830.14,
        pressure=820.0,
        temperature=11.0,
        delta_t=67.0,
        slope=30.0,
        azm_rotation=-10.0,
        function="za_all",
    )

    assert spa == nrel_input


def test_from_datetime_naive_is_utc() -> None:
    spa = SpaInput.from_datetime(
        datetime(2003, 10, 17, 19, 30, 30, 250000), latitude=39.742476, longitude=-105.1786
    )

    assert spa.timezone == 0.0
    assert spa.second == pytest.approx(30.25)
    assert spa.function is SpaFunction.ZA
