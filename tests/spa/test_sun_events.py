from __future__ import annotations

import pytest

from solarengine.engine.spa import NO_EVENT, SpaFunction, SpaInput, evaluate
from solarengine.engine.spa.events import (
    approx_sun_rise_and_set,
    dayfrac_to_local_hr,
    equation_of_time,
    interpolate_alpha_delta,
    sun_hour_angle_at_rise_set,
)


def _arctic(month: int, day: int) -> SpaInput:
    return SpaInput(
        year=2003,
        month=month,
        day=day,
        hour=12,
        minute=0,
        second=0.0,
        delta_ut1=0.0,
        delta_t=64.5,
        timezone=0.0,
        longitude=15.0,
        latitude=80.0,
        elevation=0.0,
        pressure=1010.0,
        temperature=-5.0,
        slope=0.0,
        azm_rotation=0.0,
        atmos_refract=0.5667,
        function=SpaFunction.ZA_RTS,
    )


@pytest.mark.parametrize(("month", "day"), [(12, 21), (6, 21)])
def test_polar_day_and_night_use_sentinel(month: int, day: int) -> None:
    result, code = evaluate(_arctic(month, day))

    assert code == 0
    rts = result.rise_transit_set
    assert rts is not None and not rts.has_events
    for value in (rts.srha, rts.ssha, rts.sta, rts.suntransit, rts.sunrise, rts.sunset):
        assert value == NO_EVENT
    assert rts.eot != NO_EVENT
    assert -20.0 <= rts.eot <= 20.0


def test_polar_night_sun_stays_down() -> None:
    result, _ = evaluate(_arctic(12, 21))
    assert result.elevation < 0.0


def test_equinox_day_has_events() -> None:
    result, code = evaluate(_arctic(3, 21).replace(latitude=0.0))

    assert code == 0
    assert result.rise_transit_set.has_events
    day_length = result.sunset - result.sunrise
    assert day_length == pytest.approx(12.1, abs=0.15)


def test_hour_angle_none_when_horizon_never_crossed() -> None:
    assert sun_hour_angle_at_rise_set(80.0, -23.44, -0.8334) is None
    assert sun_hour_angle_at_rise_set(80.0, 23.44, -0.8334) is None
    h0 = sun_hour_angle_at_rise_set(0.0, 0.0, 0.0)
    assert h0 == pytest.approx(90.0)


def test_approximate_event_fractions_wrap() -> None:
    transit, rise, set_ = approx_sun_rise_and_set(0.05, 90.0)

    assert transit == pytest.approx(0.05)
    assert rise == pytest.approx(0.8)
    assert set_ == pytest.approx(0.3)


def test_interpolation_matches_quadratic() -> None:
    assert interpolate_alpha_delta((1.0, 2.0, 3.0), 0.5) == pytest.approx(2.5)
    assert interpolate_alpha_delta((1.0, 2.0, 3.5), 1.0) == pytest.approx(3.5)
    assert interpolate_alpha_delta((1.0, 2.0, 3.5), -1.0) == pytest.approx(1.0)


def test_interpolation_difference_of_two_is_reduced() -> None:
    # b = 2.0 sits on the wrap boundary and folds to its fractional part.
    assert interpolate_alpha_delta((1.0, 2.0, 4.0), 1.0) == pytest.approx(2.0)
    assert interpolate_alpha_delta((1.0, 2.0, 3.99), 1.0) == pytest.approx(3.99)


def test_interpolation_reduces_full_turn_differences() -> None:
    samples = (359.0, 0.2, 1.2)

    assert interpolate_alpha_delta(samples, 0.0) == pytest.approx(0.2)
    assert interpolate_alpha_delta(samples, 0.5) == pytest.approx(0.6)


def test_equation_of_time_folds_into_twenty_minutes() -> None:
    assert equation_of_time(10.0, 10.0 - 0.0057183, 0.0, 23.44) == pytest.approx(0.0, abs=1e-9)
    # A raw value of 4 * 359.75 minutes folds back by a full day.
    folded = equation_of_time(359.75 + 0.0057183, 0.0, 0.0, 23.44)
    assert folded == pytest.approx(1439.0 - 1440.0)


def test_dayfrac_to_local_hour() -> None:
    assert dayfrac_to_local_hr(0.5, 0.0) == pytest.approx(12.0)
    assert dayfrac_to_local_hr(0.1, -7.0) == pytest.approx(24.0 * (0.1 - 7.0 / 24.0 + 1.0))
    assert 0.0 <= dayfrac_to_local_hr(1.25, 3.0) < 24.0
