from __future__ import annotations

import pytest

from solarengine.core.angles import (
    clamp_unit,
    normalize_degrees,
    normalize_fraction,
    normalize_half_turn,
    normalize_signed,
    wrap_minutes,
)


@pytest.mark.parametrize(
    ("angle", "expected"),
    [(0.0, 0.0), (360.0, 0.0), (-30.0, 330.0), (725.0, 5.0), (359.9999999999, 0.0)],
)
def test_normalize_degrees(angle: float, expected: float) -> None:
    assert normalize_degrees(angle) == pytest.approx(expected)


def test_normalize_signed_range() -> None:
    assert normalize_signed(180.0) == 180.0
    assert normalize_signed(190.0) == pytest.approx(-170.0)
    assert normalize_signed(-180.0) == 180.0


def test_normalize_half_turn_and_fraction() -> None:
    assert normalize_half_turn(200.0) == pytest.approx(20.0)
    assert normalize_half_turn(-10.0) == pytest.approx(170.0)
    assert normalize_fraction(-0.25) == pytest.approx(0.75)
    assert normalize_fraction(2.0) == 0.0


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [(20.0, 20.0), (-20.0, -20.0), (1439.0, -1.0), (-1430.0, 10.0), (14.6, 14.6)],
)
def test_wrap_minutes(minutes: float, expected: float) -> None:
    assert wrap_minutes(minutes) == pytest.approx(expected)


def test_clamp_unit() -> None:
    assert clamp_unit(1.0000000002) == 1.0
    assert clamp_unit(-3.0) == -1.0
    assert clamp_unit(0.25) == 0.25
