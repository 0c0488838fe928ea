import math

import pytest

from viprecon.compton import (
    MASS_ELECTRON_KEV,
    compton_angle_degrees,
    compton_energy_from_angle_rad,
    geom_angle_degrees,
    min_abs_difference_two_angles_rad,
    position_angle_2d,
)


def test_compton_angle_half_energy_of_511_is_right_angle():
    assert compton_angle_degrees(MASS_ELECTRON_KEV / 2, MASS_ELECTRON_KEV) == pytest.approx(90.0)


def test_compton_angle_grows_with_deposit():
    small = compton_angle_degrees(50.0, 511.0)
    large = compton_angle_degrees(200.0, 511.0)
    assert small is not None and large is not None
    assert 0 < small < large <= 180


@pytest.mark.parametrize("e1, etot", [(600.0, 511.0), (100.0, 0.0), (511.0, 511.0), (400.0, 511.0)])
def test_compton_angle_invalid(e1, etot):
    assert compton_angle_degrees(e1, etot) is None


@pytest.mark.parametrize("degrees", [10.0, 45.0, 90.0, 135.0, 170.0])
def test_energy_angle_round_trip(degrees):
    e1 = compton_energy_from_angle_rad(math.radians(degrees), 511.0)
    assert 0 < e1 < 511.0
    assert compton_angle_degrees(e1, 511.0) == pytest.approx(degrees)


def test_energy_at_zero_angle_is_zero():
    assert compton_energy_from_angle_rad(0.0, 511.0) == 0.0


def test_geom_angle_orthogonal_and_undefined():
    assert geom_angle_degrees((1.0, 0.0, 0.0), (0.0, 3.0, 0.0)) == pytest.approx(90.0)
    assert geom_angle_degrees((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)) is None
    assert geom_angle_degrees((1.0, 0.0, 0.0), (2.0, 0.0, 0.0)) is None


def test_geom_angle_symmetric():
    a, b = (1.0, 2.0, 3.0), (-2.0, 0.5, 1.0)
    assert geom_angle_degrees(a, b) == pytest.approx(geom_angle_degrees(b, a))


@pytest.mark.parametrize(
    "x, y", [(1.0, 2.0), (-1.0, 2.0), (-3.0, -0.5), (2.0, -7.0), (0.0, 4.0), (0.0, -4.0), (-2.0, 0.0), (5.0, 0.0)]
)
def test_position_angle_matches_atan2(x, y):
    assert position_angle_2d(x, y) == pytest.approx(math.atan2(y, x) % (2 * math.pi))


def test_position_angle_nan_raises():
    with pytest.raises(ValueError):
        position_angle_2d(float("nan"), 1.0)


def test_min_abs_difference_wraps():
    assert min_abs_difference_two_angles_rad(0.1, 2 * math.pi - 0.1) == pytest.approx(0.2)
    assert min_abs_difference_two_angles_rad(1.0, 2.5) == pytest.approx(1.5)
    assert min_abs_difference_two_angles_rad(2.5, 1.0) == min_abs_difference_two_angles_rad(1.0, 2.5)