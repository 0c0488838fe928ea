import pytest

from viprecon.shapes import (
    MU_WATER,
    AttenuationGeometry,
    GeometryType,
    Orientation,
    is_in_box,
    is_in_disk,
    is_in_sphere,
    threshold_attenuation,
)


def test_sphere_is_strict():
    assert is_in_sphere(0.0, 0.0, 0.0, 1.0) is True
    assert is_in_sphere(1.0, 0.0, 0.0, 1.0) is False
    assert is_in_sphere(0.0, 0.5, 0.5, 1.0) is True


def test_disk_checks_radius_and_z():
    assert is_in_disk(1.0, 1.0, 0.0, 2.0, -1.0, 1.0) is True
    assert is_in_disk(1.0, 1.0, 1.0, 2.0, -1.0, 1.0) is False
    assert is_in_disk(3.0, 0.0, 0.0, 2.0, -1.0, 1.0) is False


def test_box_is_strict():
    box = (-1.0, 1.0, -2.0, 2.0, -3.0, 3.0)
    assert is_in_box(0.0, 0.0, 0.0, box) is True
    assert is_in_box(1.0, 0.0, 0.0, box) is False
    assert is_in_box(0.0, 0.0, 3.5, box) is False


def test_box_needs_six_bounds():
    with pytest.raises(ValueError):
        is_in_box(0.0, 0.0, 0.0, (0.0, 1.0))


def test_threshold_attenuation():
    assert threshold_attenuation([0.1, 0.5, 1.0], 0.5, 0.02) == [0.0, 0.02, 0.02]


def test_sphere_geometry_uses_default_mu():
    geometry = AttenuationGeometry(GeometryType.SPHERE, radius=10.0)
    assert geometry.mu_at(0.0, 0.0, 0.0) == MU_WATER == 0.00968
    assert geometry.mu_at(20.0, 0.0, 0.0) == 0.0


def test_sphere_in_sphere_layers():
    geometry = AttenuationGeometry(
        GeometryType.SPHERE_IN_SPHERE, radius=10.0, inner_radius=5.0, mu_outer=0.1, mu_inner=0.2
    )
    assert geometry.mu_at(0.0, 0.0, 1.0) == 0.2
    assert geometry.mu_at(7.0, 0.0, 0.0) == 0.1
    assert geometry.mu_at(11.0, 0.0, 0.0) == 0.0


def test_disk_in_disk_layers():
    geometry = AttenuationGeometry(
        GeometryType.DISK_IN_DISK,
        radius=10.0,
        inner_radius=5.0,
        mu_outer=0.1,
        mu_inner=0.2,
        zmin=-1.0,
        zmax=1.0,
    )
    assert geometry.mu_at(1.0, 1.0, 0.0) == 0.2
    assert geometry.mu_at(8.0, 0.0, 0.0) == 0.1
    assert geometry.mu_at(1.0, 1.0, 5.0) == 0.0


def test_half_sphere_orientation():
    geometry = AttenuationGeometry(
        GeometryType.HALF_SPHERE, radius=10.0, orientation=Orientation.PLUS_X, mu=0.3
    )
    assert geometry.mu_at(2.0, 0.0, 0.0) == 0.3
    assert geometry.mu_at(-2.0, 0.0, 0.0) == 0.0


def test_half_sphere_in_half_sphere():
    geometry = AttenuationGeometry(
        GeometryType.HALF_SPHERE_IN_HALF_SPHERE,
        radius=10.0,
        inner_radius=4.0,
        orientation=Orientation.MIN_Z,
        mu_outer=0.1,
        mu_inner=0.2,
    )
    assert geometry.mu_at(0.0, 0.0, -1.0) == 0.2
    assert geometry.mu_at(0.0, 0.0, -6.0) == 0.1
    assert geometry.mu_at(0.0, 0.0, 1.0) == 0.0


def test_shift_in_z_moves_object():
    geometry = AttenuationGeometry(GeometryType.SPHERE, radius=5.0, mu=0.4, shift_z=10.0)
    assert geometry.mu_at(0.0, 0.0, 10.0) == 0.4
    assert geometry.mu_at(0.0, 0.0, 0.0) == 0.0


def test_box_geometry():
    geometry = AttenuationGeometry(GeometryType.BOX, box=(-1, 1, -1, 1, -1, 1), mu=0.5)
    assert geometry.mu_at(0.0, 0.0, 0.0) == 0.5
    assert geometry.mu_at(0.0, 2.0, 0.0) == 0.0


def test_box_geometry_requires_bounds():
    with pytest.raises(ValueError):
        AttenuationGeometry(GeometryType.BOX)


def test_none_geometry_rejected():
    with pytest.raises(ValueError):
        AttenuationGeometry(GeometryType.NONE)


def test_unknown_geometry_rejected():
    with pytest.raises(ValueError):
        AttenuationGeometry(42)