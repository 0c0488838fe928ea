"""Simple solid shapes used to build attenuation maps."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Sequence

MU_WATER = 0.00968
"""Linear attenuation coefficient of water for 511 keV photons, in mm^-1."""


class GeometryType(enum.IntEnum):
    """Kind of solid that holds the attenuating material."""

    NONE = 0
    SPHERE = 1
    BOX = 2
    DISK = 3
    SPHERE_IN_SPHERE = 4
    HALF_SPHERE = 5
    HALF_SPHERE_IN_HALF_SPHERE = 6
    DISK_IN_DISK = 7


class Orientation(enum.IntEnum):
    """Half-space a half sphere occupies; NONE keeps the whole sphere."""

    NONE = 0
    PLUS_X = 1
    MIN_X = 2
    PLUS_Y = 3
    MIN_Y = 4
    PLUS_Z = 5
    MIN_Z = 6


def is_in_sphere(x: float, y: float, z: float, radius: float) -> bool:
    """True when the point lies strictly inside the sphere around the origin."""
    return (x * x + y * y + z * z) ** 0.5 < radius


def is_in_disk(x: float, y: float, z: float, radius: float, zmin: float, zmax: float) -> bool:
    """True when the point lies strictly inside the cylinder along z."""
    if not (x * x + y * y) ** 0.5 < radius:
        return False
    return zmin < z < zmax


def is_in_box(x: float, y: float, z: float, box: Sequence[float]) -> bool:
    """True when the point lies strictly inside ``box``.

    ``box`` is ``(xmin, xmax, ymin, ymax, zmin, zmax)``.
    """
    xmin, xmax, ymin, ymax, zmin, zmax = _box_bounds(box)
    return xmin < x < xmax and ymin < y < ymax and zmin < z < zmax


def _box_bounds(box: Sequence[float]) -> tuple[float, ...]:
    values = tuple(float(value) for value in box)
    if len(values) != 6:
        raise ValueError(f"a box needs six bounds, got {len(values)}")
    return values


def _in_half_space(orientation: Orientation, x: float, y: float, z: float) -> bool:
    checks = {
        Orientation.PLUS_X: x > 0,
        Orientation.MIN_X: x < 0,
        Orientation.PLUS_Y: y > 0,
        Orientation.MIN_Y: y < 0,
        Orientation.PLUS_Z: z > 0,
        Orientation.MIN_Z: z < 0,
    }
    return checks.get(orientation, True)


@dataclass(frozen=True)
class AttenuationGeometry:
    """Description of an attenuating object centred on the origin.

    Single-material shapes use ``mu``; nested shapes use ``mu_inner`` inside
    ``inner_radius`` and ``mu_outer`` between it and ``radius``. Disks span
    ``zmin < z < zmax``. The whole object is moved along z by ``shift_z``.
    """

    geometry: GeometryType
    radius: float = 0.0
    inner_radius: float = 0.0
    box: Sequence[float] | None = None
    zmin: float = 0.0
    zmax: float = 0.0
    orientation: Orientation = Orientation.NONE
    mu: float = MU_WATER
    mu_outer: float = 0.0
    mu_inner: float = 0.0
    shift_z: float = 0.0

    def __post_init__(self) -> None:
        try:
            geometry = GeometryType(self.geometry)
        except ValueError:
            raise ValueError(f"wrong geometry type: {self.geometry}") from None
        if geometry is GeometryType.NONE:
            raise ValueError("wrong geometry type: NONE")
        object.__setattr__(self, "geometry", geometry)
        object.__setattr__(self, "orientation", Orientation(self.orientation))
        if geometry is GeometryType.BOX:
            if self.box is None:
                raise ValueError("a box geometry needs its bounds")
            object.__setattr__(self, "box", _box_bounds(self.box))

    def _nested(self, inside_inner: bool, inside_outer: bool) -> float:
        if inside_inner:
            return self.mu_inner
        if inside_outer:
            return self.mu_outer
        return 0.0

    def mu_at(self, x: float, y: float, z: float) -> float:
        """Attenuation coefficient at a point; 0.0 outside the object."""
        if abs(self.shift_z) > 0.0:
            z = z - self.shift_z

        kind = self.geometry
        if kind is GeometryType.SPHERE:
            return self.mu if is_in_sphere(x, y, z, self.radius) else 0.0
        if kind is GeometryType.BOX:
            return self.mu if is_in_box(x, y, z, self.box) else 0.0
        if kind is GeometryType.DISK:
            return self.mu if is_in_disk(x, y, z, self.radius, self.zmin, self.zmax) else 0.0
        if kind is GeometryType.DISK_IN_DISK:
            return self._nested(
                is_in_disk(x, y, z, self.inner_radius, self.zmin, self.zmax),
                is_in_disk(x, y, z, self.radius, self.zmin, self.zmax),
            )
        if kind is GeometryType.SPHERE_IN_SPHERE:
            return self._nested(
                is_in_sphere(x, y, z, self.inner_radius),
                is_in_sphere(x, y, z, self.radius),
            )
        if kind is GeometryType.HALF_SPHERE:
            inside = is_in_sphere(x, y, z, self.radius) and _in_half_space(
                self.orientation, x, y, z
            )
            return self.mu if inside else 0.0
        # HALF_SPHERE_IN_HALF_SPHERE
        if not _in_half_space(self.orientation, x, y, z):
            return 0.0
        return self._nested(
            is_in_sphere(x, y, z, self.inner_radius),
            is_in_sphere(x, y, z, self.radius),
        )


def threshold_attenuation(values: Iterable[float], threshold: float, mu: float) -> list[float]:
    """Map every value below ``threshold`` to 0.0 and every other value to ``mu``."""
    return [0.0 if value < threshold else mu for value in values]