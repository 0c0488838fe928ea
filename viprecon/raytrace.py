"""Ray, box and sphere geometry helpers plus random sampling on solid angles."""

from __future__ import annotations

import math
import random
from typing import Sequence

Vec3 = Sequence[float]

_DIRECTION_EPSILON = 0.0001
_COLLINEAR_ANGLE = 0.0001


def _sub(a: Vec3, b: Vec3) -> tuple[float, float, float]:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _length(a: Vec3) -> float:
    return math.sqrt(_dot(a, a))


def _axis_slab(
    origin: float, direction: float, lower: float, upper: float
) -> tuple[float, float]:
    """Entry and exit factor of a ray crossing one pair of parallel planes."""
    if direction > 0:
        return (lower - origin) / direction, (upper - origin) / direction
    if direction < 0:
        return (upper - origin) / direction, (lower - origin) / direction
    return 0.0, 1.0


def ray_box_intersection(
    origin: Vec3, direction: Vec3, lower: Vec3, upper: Vec3
) -> tuple[float, float] | None:
    """Return the (enter, exit) factors along ``direction`` through the box.

    The segment ``origin + t * direction`` with ``t`` in (0, 1) must cross the
    box for a result; otherwise None is returned. Direction components within
    1e-4 of zero are treated as parallel to that axis.
    """
    valid = [abs(component) > _DIRECTION_EPSILON for component in direction[:3]]
    if not any(valid):
        return None
    for axis in range(3):
        if not valid[axis] and not lower[axis] <= origin[axis] <= upper[axis]:
            return None

    slabs = [
        _axis_slab(origin[axis], direction[axis], lower[axis], upper[axis])
        if valid[axis]
        else (0.0, 1.0)
        for axis in range(3)
    ]

    tmin, tmax = slabs[0]
    for smin, smax in slabs[1:]:
        if tmin > smax or smin > tmax:
            return None
        tmin = max(tmin, smin)
        tmax = min(tmax, smax)

    enter, leave = (tmin, tmax) if tmin < tmax else (tmax, tmin)
    if 0.0 < enter < 1.0 and 0.0 < leave < 1.0:
        return enter, leave
    return None


def next_ray_intersection(
    origin: Vec3, direction: Vec3, min_bounds: Vec3, max_bounds: Vec3
) -> float:
    """Smallest fraction of ``direction`` that takes ``origin`` to a bound of its cell."""
    factor = 1.0
    for axis in range(3):
        step = direction[axis]
        if step > 0:
            candidate = (max_bounds[axis] - origin[axis]) / step
        elif step < 0:
            candidate = (min_bounds[axis] - origin[axis]) / step
        else:
            candidate = 1.0
        factor = min(factor, candidate) if axis else candidate
    return factor


def is_inside_bounds(min_bounds: Vec3, max_bounds: Vec3, position: Vec3) -> bool:
    """True when ``position`` lies within the closed box."""
    return all(min_bounds[axis] <= position[axis] <= max_bounds[axis] for axis in range(3))


def intersection_distance(
    x1: Vec3, x2: Vec3, centre: Vec3, radius: float
) -> float | None:
    """Length of the line X1->X2 lying inside a sphere, or None if it misses.

    The sphere centre must lie ahead of X1 along the line.
    """
    lor = _sub(x2, x1)
    lor_length = _length(lor)
    if lor_length == 0:
        raise ValueError("the two points of the line coincide")
    unit = (lor[0] / lor_length, lor[1] / lor_length, lor[2] / lor_length)

    to_centre = _sub(centre, x1)
    to_centre_length = _length(to_centre)
    if to_centre_length == 0:
        angle = 0.0
    else:
        cosine = _dot(to_centre, lor) / (to_centre_length * lor_length)
        angle = math.acos(max(-1.0, min(1.0, cosine)))
    t_ca = to_centre_length if angle < _COLLINEAR_ANGLE else _dot(to_centre, unit)
    if t_ca < 0:
        return None

    centre_to_line = math.sqrt(max(0.0, to_centre_length**2 - t_ca**2))
    if centre_to_line > radius:
        return None

    t_hc = math.sqrt(radius * radius - centre_to_line * centre_to_line)
    t0 = t_ca - t_hc
    t1 = t_ca + t_hc
    p0 = tuple(x1[axis] + unit[axis] * t0 for axis in range(3))
    p1 = tuple(x1[axis] + unit[axis] * t1 for axis in range(3))
    return _length(_sub(p1, p0))


def gauss(mean: Vec3, sigma: float, coords: Vec3, dim: int) -> float:
    """Gaussian weight of ``coords`` around ``mean``.

    The prefactor is ``(sqrt(2*pi)*sigma) ** (dim + 1)``.
    """
    factor = math.sqrt(2.0 * math.pi) * sigma
    prefactor = factor ** (dim + 1)
    difference = _sub(coords, mean)
    exponent = -_dot(difference, difference) / (2.0 * sigma * sigma)
    return prefactor * math.exp(exponent)


def random_solid_angle(four_pi: bool = False, rng: random.Random | None = None) -> tuple[float, float]:
    """Draw (phi, theta) flat in phi and cos(theta).

    Over the forward hemisphere cos(theta) is in [0, 1]; with ``four_pi`` it
    spans [-1, 1].
    """
    rng = rng or random.Random()
    phi = 2.0 * math.pi * rng.random()
    cos_theta = rng.random()
    if four_pi:
        cos_theta = 1 - 2 * cos_theta
    return phi, math.acos(cos_theta)


def random_position_on_solid_angle(
    phi: float,
    theta: float,
    z_min: float,
    z_size: float,
    origin: Vec3,
    rng: random.Random | None = None,
) -> tuple[float, float, float]:
    """Point along direction (phi, theta) from ``origin`` at a random z in [z_min, z_min+z_size)."""
    rng = rng or random.Random()
    px = math.sin(theta) * math.cos(phi)
    py = math.sin(theta) * math.sin(phi)
    pz = math.cos(theta)
    z = z_min + rng.uniform(0.0, z_size)
    factor = (z - origin[2]) / pz
    return origin[0] + factor * px, origin[1] + factor * py, z


def pseudo_solid_angle_probability(origin: Vec3, surface: Vec3) -> float:
    """Relative point density at ``surface`` seen from ``origin``, in [0, 1]."""
    radial = _sub(surface, origin)
    z_distance = radial[2]
    if z_distance == 0:
        raise ValueError("surface point lies in the plane of the origin")
    area_1 = z_distance * z_distance
    transverse = math.hypot(radial[0], radial[1])
    theta = math.atan(transverse / z_distance)
    radius_2 = z_distance / math.cos(theta)
    return area_1 / (radius_2 * radius_2)


def distance(v1: Vec3, v2: Vec3) -> float:
    """Euclidean distance between two points."""
    return _length(_sub(v2, v1))