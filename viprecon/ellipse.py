"""Conic section cut from a Compton cone by a plane of constant z."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Sequence

Vec3 = Sequence[float]


@dataclass
class EllipsParameters:
    """Coefficients of the slice conic plus its centre and semi-axes.

    The conic is ``a*x**2 + 2*c*x*y + b*y**2 + d*x + e*y + f = 0``.
    """

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 0.0
    f: float = 0.0
    axis_a: float = 0.0
    axis_b: float = 0.0
    centre_x: float = 0.0
    centre_y: float = 0.0


def _unit_axis(cone_axis: Vec3) -> tuple[float, float, float]:
    length = math.sqrt(sum(component * component for component in cone_axis[:3]))
    factor = 1.0
    if length != 1.0:
        factor = 1.0 / length if length > 0 else 0.0
    return (factor * cone_axis[0], factor * cone_axis[1], factor * cone_axis[2])


def calculate_ellips_factors(
    slice_z: float, scat_pos: Vec3, cone_axis: Vec3, compton_angle: float
) -> EllipsParameters:
    """Conic where the cone at ``scat_pos`` crosses the plane ``z = slice_z``.

    The coefficients are normalised by ``-1 / cos(angle)**2``; centre and
    semi-axes are filled in by :func:`additional_parameters`.
    """
    lam2 = math.cos(compton_angle) ** 2
    if lam2 == 0:
        raise ValueError("a cone with a right-angle opening has no slice conic")
    scale = -1.0 / lam2

    nx, ny, nz = _unit_axis(cone_axis)
    x1, y1, z1 = scat_pos[0], scat_pos[1], scat_pos[2]
    z = slice_z - z1

    nx2 = nx * nx - lam2
    ny2 = ny * ny - lam2
    nz2 = nz * nz - lam2

    a = nx2
    b = ny2
    c = nx * ny
    d = 2 * (-nx2 * x1 - nx * ny * y1 + nx * nz * z)
    e = 2 * (-ny2 * y1 - nx * ny * x1 + ny * nz * z)
    f = (
        nx2 * x1 * x1
        + ny2 * y1 * y1
        + 2 * nx * ny * x1 * y1
        - 2 * nx * nz * x1 * z
        - 2 * ny * nz * y1 * z
        + nz2 * z * z
    )

    params = EllipsParameters(
        a=a * scale, b=b * scale, c=c * scale, d=d * scale, e=e * scale, f=f * scale
    )
    return additional_parameters(params)


def additional_parameters(params: EllipsParameters) -> EllipsParameters:
    """Return a copy of ``params`` with centre and semi-axes computed.

    Centres along an axis whose quadratic coefficient is zero stay 0, and a
    semi-axis stays 0 unless its square comes out positive.
    """
    centre_x = -0.5 * params.d / params.a if params.a != 0 else 0.0
    centre_y = -0.5 * params.e / params.b if params.b != 0 else 0.0
    axis_a = 0.0
    axis_b = 0.0

    if params.a != 0 and params.b != 0:
        g = -params.f / (params.a * params.b)
        g += centre_x * centre_x / params.b
        g += centre_y * centre_y / params.a
        if params.b * g > 0:
            axis_a = math.sqrt(params.b * g)
        if params.a * g > 0:
            axis_b = math.sqrt(params.a * g)

    return dataclasses.replace(
        params, axis_a=axis_a, axis_b=axis_b, centre_x=centre_x, centre_y=centre_y
    )