"""Compton kinematics and angle helpers. Energies are in keV."""

from __future__ import annotations

import math
from typing import Sequence

MASS_ELECTRON_KEV = 511.0


def compton_angle_degrees(e1_kev: float, etot_kev: float) -> float | None:
    """Scattering angle in degrees for energy ``e1_kev`` deposited out of ``etot_kev``.

    Returns None when the energies give no physical angle.
    """
    if etot_kev > 0 and etot_kev - e1_kev > 0:
        cos_compton = 1.0 - MASS_ELECTRON_KEV * (1.0 / (etot_kev - e1_kev) - 1.0 / etot_kev)
        if abs(cos_compton) <= 1:
            return math.degrees(math.acos(cos_compton))
    return None


def compton_energy_from_angle_rad(angle: float, etot_kev: float) -> float:
    """Energy deposited in the scatter for a Compton angle in radians."""
    one_minus_cos = 1.0 - math.cos(angle)
    if one_minus_cos == 0 or etot_kev == 0:
        return 0.0
    return etot_kev / (1.0 + MASS_ELECTRON_KEV / (etot_kev * one_minus_cos))


def geom_angle_degrees(v1: Sequence[float], v2: Sequence[float]) -> float | None:
    """Angle between two 3-vectors in degrees, or None if it is undefined.

    Zero-length vectors and exactly (anti)parallel vectors give None.
    """
    product = sum(a * b for a, b in zip(v1[:3], v2[:3]))
    len1 = math.sqrt(sum(a * a for a in v1[:3]))
    len2 = math.sqrt(sum(b * b for b in v2[:3]))
    if len1 > 0 and len2 > 0:
        cos_theta = product / (len1 * len2)
        if -1.0 < cos_theta < 1.0:
            return math.degrees(math.acos(cos_theta))
    return None


def position_angle_2d(x: float, y: float) -> float:
    """Polar angle of (x, y) in radians, in [0, 2*pi)."""
    if x == 0:
        return 0.5 * math.pi if y > 0 else 1.5 * math.pi
    if y == 0:
        return 0.0 if x > 0 else math.pi
    if x > 0 and y > 0:
        return math.atan(y / x)
    if x < 0 and y > 0:
        return 0.5 * math.pi + math.atan(abs(x / y))
    if x < 0 and y < 0:
        return math.pi + math.atan(abs(y / x))
    if x > 0 and y < 0:
        return 2 * math.pi - math.atan(abs(y / x))
    raise ValueError(f"no position angle for ({x}, {y})")


def min_abs_difference_two_angles_rad(angle1: float, angle2: float) -> float:
    """Smallest absolute difference between two angles in radians."""
    diff = abs(angle1 - angle2)
    if diff > math.pi:
        diff = 2.0 * math.pi - diff
    return diff