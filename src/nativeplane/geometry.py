"""Native polar points, distances and the angle solver.

A point of the hyperbolic plane in the native representation is given by
its hyperbolic distance from the origin (radius) and its direction relative
to the reference axis (angle). Both operations here come from the
hyperbolic law of cosines:

    cosh(c) = cosh(a) cosh(b) - sinh(a) sinh(b) cos(γ)

References:
    Beardon, "The Geometry of Discrete Groups", §7.12
"""

from __future__ import annotations

import math
from typing import NamedTuple

from .hypertrig import acosh, cosh, sinh

TWO_PI = 2.0 * math.pi


class PolarPoint(NamedTuple):
    """Point in native coordinates; angle in [0, 2π)."""
    radius: float
    angle: float


def normalize_angle(phi: float) -> float:
    """Map ``phi`` into [0, 2π)."""
    phi = math.fmod(phi, TWO_PI)
    while phi < 0.0:
        phi += TWO_PI
    # fmod(-tiny) + 2π can round up to 2π
    if phi >= TWO_PI:
        phi = 0.0
    return phi


def polar_point(radius: float, angle: float) -> PolarPoint:
    """Build a PolarPoint with a normalized angle."""
    return PolarPoint(float(radius), normalize_angle(float(angle)))


def native_distance(p: PolarPoint, q: PolarPoint) -> float:
    """Hyperbolic distance between two native points.

    Identical coordinates give exactly 0.0 without going through acosh.
    The angular difference is folded into [0, π] so that angles on both
    sides of the 0/2π seam compare correctly.

    Parameters
    ----------
    p, q : PolarPoint
        Points in native coordinates.

    Returns
    -------
    d : float
        Hyperbolic distance, or nan/inf when the radii overflow cosh.
    """
    if p.radius == q.radius and p.angle == q.angle:
        return 0.0

    delta_phi = math.pi - abs(math.pi - abs(p.angle - q.angle))

    arg = cosh(p.radius) * cosh(q.radius) - sinh(p.radius) * sinh(q.radius) * math.cos(delta_phi)

    # Rounding can leave arg just below 1 for nearly coincident points
    if arg < 1.0:
        arg = 1.0

    return acosh(arg)


def theta(r1: float, r2: float, R: float) -> float:
    """Angle between sides r1 and r2 of a hyperbolic triangle with third side R.

    Returns nan when no such triangle exists (cosine outside [-1, 1]) or
    when r1 or r2 is zero. Callers decide how to fall back.
    """
    denominator = sinh(r1) * sinh(r2)
    if denominator == 0.0:
        return math.nan

    c = (cosh(r1) * cosh(r2) - cosh(R)) / denominator

    if not -1.0 <= c <= 1.0:
        return math.nan
    return math.acos(c)


__all__ = [
    "TWO_PI",
    "PolarPoint",
    "normalize_angle",
    "polar_point",
    "native_distance",
    "theta",
]
