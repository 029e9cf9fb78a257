"""Rigid motions of the native representation.

Only two isometries are needed to bring any pair of points into a standard
position: rotation about the origin and translation along the x-axis (the
geodesic through the origin and the reference target). Once the first
point sits on the origin, the geodesic to the second point is a ray of
constant angle, so no general geodesic solving is required.
"""

from __future__ import annotations

import math

from .geometry import PolarPoint, TWO_PI, native_distance, normalize_angle, theta


def rotate_by(p: PolarPoint, phi: float) -> PolarPoint:
    """Rotate ``p`` about the origin by ``phi``. The radius is unchanged."""
    return PolarPoint(p.radius, normalize_angle(p.angle + phi))


def _translate_on_axis(p: PolarPoint, d: float) -> PolarPoint:
    # Signed position along the axis; crossing the origin flips the side.
    if p.angle == 0.0:
        signed = p.radius + d
    else:
        signed = -p.radius + d
    new_angle = math.pi if signed < 0.0 else 0.0
    return PolarPoint(abs(signed), new_angle)


def translate_horizontally_by(p: PolarPoint, d: float) -> PolarPoint:
    """Translate ``p`` by signed hyperbolic distance ``d`` along the x-axis.

    The translation moves the origin to the point with radius ``|d|`` and
    angle 0 (``d > 0``) or π (``d < 0``).

    Off-axis points are solved in the upper half and mirrored back. The
    new radius is the distance from ``p`` to the preimage of the origin;
    the new angle is the angle at that preimage, from the law of cosines.
    A nan angle (rounding at the edge of the acos domain) is read as 0.

    Parameters
    ----------
    p : PolarPoint
        Point to translate.
    d : float
        Signed translation distance.

    Returns
    -------
    PolarPoint
        The translated point.
    """
    if d == 0.0:
        return p

    if p.angle == 0.0 or p.angle == math.pi:
        return _translate_on_axis(p, d)

    below_axis = p.angle > math.pi
    current = PolarPoint(p.radius, TWO_PI - p.angle if below_axis else p.angle)

    ref = PolarPoint(abs(d), math.pi if d > 0.0 else 0.0)

    new_radius = native_distance(current, ref)

    new_angle = theta(abs(d), new_radius, current.radius)
    if math.isnan(new_angle):
        new_angle = 0.0

    if d < 0.0:
        new_angle = math.pi - new_angle

    if below_axis:
        new_angle = TWO_PI - new_angle

    return PolarPoint(new_radius, normalize_angle(new_angle))


__all__ = ["rotate_by", "translate_horizontally_by"]
