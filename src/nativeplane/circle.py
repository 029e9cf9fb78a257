"""Sampling of hyperbolic circles.

The circle is first built for a center on the positive x-axis. Seen from
the origin its points have radii between ``r_min = |c - R|`` and
``r_max = c + R``; for each radius in that range the angle of the circle
point follows from the law of cosines (``theta``). One half of the
boundary is swept from ``r_max`` to ``r_min``, the other half is its mirror
image, and the whole boundary is finally rotated to the center's angle.

Close to ``r_min`` the angle changes quickly with the radius, so the sweep
is refined there.
"""

from __future__ import annotations

import math
from typing import List, NamedTuple, Union

import numpy as np

from .frame import ReferenceFrame, as_canvas_point
from .geometry import PolarPoint, TWO_PI, native_distance, theta
from .motions import rotate_by
from .segment import DEFAULT_RESOLUTION, validate_resolution
from .shapes import CircleShape, Polyline
from .transform import polar_to_canvas, to_native

MIN_CIRCLE_STEP = 0.01

# Refinement starts this many steps above r_min
_DETAIL_STEPS = 5.0
# Refined steps are this much finer than the sweep step
_DETAIL_FACTOR = 5.0
# Radii this close to r_min count as r_min
_R_MIN_SLACK = 1e-5


class CircleSample(NamedTuple):
    """Shape approximating a circle and its hyperbolic radius."""
    shape: Union[Polyline, CircleShape]
    radius: float


def _half_boundary(center_radius: float, radius: float, resolution: int) -> List[PolarPoint]:
    """Points of the upper half boundary for a center at angle 0, r_max → r_min."""
    r_min = abs(center_radius - radius)
    r_max = center_radius + radius

    step = max((r_max - r_min) / resolution, MIN_CIRCLE_STEP)
    detail_threshold = _DETAIL_STEPS * step

    path: List[PolarPoint] = []
    angle = 0.0

    def angle_at(r: float, previous: float) -> float:
        # nan or negative: keep the previous angle
        candidate = theta(center_radius, r, radius)
        if candidate >= 0.0:
            return candidate
        return previous

    r = r_max
    while r >= r_min:
        angle = angle_at(r, angle)
        path.append(PolarPoint(r, angle))

        if r > r_min + _R_MIN_SLACK and r - r_min < detail_threshold:
            detail_step = step / _DETAIL_FACTOR
            if r <= r_min + step + _R_MIN_SLACK:
                detail_step /= 2.0

            detail_r = r - detail_step
            while detail_r > r - step:
                angle = angle_at(detail_r, angle)
                if detail_r >= r_min:
                    path.append(PolarPoint(detail_r, angle))
                detail_r -= detail_step

        r -= step

    # Closest point to the origin lies on the center's axis: on the far side
    # when the origin is inside the circle.
    inner_angle = math.pi if center_radius < radius else 0.0
    path.append(PolarPoint(r_min, inner_angle))
    return path


def sample_circle(
    center: np.ndarray,
    boundary: np.ndarray,
    frame: ReferenceFrame,
    resolution: int = DEFAULT_RESOLUTION,
) -> CircleSample:
    """Approximate the hyperbolic circle around ``center`` through ``boundary``.

    Parameters
    ----------
    center : array-like
        Canvas center, shape (2,).
    boundary : array-like
        Canvas point on the circle, shape (2,).
    frame : ReferenceFrame
        Current reference frame.
    resolution : int
        Number of sweep steps per half boundary (before refinement).

    Returns
    -------
    CircleSample
        A closed Polyline, or a CircleShape when the center is the frame
        origin (the hyperbolic circle is then a Euclidean one), together
        with the hyperbolic radius.
    """
    resolution = validate_resolution(resolution)
    center = as_canvas_point(center, "center")
    boundary = as_canvas_point(boundary, "boundary")

    native_center = to_native(center, frame)
    radius = native_distance(native_center, to_native(boundary, frame))

    if np.array_equal(center, frame.origin):
        return CircleSample(CircleShape(center, np.linalg.norm(boundary - center)), radius)

    half = _half_boundary(native_center.radius, radius, resolution)

    # Mirror on the x-axis, skipping the two axis points, walking backwards
    mirrored = [PolarPoint(p.radius, TWO_PI - p.angle) for p in reversed(half[1:-1])]
    path = [rotate_by(p, native_center.angle) for p in half + mirrored]

    if not path:
        return CircleSample(Polyline(center[None, :], closed=True), radius)

    radii = np.array([p.radius for p in path])
    angles = np.array([p.angle for p in path])
    points = polar_to_canvas(radii, angles, frame)

    return CircleSample(Polyline(points, closed=True), radius)


__all__ = ["MIN_CIRCLE_STEP", "CircleSample", "sample_circle"]
