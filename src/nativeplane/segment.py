"""Sampling of hyperbolic line segments.

Both endpoints are moved by rotation and translation so that the first
endpoint lies on the origin. There the segment is the radial ray at the
angle of the moved second endpoint, which is sampled uniformly in radius
and moved back.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .frame import ReferenceFrame
from .geometry import PolarPoint, native_distance
from .motions import rotate_by, translate_horizontally_by
from .transform import from_native, to_native
from .shapes import Polyline

DEFAULT_RESOLUTION = 50


class SegmentSample(NamedTuple):
    """Polyline approximating a segment and its hyperbolic length."""
    polyline: Polyline
    length: float


def validate_resolution(resolution: int) -> int:
    """Raise ValueError unless resolution is a positive integer."""
    if isinstance(resolution, bool) or int(resolution) != resolution or resolution < 1:
        raise ValueError(f"resolution must be a positive integer (got {resolution})")
    return int(resolution)


def sample_segment(
    a: np.ndarray,
    b: np.ndarray,
    frame: ReferenceFrame,
    resolution: int = DEFAULT_RESOLUTION,
) -> SegmentSample:
    """Approximate the hyperbolic segment from ``a`` to ``b``.

    Parameters
    ----------
    a, b : array-like
        Canvas endpoints, shape (2,).
    frame : ReferenceFrame
        Current reference frame.
    resolution : int
        Number of pieces; the polyline has ``resolution + 1`` points.

    Returns
    -------
    SegmentSample
        Open polyline from ≈a to ≈b and the hyperbolic length of the segment.
    """
    resolution = validate_resolution(resolution)

    native_a = to_native(a, frame)
    native_b = to_native(b, frame)
    length = native_distance(native_a, native_b)

    # Move a onto the x-axis, then onto the origin
    b_moved = rotate_by(native_b, -native_a.angle)
    b_moved = translate_horizontally_by(b_moved, -native_a.radius)

    points = np.empty((resolution + 1, 2))
    for i in range(resolution + 1):
        t = i / resolution
        p = PolarPoint(t * b_moved.radius, b_moved.angle)

        p = translate_horizontally_by(p, native_a.radius)
        p = rotate_by(p, native_a.angle)

        points[i] = from_native(p, frame)

    return SegmentSample(Polyline(points, closed=False), length)


__all__ = ["DEFAULT_RESOLUTION", "SegmentSample", "validate_resolution", "sample_segment"]
