"""Conversion between canvas coordinates and native polar coordinates."""

from __future__ import annotations

import math

import numpy as np

from .frame import ReferenceFrame, as_canvas_point
from .geometry import PolarPoint, normalize_angle


def to_native(point: np.ndarray, frame: ReferenceFrame) -> PolarPoint:
    """Transform a canvas point into native coordinates.

    radius = |point - origin| / scale, angle = atan2 of the offset in [0, 2π).
    """
    offset = as_canvas_point(point) - frame.origin
    radius = math.hypot(offset[0], offset[1]) / frame.scale
    angle = normalize_angle(math.atan2(offset[1], offset[0]))
    return PolarPoint(radius, angle)


def from_native(polar: PolarPoint, frame: ReferenceFrame) -> np.ndarray:
    """Transform a native point back into canvas coordinates."""
    r = polar.radius * frame.scale
    return np.array([r * math.cos(polar.angle), r * math.sin(polar.angle)]) + frame.origin


def polar_to_canvas(radii: np.ndarray, angles: np.ndarray, frame: ReferenceFrame) -> np.ndarray:
    """Vectorized ``from_native``.

    Parameters
    ----------
    radii, angles : array-like
        Native coordinates, shape (N,).
    frame : ReferenceFrame
        Frame to map into.

    Returns
    -------
    points : ndarray
        Canvas points, shape (N, 2).
    """
    r = np.asarray(radii, dtype=float) * frame.scale
    phi = np.asarray(angles, dtype=float)
    offsets = np.stack([r * np.cos(phi), r * np.sin(phi)], axis=-1)
    return offsets + frame.origin


__all__ = ["to_native", "from_native", "polar_to_canvas"]
