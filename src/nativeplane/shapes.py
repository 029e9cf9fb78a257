"""Canvas shapes handed to the host: polylines and exact circles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from .frame import as_canvas_point


def _as_points(points: np.ndarray) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[-1] != 2:
        raise ValueError(f"Expected points of shape (N, 2), got {arr.shape}")
    return arr


def apply_affine(points: np.ndarray, matrix: Optional[np.ndarray]) -> np.ndarray:
    """Apply a 2D affine matrix (2x3 or 3x3) to points of shape (..., 2)."""
    pts = np.asarray(points, dtype=float)
    if matrix is None:
        return pts
    m = np.asarray(matrix, dtype=float)
    if m.shape not in ((2, 3), (3, 3)):
        raise ValueError(f"Expected affine matrix of shape (2, 3) or (3, 3), got {m.shape}")
    return pts @ m[:2, :2].T + m[:2, 2]


@dataclass(eq=False)
class Polyline:
    """Ordered canvas points; open (segment) or closed (circle boundary)."""

    points: np.ndarray
    closed: bool = False

    def __post_init__(self) -> None:
        self.points = _as_points(self.points)

    def __len__(self) -> int:
        return self.points.shape[0]

    @property
    def first(self) -> np.ndarray:
        return self.points[0]

    @property
    def last(self) -> np.ndarray:
        return self.points[-1]

    def segments(self) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
        """Yield consecutive point pairs.

        A closed polyline also yields the closing pair. A closed polyline
        of a single point yields the degenerate segment (p, p) so that it
        still draws as something.
        """
        pts = self.points
        n = len(pts)
        if self.closed and n == 1:
            yield pts[0], pts[0]
            return
        for i in range(1, n):
            yield pts[i - 1], pts[i]
        if self.closed and n > 2:
            yield pts[-1], pts[0]

    def length(self) -> float:
        """Euclidean (canvas) length of the polyline."""
        return float(sum(np.linalg.norm(b - a) for a, b in self.segments()))

    def transformed(self, matrix: np.ndarray) -> "Polyline":
        return Polyline(apply_affine(self.points, matrix), closed=self.closed)


@dataclass(eq=False)
class CircleShape:
    """Exact Euclidean circle, used when no sampling is needed."""

    center: np.ndarray
    radius: float

    def __post_init__(self) -> None:
        self.center = as_canvas_point(self.center, "center")
        self.radius = float(self.radius)

    def to_polyline(self, n: int = 64) -> Polyline:
        """Closed polyline through ``n`` equally spaced boundary points."""
        if n < 1:
            raise ValueError(f"n must be >= 1 (got {n})")
        t = np.linspace(0.0, 2.0 * np.pi, n, endpoint=False)
        pts = self.center + self.radius * np.stack([np.cos(t), np.sin(t)], axis=-1)
        return Polyline(pts, closed=True)


Shape = Union[Polyline, CircleShape]


def as_polyline(shape: Shape, n: int = 64) -> Polyline:
    """Return ``shape`` as a polyline, sampling exact circles with ``n`` points."""
    if isinstance(shape, CircleShape):
        return shape.to_polyline(n)
    return shape


__all__ = ["Polyline", "CircleShape", "Shape", "apply_affine", "as_polyline"]
