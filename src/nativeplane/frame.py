"""Reference frame of the native hyperbolic plane.

The reference ray (origin → target) fixes the origin of the plane. The
canvas length of the ray stands for ``REFERENCE_UNITS`` hyperbolic units,
which yields the frame scale. Angles are measured from the canvas x-axis;
the direction of the ray does not rotate the plane.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np

logger = logging.getLogger(__name__)

# Hyperbolic length represented by the reference ray
REFERENCE_UNITS = 4.0


class FrameConfigurationError(ValueError):
    """Raised when a reference frame would be degenerate."""
    pass


def as_canvas_point(point: Any, name: str = "point") -> np.ndarray:
    """Return ``point`` as a float array of shape (2,)."""
    arr = np.array(point, dtype=float)
    if arr.shape != (2,):
        raise ValueError(f"{name} must have shape (2,), got {arr.shape}")
    return arr


def _validate_scale(scale: float) -> None:
    """Raise FrameConfigurationError unless scale is a positive finite number."""
    if not (np.isfinite(scale) and scale > 0):
        raise FrameConfigurationError(f"scale must be > 0 (got {scale})")


@dataclass(eq=False)
class ReferenceFrame:
    """Origin, target and scale of the native representation.

    ``scale`` is the canvas length of one hyperbolic unit.
    """

    origin: np.ndarray = field(default_factory=lambda: np.array([64.0, 64.0]))
    target: np.ndarray = field(default_factory=lambda: np.array([128.0, 64.0]))
    scale: float = field(default=16.0)

    def __post_init__(self) -> None:
        self.origin = as_canvas_point(self.origin, "origin")
        self.target = as_canvas_point(self.target, "target")
        self.scale = float(self.scale)
        _validate_scale(self.scale)

    @classmethod
    def default(cls) -> "ReferenceFrame":
        """Return the frame with origin (64, 64), target (128, 64), scale 16."""
        return cls()

    @classmethod
    def from_segment(cls, origin: Any, target: Any) -> "ReferenceFrame":
        """Build the frame defined by the reference ray origin → target.

        Raises
        ------
        FrameConfigurationError
            If origin and target coincide.
        """
        origin = as_canvas_point(origin, "origin")
        target = as_canvas_point(target, "target")
        length = float(np.linalg.norm(target - origin))
        if length == 0.0:
            raise FrameConfigurationError(
                "reference ray has zero length; origin and target coincide"
            )
        return cls(origin=origin, target=target, scale=length / REFERENCE_UNITS)

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation of the frame."""
        return {
            "origin": [float(c) for c in self.origin],
            "target": [float(c) for c in self.target],
            "scale": self.scale,
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the frame to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes | bytearray | Dict[str, Any]) -> "ReferenceFrame":
        """Deserialize a frame from a JSON string or dict."""
        if isinstance(data, (str, bytes, bytearray)):
            payload = json.loads(data)
        else:
            payload = data
        return cls(
            origin=payload["origin"],
            target=payload["target"],
            scale=float(payload["scale"]),
        )


class FrameContext:
    """Holds the current reference frame.

    Every geometry call reads ``context.frame``; the frame is only replaced
    through ``set_frame``, which bumps ``version``.
    """

    def __init__(self, frame: ReferenceFrame | None = None) -> None:
        self._frame = frame if frame is not None else ReferenceFrame.default()
        self._version = 0

    @property
    def frame(self) -> ReferenceFrame:
        return self._frame

    @property
    def version(self) -> int:
        return self._version

    def set_frame(self, frame: ReferenceFrame) -> None:
        if not isinstance(frame, ReferenceFrame):
            raise TypeError(f"expected ReferenceFrame, got {type(frame).__name__}")
        self._frame = frame
        self._version += 1
        logger.debug("Reference frame v%d: %s", self._version, frame.to_dict())

    def set_from_segment(self, origin: Any, target: Any) -> ReferenceFrame:
        """Replace the frame by the one defined by origin → target."""
        frame = ReferenceFrame.from_segment(origin, target)
        self.set_frame(frame)
        return frame


__all__ = [
    "REFERENCE_UNITS",
    "FrameConfigurationError",
    "ReferenceFrame",
    "FrameContext",
    "as_canvas_point",
]
