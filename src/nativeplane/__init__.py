"""Nativeplane: the hyperbolic plane in its native polar representation.

A point is given by its hyperbolic distance from an origin (radius) and its
direction relative to a reference axis (angle). This package implements:

- Hyperbolic trigonometric primitives (cosh, sinh, tanh and inverses, log1p)
- Conversion between canvas coordinates and native coordinates
- Distances and angles via the hyperbolic law of cosines
- Rotation about the origin and translation along the reference axis
- Polyline sampling of hyperbolic segments and circles
- Two-point drawing tools for an interactive host

References:
    - Cannon, Floyd, Kenyon, Parry (1997), "Hyperbolic Geometry"
    - Plauger (1992), "The Standard C Library"
"""

from nativeplane.hypertrig import cosh, sinh, tanh, log1p, acosh, asinh, atanh
from nativeplane.frame import (
    REFERENCE_UNITS,
    FrameConfigurationError,
    ReferenceFrame,
    FrameContext,
)
from nativeplane.geometry import (
    PolarPoint,
    normalize_angle,
    polar_point,
    native_distance,
    theta,
)
from nativeplane.transform import to_native, from_native, polar_to_canvas
from nativeplane.motions import rotate_by, translate_horizontally_by
from nativeplane.shapes import Polyline, CircleShape, apply_affine, as_polyline
from nativeplane.segment import DEFAULT_RESOLUTION, SegmentSample, sample_segment
from nativeplane.circle import MIN_CIRCLE_STEP, CircleSample, sample_circle
from nativeplane.tools import (
    ToolUpdate,
    ShapeTool,
    SegmentTool,
    CircleTool,
    MODES,
    start_mode_tool,
    set_reference_ray,
)
from nativeplane.logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    # hypertrig
    "cosh",
    "sinh",
    "tanh",
    "log1p",
    "acosh",
    "asinh",
    "atanh",
    # frame
    "REFERENCE_UNITS",
    "FrameConfigurationError",
    "ReferenceFrame",
    "FrameContext",
    # geometry
    "PolarPoint",
    "normalize_angle",
    "polar_point",
    "native_distance",
    "theta",
    # transform
    "to_native",
    "from_native",
    "polar_to_canvas",
    # motions
    "rotate_by",
    "translate_horizontally_by",
    # shapes
    "Polyline",
    "CircleShape",
    "apply_affine",
    "as_polyline",
    # samplers
    "DEFAULT_RESOLUTION",
    "SegmentSample",
    "sample_segment",
    "MIN_CIRCLE_STEP",
    "CircleSample",
    "sample_circle",
    # tools
    "ToolUpdate",
    "ShapeTool",
    "SegmentTool",
    "CircleTool",
    "MODES",
    "start_mode_tool",
    "set_reference_ray",
    # logging
    "setup_logging",
]
