"""Interactive drawing tools for the native representation.

A tool is started at the first pointer position, recomputes its shape on
every pointer move and commits on the second click. The segment and circle
tools differ only in how the shape is computed from the fixed point, the
live point and the current reference frame.

The host is responsible for delivering pointer positions, drawing the
preview and persisting committed shapes (``on_commit``).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple, Type

import numpy as np

from .circle import sample_circle
from .frame import FrameConfigurationError, FrameContext, as_canvas_point
from .segment import DEFAULT_RESOLUTION, sample_segment
from .shapes import Polyline, Shape, apply_affine

logger = logging.getLogger(__name__)

ESCAPE = "\x1b"

CommitCallback = Callable[[Shape, str], None]


class ToolUpdate(NamedTuple):
    """Result of a tool recomputation: preview shape and status value."""
    shape: Shape
    status: float
    status_text: str


class ShapeTool(ABC):
    """Two-point tool: a fixed first point and a live second point.

    Subclasses supply the shape computation and the user-facing texts.
    """

    mode: str = ""
    explanation: str = ""
    status_label: str = ""
    commit_label: str = ""

    def __init__(
        self,
        context: FrameContext,
        pointer: Any,
        on_commit: Optional[CommitCallback] = None,
        resolution: int = DEFAULT_RESOLUTION,
    ) -> None:
        self.context = context
        self.on_commit = on_commit
        self.resolution = resolution
        start = as_canvas_point(pointer, "pointer")
        self.fixed = start
        self.current = start.copy()
        self.active = True
        self.committed = False
        self.cancelled = False
        self.last: Optional[ToolUpdate] = None

    @classmethod
    def start(
        cls,
        context: FrameContext,
        pointer: Any,
        on_commit: Optional[CommitCallback] = None,
        resolution: int = DEFAULT_RESOLUTION,
    ) -> "ShapeTool":
        return cls(context, pointer, on_commit=on_commit, resolution=resolution)

    @abstractmethod
    def _compute(self, fixed: np.ndarray, live: np.ndarray) -> Tuple[Shape, float]:
        pass

    def compute(self) -> ToolUpdate:
        shape, status = self._compute(self.fixed, self.current)
        self.last = ToolUpdate(shape, status, f"{self.status_label}: {status}")
        return self.last

    def update(self, pointer: Any) -> ToolUpdate:
        """Move the live point and recompute the preview."""
        if not self.active:
            raise RuntimeError(f"{type(self).__name__} is no longer active")
        self.current = as_canvas_point(pointer, "pointer")
        return self.compute()

    def click(self, pointer: Any) -> Optional[ToolUpdate]:
        """Place the second point and commit.

        A click on the fixed point is refused and returns None.
        """
        if not self.active:
            raise RuntimeError(f"{type(self).__name__} is no longer active")
        pos = as_canvas_point(pointer, "pointer")
        if np.array_equal(pos, self.fixed):
            return None
        self.current = pos
        result = self.compute()
        self.finish()
        return result

    def finish(self) -> Optional[Shape]:
        """Finish the tool and commit the last computed shape.

        A cancelled tool commits nothing and returns None.
        """
        if self.cancelled:
            return None
        if self.last is None:
            self.compute()
        self.active = False
        if not self.committed:
            self.committed = True
            logger.debug("%s: %s", self.commit_label, self.last.status_text)
            if self.on_commit is not None:
                self.on_commit(self.last.shape, self.commit_label)
        return self.last.shape

    def key(self, text: str) -> bool:
        """Handle a key press; Escape cancels the tool without committing."""
        if text == ESCAPE:
            self.active = False
            if not self.committed:
                self.cancelled = True
                logger.debug("%s cancelled", self.mode)
            return True
        return False


class SegmentTool(ShapeTool):
    mode = "native_line_segment"
    explanation = "Native Tool: line segment between two points"
    status_label = "Hyperbolic length"
    commit_label = "create line"

    def _compute(self, fixed: np.ndarray, live: np.ndarray) -> Tuple[Shape, float]:
        sample = sample_segment(fixed, live, self.context.frame, self.resolution)
        return sample.polyline, sample.length


class CircleTool(ShapeTool):
    mode = "native_circle"
    explanation = (
        "Native Tool: circle (center = first point, "
        "radius = distance between center and second point)"
    )
    status_label = "Hyperbolic radius"
    commit_label = "create circle"

    def _compute(self, fixed: np.ndarray, live: np.ndarray) -> Tuple[Shape, float]:
        sample = sample_circle(fixed, live, self.context.frame, self.resolution)
        return sample.shape, sample.radius


MODES: Dict[str, Type[ShapeTool]] = {
    SegmentTool.mode: SegmentTool,
    CircleTool.mode: CircleTool,
}


def start_mode_tool(
    mode: str,
    context: FrameContext,
    pointer: Any,
    on_commit: Optional[CommitCallback] = None,
    resolution: int = DEFAULT_RESOLUTION,
) -> ShapeTool:
    """Start the tool registered for ``mode``.

    Raises
    ------
    KeyError
        If no tool is registered for ``mode``.
    """
    try:
        tool_cls = MODES[mode]
    except KeyError:
        raise KeyError(f"Unknown tool mode {mode!r}; expected one of {sorted(MODES)}") from None
    logger.info(tool_cls.explanation)
    return tool_cls.start(context, pointer, on_commit=on_commit, resolution=resolution)


def set_reference_ray(
    context: FrameContext,
    selection: Any,
    matrix: Optional[np.ndarray] = None,
) -> bool:
    """Set the reference frame from the host's primary selection.

    The selection must be an open Polyline; its first segment (after
    ``matrix``, the selection's placement on the canvas) becomes the
    reference ray.

    Returns
    -------
    bool
        True if the frame was replaced.
    """
    if isinstance(selection, Polyline) and not selection.closed and len(selection) >= 2:
        p1, p2 = apply_affine(selection.points[:2], matrix)
        try:
            frame = context.set_from_segment(p1, p2)
        except FrameConfigurationError as exc:
            logger.warning("Could not set reference ray: %s", exc)
            return False
        logger.info("Set origin of hyperbolic plane to: %s", frame.origin.tolist())
        return True

    logger.warning("Could not set reference ray. Ensure that your primary selection is a line.")
    return False


__all__ = [
    "ESCAPE",
    "ToolUpdate",
    "ShapeTool",
    "SegmentTool",
    "CircleTool",
    "MODES",
    "start_mode_tool",
    "set_reference_ray",
]
