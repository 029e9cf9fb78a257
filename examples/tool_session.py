#!/usr/bin/env python
"""Demo: drive the segment and circle tools with scripted pointer events.

This example plays the part of a host editor: it sets the reference ray
from a selected line, starts both tools, feeds pointer moves and clicks,
and collects the committed shapes.
"""

import logging

import numpy as np
import matplotlib.pyplot as plt

from nativeplane.frame import FrameContext
from nativeplane.logging_config import setup_logging
from nativeplane.shapes import Polyline, as_polyline
from nativeplane.tools import set_reference_ray, start_mode_tool


def main():
    setup_logging(logging.INFO)

    context = FrameContext()
    committed = []

    def on_commit(shape, label):
        print(f"  commit: {label}")
        committed.append(shape)

    # The host's primary selection: a line from (100, 100) to (180, 100)
    selection = Polyline(np.array([[100.0, 100.0], [180.0, 100.0]]))
    set_reference_ray(context, selection)
    print(f"Frame: {context.frame.to_dict()}")

    # Segment: press, drag, click
    tool = start_mode_tool("native_line_segment", context, [60.0, 150.0], on_commit=on_commit)
    for x in np.linspace(60.0, 170.0, 5):
        update = tool.update([x, 40.0])
        print(f"  {update.status_text}")
    tool.click([170.0, 40.0])

    # Circle: center, then boundary
    tool = start_mode_tool("native_circle", context, [140.0, 120.0], on_commit=on_commit)
    for r in [5.0, 15.0, 25.0]:
        update = tool.update([140.0 + r, 120.0])
        print(f"  {update.status_text}")
    tool.click([165.0, 120.0])

    # Circle around the origin: exact Euclidean circle
    tool = start_mode_tool("native_circle", context, context.frame.origin, on_commit=on_commit)
    tool.click(context.frame.origin + np.array([0.0, 30.0]))

    fig, ax = plt.subplots(figsize=(8, 8))
    for shape in committed:
        pts = as_polyline(shape).points
        if as_polyline(shape).closed:
            pts = np.vstack([pts, pts[:1]])
        ax.plot(pts[:, 0], pts[:, 1], "-", linewidth=1.5)
    ax.plot(*selection.points.T, "k--", linewidth=1, label="reference ray")
    ax.set_aspect("equal")
    ax.grid(True, alpha=0.3)
    ax.legend()
    ax.set_title(f"Committed shapes (n={len(committed)})")

    plt.tight_layout()
    plt.savefig("tool_session_demo.png", dpi=150)
    print("\nSaved plot to tool_session_demo.png")
    plt.show()


if __name__ == "__main__":
    main()
