"""Demo script for nativeplane artifact generation.

Usage:
    python -m nativeplane.demo

Generates:
    - A fan of hyperbolic segments from an off-origin point
    - Families of hyperbolic circles around and away from the origin
    - Metadata JSON files

Output directory: results/YYYYMMDD_HHMMSS/
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

import numpy as np

from .frame import ReferenceFrame
from .circle import sample_circle
from .segment import sample_segment
from .shapes import as_polyline
from .logging_config import setup_logging


def create_results_dir(base_path: Path | None = None) -> Path:
    """Create a timestamped results directory."""
    if base_path is None:
        base_path = Path(__file__).parent.parent.parent / "results"

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    results_dir = base_path / timestamp
    results_dir.mkdir(parents=True, exist_ok=True)
    (results_dir / "plots").mkdir(exist_ok=True)
    return results_dir


def save_run_info(results_dir: Path, frame: ReferenceFrame, resolution: int) -> None:
    """Save run metadata to JSON."""
    info: Dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
        "python_version": sys.version,
        "numpy_version": np.__version__,
        "resolution": resolution,
    }

    with open(results_dir / "run_info.json", "w") as f:
        json.dump(info, f, indent=2)

    with open(results_dir / "frame.json", "w") as f:
        f.write(frame.to_json())


def demo_native_shapes(
    results_dir: Path,
    frame: ReferenceFrame,
    resolution: int = 50,
) -> None:
    """Segments and circles drawn in the native representation."""
    import matplotlib.pyplot as plt

    fig, axes = plt.subplots(1, 2, figsize=(14, 7))

    # Segment fan
    ax1 = axes[0]
    hub = frame.origin + np.array([0.5, 0.8]) * frame.scale
    lengths = []
    for phi in np.linspace(0.0, 2.0 * np.pi, 16, endpoint=False):
        tip = frame.origin + 3.0 * frame.scale * np.array([np.cos(phi), np.sin(phi)])
        sample = sample_segment(hub, tip, frame, resolution)
        lengths.append(sample.length)
        pts = sample.polyline.points
        ax1.plot(pts[:, 0], pts[:, 1], "-", color="steelblue", linewidth=1)
        ax1.plot([hub[0], tip[0]], [hub[1], tip[1]], ":", color="gray", linewidth=0.5)
    ax1.plot(*hub, "o", color="crimson")
    ax1.set_title(f"Geodesic segments (length {min(lengths):.2f}–{max(lengths):.2f})")

    # Circle families
    ax2 = axes[1]
    for k, offset in enumerate([0.0, 0.6, 1.2, 1.8]):
        center = frame.origin + offset * frame.scale * np.array([1.0, 0.0])
        for R in [0.25, 0.5, 1.0]:
            boundary = center + np.array([0.0, R]) * frame.scale
            sample = sample_circle(center, boundary, frame, resolution)
            pts = as_polyline(sample.shape).points
            closed = np.vstack([pts, pts[:1]])
            ax2.plot(closed[:, 0], closed[:, 1], "-", color=f"C{k}", linewidth=1)
        ax2.plot(*center, "+", color=f"C{k}")
    ax2.set_title("Hyperbolic circles")

    for ax in axes:
        ax.plot(*frame.origin, "ko", markersize=4)
        ax.plot(*frame.target, "k^", markersize=4)
        ax.set_aspect("equal")
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(results_dir / "plots" / "native_shapes.png", dpi=150)
    plt.close()

    print("  Saved native_shapes.png")


def main() -> None:
    """Main demo entrypoint."""
    setup_logging(logging.WARNING)

    print("=" * 60)
    print("Nativeplane Demo: Generating artifacts")
    print("=" * 60)

    frame = ReferenceFrame.default()
    resolution = 50

    print(f"\nFrame: {frame.to_dict()}")
    print(f"Resolution: {resolution}")

    results_dir = create_results_dir()
    print(f"\nResults directory: {results_dir}")

    save_run_info(results_dir, frame, resolution)
    print("Saved run_info.json and frame.json")

    print("\nGenerating plots...")
    demo_native_shapes(results_dir, frame, resolution)

    print("\n" + "=" * 60)
    print("Demo complete!")
    print(f"Results saved to: {results_dir}")
    print("=" * 60)


if __name__ == "__main__":
    main()
