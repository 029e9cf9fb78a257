#!/usr/bin/env python3
"""Precision profile of the hand-written hyperbolic primitives.

This script compares nativeplane.hypertrig against the C library
(Python's math module) and measures the inverse-pair roundtrips:
1. cosh / sinh / tanh against math.cosh / math.sinh / math.tanh
2. acosh(cosh x), sinh(asinh x), tanh(atanh x)
3. native_distance against the distance of points on a common ray

Key outputs:
- hypertrig_precision_profile.json: max relative errors per function
- hypertrig_precision_profile.png: relative error vs argument
"""

import json
import math
import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nativeplane.hypertrig import (
    cosh, sinh, tanh, acosh, asinh, atanh,
    SINH_CROSSOVER, TANH_CROSSOVER,
)
from nativeplane.geometry import PolarPoint, native_distance


def rel_error(values, reference):
    values = np.asarray(values, dtype=float)
    reference = np.asarray(reference, dtype=float)
    scale = np.maximum(np.abs(reference), np.finfo(float).tiny)
    return np.abs(values - reference) / scale


def profile_forward(x):
    """Relative error of cosh/sinh/tanh against math."""
    return {
        "cosh": rel_error([cosh(v) for v in x], [math.cosh(v) for v in x]),
        "sinh": rel_error([sinh(v) for v in x], [math.sinh(v) for v in x]),
        "tanh": rel_error([tanh(v) for v in x], [math.tanh(v) for v in x]),
    }


def profile_roundtrips(x):
    """Relative error of the inverse pairs."""
    t = np.tanh(x / x.max() * 3.0)
    return {
        "acosh(cosh x)": rel_error([acosh(cosh(v)) for v in x], x),
        "sinh(asinh x)": rel_error([sinh(asinh(v)) for v in x], x),
        "tanh(atanh t)": rel_error([tanh(atanh(v)) for v in t], t),
    }


def profile_distance(x):
    """Points on one ray are |r1 - r2| apart."""
    base = PolarPoint(0.5, 1.0)
    return rel_error(
        [native_distance(base, PolarPoint(0.5 + v, 1.0)) for v in x],
        x,
    )


def main():
    output_dir = Path(__file__).parent

    x = np.logspace(-6, np.log10(30.0), 600)

    print("=" * 60)
    print("HYPERTRIG PRECISION PROFILE")
    print("=" * 60)
    print(f"\nCrossovers: sinh {SINH_CROSSOVER}, tanh {TANH_CROSSOVER}")

    forward = profile_forward(x)
    roundtrips = profile_roundtrips(x)
    distance = profile_distance(x)

    summary = {}
    print("\nMax relative error:")
    for name, err in {**forward, **roundtrips, "native_distance": distance}.items():
        summary[name] = float(err.max())
        print(f"  {name:>16s}: {err.max():.2e}")

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))

    ax1 = axes[0]
    for name, err in forward.items():
        ax1.loglog(x, np.maximum(err, 1e-18), ".", markersize=2, label=name)
    ax1.axvline(SINH_CROSSOVER, color="gray", linestyle="--", label="sinh crossover")
    ax1.axvline(TANH_CROSSOVER, color="gray", linestyle=":", label="tanh crossover")
    ax1.set_title("Forward functions vs math")

    ax2 = axes[1]
    for name, err in roundtrips.items():
        ax2.loglog(x, np.maximum(err, 1e-18), ".", markersize=2, label=name)
    ax2.set_title("Inverse roundtrips")

    ax3 = axes[2]
    ax3.loglog(x, np.maximum(distance, 1e-18), ".", markersize=2, label="same-ray distance")
    ax3.set_title("native_distance on a ray")

    for ax in axes:
        ax.set_xlabel("argument")
        ax.set_ylabel("relative error")
        ax.grid(True, alpha=0.3)
        ax.legend(fontsize=8)

    plt.tight_layout()
    plt.savefig(output_dir / "hypertrig_precision_profile.png", dpi=150)
    plt.close()
    print(f"\nSaved: {output_dir / 'hypertrig_precision_profile.png'}")

    with open(output_dir / "hypertrig_precision_profile.json", "w") as f:
        json.dump({"n_points": len(x), "max_rel_error": summary}, f, indent=2)
    print(f"Saved: {output_dir / 'hypertrig_precision_profile.json'}")


if __name__ == "__main__":
    main()
