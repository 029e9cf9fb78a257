"""Pytest configuration for nativeplane tests."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Provide a seeded random number generator for reproducibility."""
    return np.random.default_rng(42)


@pytest.fixture
def default_frame():
    """Provide the default reference frame (origin (64, 64), scale 16)."""
    from nativeplane.frame import ReferenceFrame
    return ReferenceFrame.default()
