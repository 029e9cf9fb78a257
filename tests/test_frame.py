"""Tests for the reference frame and its context."""

import json

import numpy as np
import pytest

from nativeplane.frame import (
    REFERENCE_UNITS,
    FrameConfigurationError,
    FrameContext,
    ReferenceFrame,
)


class TestReferenceFrame:
    """Tests for ReferenceFrame construction and validation."""

    def test_default(self):
        frame = ReferenceFrame.default()

        np.testing.assert_array_equal(frame.origin, [64.0, 64.0])
        np.testing.assert_array_equal(frame.target, [128.0, 64.0])
        assert frame.scale == 16.0

    def test_from_segment_scale(self):
        """scale = |target - origin| / 4."""
        frame = ReferenceFrame.from_segment([64, 64], [128, 64])

        assert frame.scale == 16.0

        frame = ReferenceFrame.from_segment([0, 0], [30, 40])

        assert frame.scale == 50.0 / REFERENCE_UNITS

    def test_zero_length_segment_rejected(self):
        with pytest.raises(FrameConfigurationError):
            ReferenceFrame.from_segment([10, 10], [10, 10])

    @pytest.mark.parametrize("scale", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_scale_rejected(self, scale):
        with pytest.raises(ValueError):
            ReferenceFrame(origin=[0, 0], target=[1, 0], scale=scale)

    def test_bad_point_shape(self):
        with pytest.raises(ValueError):
            ReferenceFrame(origin=[0, 0, 0], target=[1, 0], scale=1.0)

    def test_json_roundtrip(self):
        frame = ReferenceFrame.from_segment([10.5, -3.0], [20.0, 7.25])

        restored = ReferenceFrame.from_json(frame.to_json())

        np.testing.assert_array_equal(restored.origin, frame.origin)
        np.testing.assert_array_equal(restored.target, frame.target)
        assert restored.scale == frame.scale

    def test_from_dict(self):
        payload = json.loads(ReferenceFrame.default().to_json())

        frame = ReferenceFrame.from_json(payload)

        assert frame.scale == 16.0


class TestFrameContext:
    """Tests for FrameContext."""

    def test_starts_with_default(self):
        context = FrameContext()

        assert context.frame.scale == 16.0
        assert context.version == 0

    def test_set_from_segment_bumps_version(self):
        context = FrameContext()

        frame = context.set_from_segment([0, 0], [8, 0])

        assert context.frame is frame
        assert frame.scale == 2.0
        assert context.version == 1

    def test_failed_write_keeps_frame(self):
        context = FrameContext()
        before = context.frame

        with pytest.raises(FrameConfigurationError):
            context.set_from_segment([1, 1], [1, 1])

        assert context.frame is before
        assert context.version == 0

    def test_set_frame_type_checked(self):
        context = FrameContext()

        with pytest.raises(TypeError):
            context.set_frame({"origin": [0, 0]})
