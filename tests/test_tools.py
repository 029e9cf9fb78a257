"""Tests for the interactive tools and the reference ray action."""

import logging

import numpy as np
import pytest

from nativeplane.frame import FrameContext, ReferenceFrame
from nativeplane.shapes import CircleShape, Polyline
from nativeplane.tools import (
    ESCAPE,
    MODES,
    CircleTool,
    SegmentTool,
    ShapeTool,
    set_reference_ray,
    start_mode_tool,
)


@pytest.fixture
def context():
    return FrameContext()


@pytest.fixture
def commits():
    return []


def recorder(commits):
    def on_commit(shape, label):
        commits.append((shape, label))
    return on_commit


class TestModes:
    """Tests for the mode registry."""

    def test_registered_modes(self):
        assert MODES["native_line_segment"] is SegmentTool
        assert MODES["native_circle"] is CircleTool

    def test_unknown_mode(self, context):
        with pytest.raises(KeyError):
            start_mode_tool("native_ellipse", context, [0, 0])

    def test_start_mode_tool(self, context):
        tool = start_mode_tool("native_circle", context, [70, 70])

        assert isinstance(tool, CircleTool)
        assert tool.active


class TestSegmentTool:
    """Tests for SegmentTool."""

    def test_update_preview(self, context):
        tool = SegmentTool.start(context, [70, 90])

        update = tool.update([120, 30])

        assert isinstance(update.shape, Polyline)
        assert len(update.shape) == 51
        assert update.status > 0
        assert update.status_text == f"Hyperbolic length: {update.status}"

    def test_click_commits(self, context, commits):
        tool = SegmentTool.start(context, [70, 90], on_commit=recorder(commits))
        tool.update([100, 100])

        result = tool.click([120, 30])

        assert result is not None
        assert not tool.active
        assert len(commits) == 1
        shape, label = commits[0]
        assert label == "create line"
        np.testing.assert_allclose(shape.last, [120, 30], atol=1e-5)

    def test_click_on_fixed_point_refused(self, context, commits):
        tool = SegmentTool.start(context, [70, 90], on_commit=recorder(commits))

        assert tool.click([70, 90]) is None
        assert tool.active
        assert commits == []

    def test_escape_cancels(self, context, commits):
        tool = SegmentTool.start(context, [70, 90], on_commit=recorder(commits))
        tool.update([80, 80])

        assert tool.key(ESCAPE)
        assert not tool.active
        assert tool.cancelled
        assert commits == []
        with pytest.raises(RuntimeError):
            tool.update([90, 90])

        assert tool.finish() is None
        assert commits == []

    def test_escape_after_commit_keeps_commit(self, context, commits):
        tool = SegmentTool.start(context, [70, 90], on_commit=recorder(commits))
        tool.click([120, 30])

        tool.key(ESCAPE)

        assert not tool.cancelled
        assert len(commits) == 1

    def test_base_tool_is_abstract(self, context):
        with pytest.raises(TypeError):
            ShapeTool(context, [0, 0])

    def test_other_keys_ignored(self, context):
        tool = SegmentTool.start(context, [70, 90])

        assert not tool.key("a")
        assert tool.active

    def test_reads_current_frame(self, context):
        """A new frame takes effect on the next update."""
        tool = SegmentTool.start(context, [64, 64])
        before = tool.update([128, 64]).status

        context.set_from_segment([64, 64], [96, 64])
        after = tool.update([128, 64]).status

        np.testing.assert_allclose(before, 4.0, rtol=1e-10)
        np.testing.assert_allclose(after, 8.0, rtol=1e-10)

    def test_finish_without_update(self, context, commits):
        tool = SegmentTool.start(context, [70, 90], on_commit=recorder(commits))

        shape = tool.finish()

        assert len(shape) == 51
        assert len(commits) == 1

    def test_finish_commits_once(self, context, commits):
        tool = SegmentTool.start(context, [70, 90], on_commit=recorder(commits))
        tool.click([10, 10])

        tool.finish()

        assert len(commits) == 1


class TestCircleTool:
    """Tests for CircleTool."""

    def test_status_text(self, context):
        tool = CircleTool.start(context, [90, 90])

        update = tool.update([90, 110])

        assert update.status_text.startswith("Hyperbolic radius: ")
        assert update.shape.closed

    def test_exact_circle_at_origin(self, context, commits):
        tool = CircleTool.start(context, context.frame.origin, on_commit=recorder(commits))

        tool.click(context.frame.origin + np.array([10.0, 0.0]))

        shape, label = commits[0]
        assert label == "create circle"
        assert isinstance(shape, CircleShape)
        assert shape.radius == 10.0


class TestSetReferenceRay:
    """Tests for set_reference_ray."""

    def test_line_selection(self, context, caplog):
        selection = Polyline(np.array([[10.0, 20.0], [50.0, 20.0]]))

        with caplog.at_level(logging.INFO, logger="nativeplane"):
            ok = set_reference_ray(context, selection)

        assert ok
        np.testing.assert_array_equal(context.frame.origin, [10.0, 20.0])
        assert context.frame.scale == 10.0
        assert context.version == 1
        assert "Set origin of hyperbolic plane to" in caplog.text

    def test_matrix_applied(self, context):
        selection = Polyline(np.array([[0.0, 0.0], [4.0, 0.0]]))
        matrix = np.array([[2.0, 0.0, 5.0], [0.0, 2.0, 7.0], [0.0, 0.0, 1.0]])

        assert set_reference_ray(context, selection, matrix)

        np.testing.assert_array_equal(context.frame.origin, [5.0, 7.0])
        np.testing.assert_array_equal(context.frame.target, [13.0, 7.0])
        assert context.frame.scale == 2.0

    def test_uses_first_segment(self, context):
        selection = Polyline(np.array([[0.0, 0.0], [8.0, 0.0], [8.0, 100.0]]))

        assert set_reference_ray(context, selection)

        assert context.frame.scale == 2.0

    @pytest.mark.parametrize(
        "selection",
        [
            None,
            "not a path",
            Polyline(np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]]), closed=True),
            Polyline(np.array([[3.0, 3.0]])),
        ],
    )
    def test_rejected_selection(self, context, caplog, selection):
        before = context.frame

        with caplog.at_level(logging.WARNING, logger="nativeplane"):
            ok = set_reference_ray(context, selection)

        assert not ok
        assert context.frame is before
        assert "Could not set reference ray" in caplog.text

    def test_zero_length_rejected(self, context, caplog):
        selection = Polyline(np.array([[5.0, 5.0], [5.0, 5.0]]))

        with caplog.at_level(logging.WARNING, logger="nativeplane"):
            ok = set_reference_ray(context, selection)

        assert not ok
        assert context.version == 0
        assert isinstance(context.frame, ReferenceFrame)
        assert "Could not set reference ray" in caplog.text
