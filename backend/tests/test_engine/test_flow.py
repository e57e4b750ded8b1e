"""Tests for the flow layout arranger."""

from __future__ import annotations

import itertools

import pytest

from widgetgeom.engine.flow import break_lines, layout_flow, measure_flow
from widgetgeom.models.flow import FlowChild, FlowConfig, FlowGravity
from widgetgeom.models.layout import Orientation


ROWS = FlowConfig(column_space=10, row_space=5)
COLUMNS = FlowConfig(orientation=Orientation.HORIZONTAL, column_space=10, row_space=5)


class TestBreakLines:
    def test_rows_wrap_at_width(self, chips):
        lines = break_lines(chips, ROWS, 150)
        assert [line.indices for line in lines] == [[0, 1, 2], [3, 4]]
        assert [line.main_size for line in lines] == [150, 80]
        assert [line.cross_size for line in lines] == [24, 30]

    def test_unbounded_is_one_line(self, chips):
        assert len(break_lines(chips, ROWS, None)) == 1

    def test_oversized_first_child_stays(self):
        lines = break_lines([FlowChild(width=500, height=10), FlowChild(width=10, height=10)], ROWS, 100)
        assert [line.indices for line in lines] == [[0], [1]]

    def test_empty(self):
        assert break_lines([], ROWS, 100) == []


class TestMeasure:
    def test_rows(self, chips):
        m = measure_flow(chips, ROWS, max_width=150)
        assert (m.width, m.height) == (150, 59)

    def test_columns(self, chips):
        m = measure_flow(chips, COLUMNS, max_height=50)
        assert [line.indices for line in m.lines] == [[0, 1], [2], [3], [4]]
        assert (m.width, m.height) == (190, 49)

    def test_padding_added(self, chips):
        cfg = ROWS.model_copy(update={"padding_start": 10, "padding_end": 10, "padding_top": 4, "padding_bottom": 6})
        m = measure_flow(chips, cfg, max_width=170)
        assert (m.width, m.height) == (170, 69)

    def test_margins_count_toward_size(self):
        child = FlowChild(width=10, height=10, margin_start=2, margin_end=3, margin_top=1, margin_bottom=4)
        m = measure_flow([child], ROWS)
        assert (m.width, m.height) == (15, 15)


class TestLayout:
    def test_center_gravity(self, chips):
        frames = layout_flow(chips, ROWS, width=150)
        assert [(f.left, f.top) for f in frames] == [(0, 2), (50, 0), (120, 2), (0, 29), (60, 34)]

    def test_center_gravity_centres_margin_box(self):
        # 10 tall plus a 6 bottom margin, centred in a 30 tall line
        children = [FlowChild(width=10, height=10, margin_bottom=6), FlowChild(width=10, height=30)]
        frames = layout_flow(children, ROWS, width=100)
        assert frames[0].top == 7
        assert frames[0].bottom + 6 <= 30

    def test_top_gravity(self, chips):
        cfg = ROWS.model_copy(update={"gravity": FlowGravity.TOP})
        frames = layout_flow(chips, cfg, width=150)
        assert [f.top for f in frames] == [0, 0, 0, 29, 29]

    def test_bottom_gravity(self, chips):
        cfg = ROWS.model_copy(update={"gravity": FlowGravity.BOTTOM})
        frames = layout_flow(chips, cfg, width=150)
        assert [f.bottom for f in frames] == [24, 24, 24, 59, 59]

    def test_column_gravity_right(self, chips):
        cfg = COLUMNS.model_copy(update={"gravity": FlowGravity.RIGHT})
        frames = layout_flow(chips, cfg, height=50)
        # first column is 60 wide; the 40-wide chip hugs its right side
        assert frames[0].right == 60
        assert frames[1].left == 0
        assert frames[2].left == 70

    def test_row_gravity_ignores_left(self, chips):
        left = layout_flow(chips, ROWS.model_copy(update={"gravity": FlowGravity.LEFT}), width=150)
        center = layout_flow(chips, ROWS, width=150)
        assert left == center

    def test_child_margins_offset_frame(self):
        child = FlowChild(width=10, height=10, margin_start=2, margin_top=3, margin_bottom=1)
        cfg = ROWS.model_copy(update={"gravity": FlowGravity.TOP, "padding_start": 5, "padding_top": 7})
        (frame,) = layout_flow([child], cfg, width=100)
        assert (frame.left, frame.top) == (7, 10)

    @pytest.mark.parametrize("config,bound", [(ROWS, {"width": 120}), (COLUMNS, {"height": 60})])
    def test_frames_disjoint_and_inside_measure(self, chips, config, bound):
        frames = layout_flow(chips, config, **bound)
        for a, b in itertools.combinations(frames, 2):
            assert not a.intersects(b)
        m = measure_flow(chips, config, max_width=bound.get("width"), max_height=bound.get("height"))
        assert max(f.right for f in frames) <= m.width
        assert max(f.bottom for f in frames) <= m.height
