"""Tests for the isosceles triangle builder."""

from __future__ import annotations

import pytest

from widgetgeom.engine.triangle import build_triangle, build_triangle_outline
from widgetgeom.models.geometry import Close, LineTo, MoveTo
from widgetgeom.models.layout import Padding
from widgetgeom.models.triangle import TriangleConfig, TriangleStyle
from widgetgeom.utils.geometry import flatten, outline_polygon, winding_direction


def test_apex_up_path():
    segs = build_triangle(TriangleConfig(), 20, 10)
    assert segs == [MoveTo(10.0, 0.0), LineTo(20.0, 10.0), LineTo(0.0, 10.0), LineTo(10.0, 0.0), Close()]


@pytest.mark.parametrize(
    "style,apex",
    [
        (TriangleStyle.TOP_TO_BOTTOM, (10.0, 0.0)),
        (TriangleStyle.RIGHT_TO_LEFT, (20.0, 5.0)),
        (TriangleStyle.BOTTOM_TO_TOP, (10.0, 10.0)),
        (TriangleStyle.LEFT_TO_RIGHT, (0.0, 5.0)),
    ],
)
def test_apex_sits_mid_edge(style, apex):
    move = build_triangle(TriangleConfig(style=style), 20, 10)[0]
    assert (move.x, move.y) == apex


@pytest.mark.parametrize("style", list(TriangleStyle))
def test_clockwise_and_fills_half_the_box(style):
    segs = build_triangle(TriangleConfig(style=style), 20, 10)
    assert winding_direction(flatten(segs)) == 1
    assert outline_polygon(segs).area == pytest.approx(100.0)


def test_apex_centred_in_padded_box():
    cfg = TriangleConfig(padding_start=4, padding_end=6, padding_top=2)
    segs = build_triangle(cfg, 30, 12)
    assert segs[0] == MoveTo(14.0, 2.0)
    assert segs[1] == LineTo(24.0, 12.0)
    assert segs[2] == LineTo(4.0, 12.0)


def test_padding_larger_than_view_collapses():
    box = Padding(padding_start=30).content_box(20, 10)
    assert (box.width, box.height) == (0.0, 10.0)


def test_outline_carries_color():
    outline = build_triangle_outline(TriangleConfig(color="#123456"), 20, 10)
    assert outline.fill_color == "#123456"
    assert outline.shadow is None
