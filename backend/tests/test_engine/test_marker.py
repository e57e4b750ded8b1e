"""Tests for the corner marker outline and label placement."""

from __future__ import annotations

import itertools
import logging

import pytest

from widgetgeom.engine.marker import build_marker, build_marker_outline, marker_label, resolve_marker
from widgetgeom.models.geometry import ArcTo, Close, LineTo, MoveTo, Rect
from widgetgeom.models.marker import MarkerConfig, MarkerPosition, MarkerStyle
from widgetgeom.utils.geometry import flatten, outline_polygon, winding_direction


def _vertices(segs) -> set[tuple[float, float]]:
    return {(s.x, s.y) for s in segs if isinstance(s, (MoveTo, LineTo))}


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


def test_auto_sizes_follow_view():
    geo = resolve_marker(MarkerConfig(), 100, 179)
    assert geo.corner_radius == pytest.approx(27 / 179 * 100)
    assert geo.cut_length == pytest.approx(27 / 179 * 100)
    assert geo.text_size == pytest.approx(42 / 179 * 100)


def test_square_is_shorter_padded_side():
    geo = resolve_marker(MarkerConfig(padding_start=10), 200, 100)
    assert geo.square == Rect(10.0, 0.0, 110.0, 100.0)


# ---------------------------------------------------------------------------
# outline
# ---------------------------------------------------------------------------


def test_plain_triangle_left_top():
    segs = build_marker(MarkerConfig(), 100, 100)
    assert segs == [MoveTo(0.0, 0.0), LineTo(100.0, 0.0), LineTo(0.0, 100.0), LineTo(0.0, 0.0), Close()]


@pytest.mark.parametrize(
    "position,corners",
    [
        (MarkerPosition.LEFT_TOP, {(0.0, 0.0), (100.0, 0.0), (0.0, 100.0)}),
        (MarkerPosition.RIGHT_TOP, {(100.0, 0.0), (100.0, 100.0), (0.0, 0.0)}),
        (MarkerPosition.RIGHT_BOTTOM, {(100.0, 100.0), (0.0, 100.0), (100.0, 0.0)}),
        (MarkerPosition.LEFT_BOTTOM, {(0.0, 100.0), (0.0, 0.0), (100.0, 100.0)}),
    ],
)
def test_triangle_covers_its_corner(position, corners):
    assert _vertices(build_marker(MarkerConfig(position=position), 100, 100)) == corners


@pytest.mark.parametrize(
    "position,oval,start",
    [
        (MarkerPosition.LEFT_TOP, Rect(0.0, 0.0, 20.0, 20.0), 180.0),
        (MarkerPosition.RIGHT_TOP, Rect(80.0, 0.0, 100.0, 20.0), 270.0),
        (MarkerPosition.RIGHT_BOTTOM, Rect(80.0, 80.0, 100.0, 100.0), 0.0),
        (MarkerPosition.LEFT_BOTTOM, Rect(0.0, 80.0, 20.0, 100.0), 90.0),
    ],
)
def test_rounded_corner_arc(position, oval, start):
    cfg = MarkerConfig(position=position, style=MarkerStyle.CORNER_TRIANGLE, corner_radius=10)
    segs = build_marker(cfg, 100, 100)
    arc = segs[4]
    assert isinstance(arc, ArcTo)
    assert arc.oval == oval
    assert (arc.start_angle, arc.sweep_angle) == (start, 90.0)
    # the arc closes the outline back onto its first point
    assert arc.end_point.x == pytest.approx(segs[0].x)
    assert arc.end_point.y == pytest.approx(segs[0].y)


def test_missing_triangle_cuts_corner():
    cfg = MarkerConfig(style=MarkerStyle.MISSING_TRIANGLE, missing_triangle_waist_length=20)
    segs = build_marker(cfg, 100, 100)
    assert segs[0] == MoveTo(20.0, 0.0)
    assert segs[3] == LineTo(0.0, 20.0)
    assert outline_polygon(segs).area == pytest.approx(5000.0 - 200.0)


@pytest.mark.parametrize("position,style", list(itertools.product(MarkerPosition, MarkerStyle)))
def test_every_variant_is_clockwise(position, style):
    segs = build_marker(MarkerConfig(position=position, style=style), 100, 100)
    assert winding_direction(flatten(segs)) == 1
    assert outline_polygon(segs).is_valid


def test_oversized_cut_warns(caplog):
    cfg = MarkerConfig(style=MarkerStyle.MISSING_TRIANGLE, missing_triangle_waist_length=80)
    with caplog.at_level(logging.WARNING, logger="widgetgeom.engine.marker"):
        build_marker(cfg, 100, 100)
    assert "missing_triangle" in caplog.text


def test_outline_uses_background_color():
    outline = build_marker_outline(MarkerConfig(bg_color="#00FF00"), 100, 100)
    assert outline.fill_color == "#00FF00"
    assert outline.bounds == Rect(0.0, 0.0, 100.0, 100.0)


# ---------------------------------------------------------------------------
# label
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "position,anchor,rotation",
    [
        (MarkerPosition.LEFT_TOP, (37.5, 37.5), -45.0),
        (MarkerPosition.RIGHT_TOP, (62.5, 37.5), 45.0),
        (MarkerPosition.RIGHT_BOTTOM, (75.0, 75.0), -45.0),
        (MarkerPosition.LEFT_BOTTOM, (25.0, 75.0), 45.0),
    ],
)
def test_label_on_corner_median(position, anchor, rotation):
    label = marker_label(MarkerConfig(text="NEW", position=position), 100, 100)
    assert label.anchor.as_tuple() == pytest.approx(anchor)
    assert label.rotation == rotation
    assert label.text == "NEW"


def test_label_offset_moves_along_rotated_y():
    label = marker_label(MarkerConfig(offset=10), 100, 100)
    shift = 10 / 2 ** 0.5
    assert label.anchor.as_tuple() == pytest.approx((37.5 + shift, 37.5 + shift))
