"""Tests for the shadow card."""

from __future__ import annotations

import pytest

from widgetgeom.engine.card import build_card, card_child_frame, card_rect, measure_card, rounded_rect
from widgetgeom.models.card import CardConfig
from widgetgeom.models.flow import FlowChild
from widgetgeom.models.geometry import ArcTo, Close, LineTo, MoveTo, Rect
from widgetgeom.utils.geometry import flatten, path_bounds, winding_direction


CHILD = FlowChild(width=100, height=40, margin_start=2, margin_end=3, margin_top=4, margin_bottom=1)
PADDED = CardConfig(padding_start=5, padding_end=5, padding_top=5, padding_bottom=5)


# ---------------------------------------------------------------------------
# rounded_rect
# ---------------------------------------------------------------------------


class TestRoundedRect:
    def test_hand_computed_path(self):
        segs = rounded_rect(Rect(0, 0, 100, 50), 10)
        assert segs[0] == MoveTo(10.0, 0.0)
        assert segs[1] == LineTo(90.0, 0.0)
        assert (segs[2].oval, segs[2].start_angle) == (Rect(80.0, 0.0, 100.0, 20.0), 270.0)
        assert segs[3] == LineTo(100.0, 40.0)
        assert (segs[4].oval, segs[4].start_angle) == (Rect(80.0, 30.0, 100.0, 50.0), 0.0)
        assert segs[5] == LineTo(10.0, 50.0)
        assert (segs[6].oval, segs[6].start_angle) == (Rect(0.0, 30.0, 20.0, 50.0), 90.0)
        assert segs[7] == LineTo(0.0, 10.0)
        assert (segs[8].oval, segs[8].start_angle) == (Rect(0.0, 0.0, 20.0, 20.0), 180.0)
        assert isinstance(segs[9], Close)

    def test_radius_capped_at_half_short_side(self):
        arcs = [s for s in rounded_rect(Rect(0, 0, 40, 20), 50) if isinstance(s, ArcTo)]
        assert all(a.radius_x == pytest.approx(10.0) for a in arcs)

    def test_square_corners(self):
        segs = rounded_rect(Rect(0, 0, 40, 20), 0)
        assert not any(isinstance(s, ArcTo) for s in segs)
        assert segs[-2] == LineTo(0.0, 0.0)

    def test_bounds_and_winding(self):
        segs = rounded_rect(Rect(10, 10, 110, 70), 12)
        assert path_bounds(segs) == pytest.approx((10.0, 10.0, 110.0, 70.0), abs=1e-6)
        assert winding_direction(flatten(segs)) == 1


# ---------------------------------------------------------------------------
# measure / layout / draw
# ---------------------------------------------------------------------------


def test_card_inset_by_shadow():
    assert card_rect(CardConfig(), 120, 80) == Rect(10.0, 10.0, 110.0, 70.0)
    assert card_rect(CardConfig(shadow_enabled=False), 120, 80) == Rect(0.0, 0.0, 120.0, 80.0)


def test_empty_view_draws_nothing():
    assert card_rect(CardConfig(), 0, 80) is None
    assert build_card(CardConfig(), 120, 0) is None


def test_measure_adds_shadow_both_sides():
    assert measure_card(CHILD, PADDED) == (135, 75)
    no_shadow = PADDED.model_copy(update={"shadow_enabled": False})
    assert measure_card(CHILD, no_shadow) == (115, 55)


def test_child_frame_fits_inside_card():
    frame = card_child_frame(CHILD, PADDED)
    assert frame == Rect(17.0, 19.0, 117.0, 59.0)
    width, height = measure_card(CHILD, PADDED)
    card = card_rect(PADDED, width, height)
    assert card.left <= frame.left and frame.right <= card.right
    assert card.top <= frame.top and frame.bottom <= card.bottom


def test_build_card_bundles_shadow():
    outline = build_card(CardConfig(corner_radius=8, shadow_dy=2), 120, 80)
    assert outline.bounds == Rect(10.0, 10.0, 110.0, 70.0)
    assert outline.shadow.radius == 10.0
    assert (outline.shadow.dy, outline.shadow.color) == (2.0, "#888888")
    assert build_card(CardConfig(shadow_enabled=False), 120, 80).shadow is None
