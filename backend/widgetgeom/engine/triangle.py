"""Isosceles triangle filling the padded box, apex centred on one edge."""

from __future__ import annotations

import logging

from widgetgeom.models.geometry import Close, LineTo, MoveTo, Segment, ShapeOutline
from widgetgeom.models.triangle import TriangleConfig, TriangleStyle
from widgetgeom.utils.geometry import QuarterTurnFrame

logger = logging.getLogger(__name__)

# Edge carrying the apex, as clockwise quarter turns from the top edge
_QUARTER_TURNS: dict[TriangleStyle, int] = {
    TriangleStyle.TOP_TO_BOTTOM: 0,
    TriangleStyle.RIGHT_TO_LEFT: 1,
    TriangleStyle.BOTTOM_TO_TOP: 2,
    TriangleStyle.LEFT_TO_RIGHT: 3,
}


def build_triangle(cfg: TriangleConfig, width: float, height: float) -> list[Segment]:
    """Apex, far base corner, near base corner, back to the apex. Clockwise."""
    frame = QuarterTurnFrame(cfg.content_box(width, height), _QUARTER_TURNS[cfg.style])
    apex = frame.point(frame.length / 2.0, 0.0)
    segments: list[Segment] = [
        MoveTo(*apex),
        LineTo(*frame.point(frame.length, frame.depth)),
        LineTo(*frame.point(0.0, frame.depth)),
        LineTo(*apex),
        Close(),
    ]
    logger.debug("Triangle %s in %.1fx%.1f", cfg.style.value, width, height)
    return segments


def build_triangle_outline(cfg: TriangleConfig, width: float, height: float) -> ShapeOutline:
    return ShapeOutline(
        segments=build_triangle(cfg, width, height),
        bounds=cfg.content_box(width, height),
        fill_color=cfg.color,
    )
