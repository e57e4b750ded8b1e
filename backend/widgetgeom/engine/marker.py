"""Corner marker: a right isosceles triangle in one corner, with a diagonal label.

The marker occupies a square of side ``min`` of the padded width and height,
anchored at the padded top-left. Its outline is written once for the
top-left corner and turned onto the other corners:

    LEFT_TOP → RIGHT_TOP → RIGHT_BOTTOM → LEFT_BOTTOM   (clockwise quarter turns)

The label runs parallel to the hypotenuse. Its baseline centre sits on the
median from the right-angle corner: three quarters of the way out for the
top corners (text hangs back toward the corner), halfway for the bottom
corners (text stands up toward the hypotenuse).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from widgetgeom.engine.config import DEFAULTS, GeometryDefaults
from widgetgeom.models.geometry import (
    ArcTo,
    Close,
    LineTo,
    MoveTo,
    Point,
    Rect,
    Segment,
    ShapeOutline,
)
from widgetgeom.models.marker import MarkerConfig, MarkerPosition, MarkerStyle
from widgetgeom.utils.geometry import QuarterTurnFrame

logger = logging.getLogger(__name__)

_QUARTER_TURNS: dict[MarkerPosition, int] = {
    MarkerPosition.LEFT_TOP: 0,
    MarkerPosition.RIGHT_TOP: 1,
    MarkerPosition.RIGHT_BOTTOM: 2,
    MarkerPosition.LEFT_BOTTOM: 3,
}

# Text rotation in degrees, clockwise on screen
_LABEL_ROTATION: dict[MarkerPosition, float] = {
    MarkerPosition.LEFT_TOP: -45.0,
    MarkerPosition.RIGHT_TOP: 45.0,
    MarkerPosition.RIGHT_BOTTOM: -45.0,
    MarkerPosition.LEFT_BOTTOM: 45.0,
}


@dataclass(frozen=True)
class MarkerGeometry:
    square: Rect
    corner_radius: float
    cut_length: float
    text_size: float


@dataclass(frozen=True)
class MarkerLabel:
    """Where to draw the marker text: centred on ``anchor`` after rotating by ``rotation``."""

    text: str
    text_size: float
    anchor: Point
    rotation: float


def resolve_marker(
    cfg: MarkerConfig,
    width: float,
    height: float,
    defaults: GeometryDefaults | None = None,
) -> MarkerGeometry:
    d = defaults or DEFAULTS
    size = min(width, height)
    box = cfg.content_box(width, height)
    side = min(box.width, box.height)

    def pick(value: float, ratio: float) -> float:
        return value if value >= 0 else ratio * size

    return MarkerGeometry(
        square=Rect.from_size(box.left, box.top, side, side),
        corner_radius=pick(cfg.corner_radius, d.marker_corner_radius_ratio),
        cut_length=pick(cfg.missing_triangle_waist_length, d.marker_cut_ratio),
        text_size=pick(cfg.text_size, d.marker_text_size_ratio),
    )


def build_marker(
    cfg: MarkerConfig,
    width: float,
    height: float,
    defaults: GeometryDefaults | None = None,
) -> list[Segment]:
    """Closed marker outline, clockwise, starting on the edge leg after the corner."""
    geo = resolve_marker(cfg, width, height, defaults)
    frame = QuarterTurnFrame(geo.square, _QUARTER_TURNS[cfg.position])
    s = frame.length

    if cfg.style == MarkerStyle.CORNER_TRIANGLE:
        cr = geo.corner_radius
        segments: list[Segment] = [
            MoveTo(*frame.point(cr, 0.0)),
            LineTo(*frame.point(s, 0.0)),
            LineTo(*frame.point(0.0, s)),
            LineTo(*frame.point(0.0, cr)),
            ArcTo(frame.oval(cr, cr, cr), frame.angle(180.0), 90.0),
            Close(),
        ]
    elif cfg.style == MarkerStyle.MISSING_TRIANGLE:
        cut = geo.cut_length
        segments = [
            MoveTo(*frame.point(cut, 0.0)),
            LineTo(*frame.point(s, 0.0)),
            LineTo(*frame.point(0.0, s)),
            LineTo(*frame.point(0.0, cut)),
            LineTo(*frame.point(cut, 0.0)),
            Close(),
        ]
    else:
        segments = [
            MoveTo(*frame.point(0.0, 0.0)),
            LineTo(*frame.point(s, 0.0)),
            LineTo(*frame.point(0.0, s)),
            LineTo(*frame.point(0.0, 0.0)),
            Close(),
        ]

    if cfg.style != MarkerStyle.TRIANGLE and max(geo.corner_radius, geo.cut_length) > s / 2:
        logger.warning(
            "Marker %s detail %.1f exceeds half the leg %.1f; outline will overlap",
            cfg.style.value,
            geo.corner_radius if cfg.style == MarkerStyle.CORNER_TRIANGLE else geo.cut_length,
            s / 2,
        )
    return segments


def marker_label(
    cfg: MarkerConfig,
    width: float,
    height: float,
    defaults: GeometryDefaults | None = None,
) -> MarkerLabel:
    geo = resolve_marker(cfg, width, height, defaults)
    frame = QuarterTurnFrame(geo.square, _QUARTER_TURNS[cfg.position])
    cx, cy = frame.point(0.0, 0.0)
    mx, my = frame.point(frame.length / 2.0, frame.length / 2.0)

    # Fraction of the corner-to-hypotenuse median
    along = 0.75 if cfg.position.is_top else 0.5
    x, y = cx + (mx - cx) * along, cy + (my - cy) * along

    rotation = _LABEL_ROTATION[cfg.position]
    rad = math.radians(rotation)
    x -= math.sin(rad) * cfg.offset
    y += math.cos(rad) * cfg.offset
    return MarkerLabel(
        text=cfg.text,
        text_size=geo.text_size,
        anchor=Point(round(x, 9), round(y, 9)),
        rotation=rotation,
    )


def build_marker_outline(
    cfg: MarkerConfig,
    width: float,
    height: float,
    defaults: GeometryDefaults | None = None,
) -> ShapeOutline:
    geo = resolve_marker(cfg, width, height, defaults)
    return ShapeOutline(
        segments=build_marker(cfg, width, height, defaults),
        bounds=geo.square,
        fill_color=cfg.bg_color,
    )
