"""Progress ring: sweep angle, start angle, label text and ring geometry."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from widgetgeom.engine.config import DEFAULTS, GeometryDefaults
from widgetgeom.models.geometry import ArcTo, MoveTo, Point, Rect, Segment
from widgetgeom.models.ring import ProgressDirection, ProgressType, RingConfig, StartPosition

logger = logging.getLogger(__name__)

PROGRESS_PLACEHOLDER = "%progress"

_START_ANGLES: dict[StartPosition, float] = {
    StartPosition.TOP: -90.0,
    StartPosition.BOTTOM: 90.0,
    StartPosition.LEFT: 180.0,
    StartPosition.RIGHT: 0.0,
}


def sweep_angle(cfg: RingConfig) -> float:
    """Degrees covered by the progress arc; negative for counter-clockwise.

    A zero total is a caller error; it yields 0 instead of dividing.
    """
    if cfg.total_progress == 0:
        logger.debug("sweep_angle: total_progress is 0, returning 0")
        return 0.0
    degrees = cfg.current_progress * 360.0 / cfg.total_progress
    if cfg.direction == ProgressDirection.COUNTER_CLOCKWISE:
        return -degrees
    return degrees


def arc_start(start_position: StartPosition) -> float:
    return _START_ANGLES[start_position]


def progress_value(cfg: RingConfig) -> int:
    if cfg.progress_type == ProgressType.VALUE:
        return math.floor(cfg.current_progress)
    if cfg.total_progress == 0:
        return 0
    return math.floor(cfg.current_progress * 100.0 / cfg.total_progress)


def progress_text(cfg: RingConfig, custom_text: str | None = None) -> str:
    """Label for the ring center.

    ``custom_text`` (or ``cfg.custom_text``) is a template in which
    ``%progress`` is replaced by the percent or value.
    """
    value = str(progress_value(cfg))
    template = custom_text if custom_text is not None else cfg.custom_text
    if template is None:
        return value
    return template.replace(PROGRESS_PLACEHOLDER, value)


def text_baseline(center_y: float, ascent: float, descent: float) -> float:
    """Baseline y that roughly centers a line of text on ``center_y``.

    ``ascent`` is negative (above the baseline), as font metrics report it.
    Adding a third of the line height is an approximation, not exact
    centering.
    """
    return center_y + (descent - ascent) / 3.0


@dataclass(frozen=True)
class RingGeometry:
    size: float
    thickness: float
    radius: float
    center: Point
    arc_bounds: Rect
    start_angle: float
    sweep_angle: float
    start_point: Point
    text_size: float
    text: str | None


def ring_geometry(
    cfg: RingConfig,
    width: float,
    height: float,
    defaults: GeometryDefaults | None = None,
) -> RingGeometry:
    """Everything needed to stroke the ring inside a ``width`` x ``height`` view.

    The ring is a square of side ``min(width, height)`` anchored at the origin,
    stroked along a circle inset by half the stroke width.
    """
    d = defaults or DEFAULTS
    size = min(width, height)
    thickness = cfg.thickness if cfg.thickness > 0 else size / d.ring_thickness_divisor
    text_size = cfg.text_size if cfg.text_size > 0 else size / d.ring_text_size_divisor
    half = thickness / 2.0
    bounds = Rect(half, half, size - half, size - half)
    start = arc_start(cfg.start_position)
    start_arc = ArcTo(bounds, start, 0.0)

    return RingGeometry(
        size=size,
        thickness=thickness,
        radius=size / 2.0 - half,
        center=bounds.center,
        arc_bounds=bounds,
        start_angle=start,
        sweep_angle=sweep_angle(cfg),
        start_point=_snap(start_arc.start_point),
        text_size=text_size,
        text=progress_text(cfg) if cfg.text_visible else None,
    )


def ring_arc_path(geometry: RingGeometry) -> list[Segment]:
    """Foreground arc from the start position."""
    p = geometry.start_point
    return [
        MoveTo(p.x, p.y),
        ArcTo(geometry.arc_bounds, geometry.start_angle, geometry.sweep_angle),
    ]


def ring_background_path(geometry: RingGeometry) -> list[Segment]:
    """Full background circle as two half arcs, clockwise from the right."""
    b = geometry.arc_bounds
    return [
        MoveTo(b.right, b.center.y),
        ArcTo(b, 0.0, 180.0),
        ArcTo(b, 180.0, 180.0),
    ]


def _snap(p: Point) -> Point:
    # cos/sin of right angles leave 1e-16 noise
    return Point(round(p.x, 9), round(p.y, 9))
