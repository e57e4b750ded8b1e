"""Speech-bubble outline: rounded rectangle with a triangular arrow on one edge.

All four arrow directions share one outline. It is laid out in a local frame
where the arrow sits on the top edge:

    u runs along the arrow edge (0..length), v runs into the box (0..depth)

and then rotated onto the box by a multiple of 90°. Rotating by k quarter
turns (clockwise on screen) maps TOP→RIGHT→BOTTOM→LEFT, keeps the path
clockwise, and adds k·90° to every arc start angle.
"""

from __future__ import annotations

import logging

from widgetgeom.engine.config import DEFAULTS, GeometryDefaults
from widgetgeom.models.bubble import ArrowDirection, BubbleConfig, ResolvedBubbleConfig
from widgetgeom.models.geometry import (
    ArcTo,
    Close,
    LineTo,
    MoveTo,
    Rect,
    Segment,
    ShadowParams,
    ShapeOutline,
)
from widgetgeom.utils.geometry import QuarterTurnFrame

logger = logging.getLogger(__name__)

# Clockwise quarter turns from the TOP layout
_QUARTER_TURNS: dict[ArrowDirection, int] = {
    ArrowDirection.TOP: 0,
    ArrowDirection.RIGHT: 1,
    ArrowDirection.BOTTOM: 2,
    ArrowDirection.LEFT: 3,
}

# Local corner centers are listed clockwise from the corner after the first flank;
# each start angle is for the TOP layout.
_CORNER_START_ANGLES = (270.0, 0.0, 90.0, 180.0)


def _is_auto(value: float) -> bool:
    return value < 0


def resolve(cfg: BubbleConfig, defaults: GeometryDefaults | None = None) -> ResolvedBubbleConfig:
    """Fill every auto field.

    Order: corner radius and shadow radius from the box, then arrow size from
    the edge the arrow sits on, then the arrow distance (midpoint), which is
    pulled back by the shadow inset only when it was itself derived.
    """
    d = defaults or DEFAULTS
    w, h = cfg.box_width, cfg.box_height
    edge = w if cfg.arrow_direction.is_vertical else h

    corner_radius = cfg.corner_radius
    if _is_auto(corner_radius):
        corner_radius = d.corner_radius_ratio * min(w, h)

    shadow_radius = cfg.shadow_radius
    if _is_auto(shadow_radius):
        shadow_radius = d.shadow_radius_ratio * max(w, h) if cfg.shadow_enabled else 0.0

    arrow_width = cfg.arrow_width
    if _is_auto(arrow_width):
        arrow_width = d.arrow_width_ratio * edge
    arrow_height = cfg.arrow_height
    if _is_auto(arrow_height):
        arrow_height = d.arrow_height_ratio * edge

    distance = cfg.arrow_distance_from_origin
    if _is_auto(distance):
        distance = edge / 2.0
        if cfg.shadow_enabled:
            distance -= shadow_radius

    resolved = ResolvedBubbleConfig(
        box_width=w,
        box_height=h,
        arrow_width=arrow_width,
        arrow_height=arrow_height,
        arrow_direction=cfg.arrow_direction,
        arrow_distance_from_origin=distance,
        corner_radius=corner_radius,
        fill_color=cfg.fill_color,
        shadow_enabled=cfg.shadow_enabled,
        shadow_radius=shadow_radius,
        shadow_dx=cfg.shadow_dx,
        shadow_dy=cfg.shadow_dy,
        shadow_color=cfg.shadow_color,
    )
    _warn_if_degenerate(resolved)
    return resolved


def _warn_if_degenerate(r: ResolvedBubbleConfig) -> None:
    length, depth = _local_extent(r)
    if 2 * r.corner_radius > min(length, depth - r.arrow_height):
        logger.warning(
            "Bubble corner radius %.1f too large for %.1fx%.1f body; outline will overlap",
            r.corner_radius,
            length,
            depth - r.arrow_height,
        )
    if r.arrow_width > length - 2 * r.corner_radius:
        logger.warning(
            "Bubble arrow width %.1f exceeds straight edge %.1f; outline will overlap",
            r.arrow_width,
            length - 2 * r.corner_radius,
        )


def _inset_box(r: ResolvedBubbleConfig) -> Rect:
    return Rect(0.0, 0.0, r.box_width, r.box_height).inset(r.shadow_inset)


def _frame(r: ResolvedBubbleConfig) -> QuarterTurnFrame:
    return QuarterTurnFrame(_inset_box(r), _QUARTER_TURNS[r.arrow_direction])


def _local_extent(r: ResolvedBubbleConfig) -> tuple[float, float]:
    """(length along the arrow edge, depth into the box) after the shadow inset."""
    frame = _frame(r)
    return frame.length, frame.depth


def build_outline(resolved: ResolvedBubbleConfig) -> list[Segment]:
    """Closed outline starting at the arrow tip, clockwise on screen.

    Segments: move to tip, flank, then for each of the four corners an edge
    line and a 90° arc, the edge back to the far flank, the flank back to the
    tip, close.
    """
    r = resolved
    frame = _frame(r)
    length, depth = frame.length, frame.depth
    cr, ah, half_aw = r.corner_radius, r.arrow_height, r.arrow_width / 2.0
    # arrow_distance_from_origin is measured from the left/top edge; the
    # BOTTOM and LEFT frames run u the other way.
    if frame.quarter_turns < 2:
        tip_u = r.arrow_distance_from_origin
    else:
        tip_u = length - r.arrow_distance_from_origin

    # Per corner: (edge point where the arc begins, arc center), clockwise
    corners = (
        ((length - cr, ah), (length - cr, ah + cr)),
        ((length, depth - cr), (length - cr, depth - cr)),
        ((cr, depth), (cr, depth - cr)),
        ((0.0, ah + cr), (cr, ah + cr)),
    )

    segments: list[Segment] = [MoveTo(*frame.point(tip_u, 0.0))]
    segments.append(LineTo(*frame.point(tip_u + half_aw, ah)))
    for ((edge_u, edge_v), (cu, cv)), start in zip(corners, _CORNER_START_ANGLES):
        segments.append(LineTo(*frame.point(edge_u, edge_v)))
        segments.append(ArcTo(frame.oval(cu, cv, cr), frame.angle(start), 90.0))
    segments.append(LineTo(*frame.point(tip_u - half_aw, ah)))
    segments.append(LineTo(*frame.point(tip_u, 0.0)))
    segments.append(Close())

    logger.debug(
        "Bubble outline %s: %d segments, box %.1fx%.1f",
        r.arrow_direction.value,
        len(segments),
        r.box_width,
        r.box_height,
    )
    return segments


def body_rect(resolved: ResolvedBubbleConfig) -> Rect:
    """Rounded-rectangle body, i.e. where the host lays out content."""
    box = _inset_box(resolved)
    ah = resolved.arrow_height
    direction = resolved.arrow_direction
    if direction == ArrowDirection.TOP:
        return Rect(box.left, box.top + ah, box.right, box.bottom)
    if direction == ArrowDirection.BOTTOM:
        return Rect(box.left, box.top, box.right, box.bottom - ah)
    if direction == ArrowDirection.LEFT:
        return Rect(box.left + ah, box.top, box.right, box.bottom)
    return Rect(box.left, box.top, box.right - ah, box.bottom)


def measure(
    content_width: float,
    content_height: float,
    cfg: BubbleConfig,
    defaults: GeometryDefaults | None = None,
) -> BubbleConfig:
    """Size a bubble around a content box.

    Corner and shadow radii are derived from the content size, the arrow from
    the shadow-padded edge it sits on. The result carries the measured box
    size with those fields concrete, so ``resolve`` keeps them unchanged.
    """
    d = defaults or DEFAULTS
    corner_radius = cfg.corner_radius
    if _is_auto(corner_radius):
        corner_radius = d.corner_radius_ratio * min(content_width, content_height)
    shadow_radius = cfg.shadow_radius
    if _is_auto(shadow_radius):
        shadow_radius = d.shadow_radius_ratio * max(content_width, content_height)

    width, height = content_width, content_height
    if cfg.shadow_enabled:
        width += 2 * shadow_radius
        height += 2 * shadow_radius

    edge = width if cfg.arrow_direction.is_vertical else height
    arrow_width = cfg.arrow_width if not _is_auto(cfg.arrow_width) else d.arrow_width_ratio * edge
    arrow_height = (
        cfg.arrow_height if not _is_auto(cfg.arrow_height) else d.arrow_height_ratio * edge
    )
    if cfg.arrow_direction.is_vertical:
        height += arrow_height
    else:
        width += arrow_height

    return cfg.model_copy(
        update={
            "box_width": width,
            "box_height": height,
            "corner_radius": corner_radius,
            "shadow_radius": shadow_radius,
            "arrow_width": arrow_width,
            "arrow_height": arrow_height,
        }
    )


def shadow_params(resolved: ResolvedBubbleConfig) -> ShadowParams | None:
    if not resolved.shadow_enabled:
        return None
    return ShadowParams(
        radius=resolved.shadow_radius,
        dx=resolved.shadow_dx,
        dy=resolved.shadow_dy,
        color=resolved.shadow_color,
    )


def build_bubble(cfg: BubbleConfig, defaults: GeometryDefaults | None = None) -> ShapeOutline:
    resolved = resolve(cfg, defaults)
    return ShapeOutline(
        segments=build_outline(resolved),
        bounds=_inset_box(resolved),
        fill_color=resolved.fill_color,
        shadow=shadow_params(resolved),
    )
