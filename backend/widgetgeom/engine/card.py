"""Shadow card: a rounded rectangle inset by its shadow, wrapping one child."""

from __future__ import annotations

import logging

from widgetgeom.models.card import CardConfig
from widgetgeom.models.flow import FlowChild
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


def rounded_rect(rect: Rect, radius: float) -> list[Segment]:
    """Clockwise rounded rectangle starting after the top-left corner.

    The radius is capped at half the shorter side. Each edge and the corner
    that follows it is written once and turned onto the four sides.
    """
    r = max(0.0, min(radius, rect.width / 2.0, rect.height / 2.0))
    if r < radius:
        logger.debug("Corner radius %.1f capped to %.1f for %.1fx%.1f", radius, r, rect.width, rect.height)

    segments: list[Segment] = [MoveTo(*QuarterTurnFrame(rect, 0).point(r, 0.0))]
    for k in range(4):
        frame = QuarterTurnFrame(rect, k)
        segments.append(LineTo(*frame.point(frame.length - r, 0.0)))
        if r > 0:
            segments.append(ArcTo(frame.oval(frame.length - r, r, r), frame.angle(270.0), 90.0))
    segments.append(Close())
    return segments


def card_rect(cfg: CardConfig, width: float, height: float) -> Rect | None:
    """The drawn card inside a ``width`` x ``height`` view; None for an empty view."""
    if width == 0 or height == 0:
        return None
    return Rect(0.0, 0.0, width, height).inset(cfg.shadow_inset)


def measure_card(child: FlowChild, cfg: CardConfig) -> tuple[float, float]:
    """Size wrapping the child: child plus its margins, the shadow on both sides, and padding."""
    shadow = 2 * cfg.shadow_inset
    width = child.outer_width + shadow + cfg.padding_start + cfg.padding_end
    height = child.outer_height + shadow + cfg.padding_top + cfg.padding_bottom
    return width, height


def card_child_frame(child: FlowChild, cfg: CardConfig) -> Rect:
    left = cfg.padding_start + child.margin_start + cfg.shadow_inset
    top = cfg.padding_top + child.margin_top + cfg.shadow_inset
    return Rect.from_size(left, top, child.width, child.height)


def build_card(cfg: CardConfig, width: float, height: float) -> ShapeOutline | None:
    rect = card_rect(cfg, width, height)
    if rect is None:
        return None
    shadow = None
    if cfg.shadow_enabled:
        shadow = ShadowParams(
            radius=cfg.shadow_radius,
            dx=cfg.shadow_dx,
            dy=cfg.shadow_dy,
            color=cfg.shadow_color,
        )
    return ShapeOutline(
        segments=rounded_rect(rect, cfg.corner_radius),
        bounds=rect,
        fill_color=cfg.fill_color,
        shadow=shadow,
    )
