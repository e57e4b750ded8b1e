"""widget-geometry engine: ring, bubble, triangle, marker, card, grid, divider and flow geometry."""

from widgetgeom.engine.bubble import build_bubble, build_outline, resolve
from widgetgeom.engine.card import build_card, measure_card
from widgetgeom.engine.config import GeometryDefaults
from widgetgeom.engine.divider import GridDividerDecoration, LinearDividerDecoration
from widgetgeom.engine.flow import layout_flow, measure_flow
from widgetgeom.engine.grid import locate
from widgetgeom.engine.marker import build_marker, marker_label
from widgetgeom.engine.ring import progress_text, ring_geometry, sweep_angle
from widgetgeom.engine.triangle import build_triangle

__all__ = [
    "build_bubble",
    "build_outline",
    "resolve",
    "build_card",
    "measure_card",
    "GeometryDefaults",
    "GridDividerDecoration",
    "LinearDividerDecoration",
    "layout_flow",
    "measure_flow",
    "locate",
    "build_marker",
    "marker_label",
    "progress_text",
    "ring_geometry",
    "sweep_angle",
    "build_triangle",
]
