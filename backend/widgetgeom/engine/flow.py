"""Flow layout: wrap children into rows (vertical flow) or columns (horizontal flow).

The main axis is the one children advance along before wrapping: x for a
vertical flow, y for a horizontal one. Lines stack along the cross axis.
Spacing is only inserted between neighbours, never after the last child of a
line or after the last line.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from widgetgeom.models.flow import FlowChild, FlowConfig, FlowGravity
from widgetgeom.models.geometry import Rect
from widgetgeom.models.layout import Orientation

logger = logging.getLogger(__name__)


@dataclass
class FlowLine:
    """One row (vertical flow) or column (horizontal flow)."""

    indices: list[int] = field(default_factory=list)
    main_size: float = 0.0  # summed extent along the main axis, spacing included
    cross_size: float = 0.0  # largest child extent across the line

    @property
    def count(self) -> int:
        return len(self.indices)


@dataclass(frozen=True)
class FlowMeasurement:
    width: float
    height: float
    lines: list[FlowLine]


def _main_size(child: FlowChild, vertical: bool) -> float:
    return child.outer_width if vertical else child.outer_height


def _cross_size(child: FlowChild, vertical: bool) -> float:
    return child.outer_height if vertical else child.outer_width


def _spacing(config: FlowConfig) -> tuple[float, float]:
    """(main-axis spacing, cross-axis spacing)."""
    if config.orientation == Orientation.VERTICAL:
        return config.column_space, config.row_space
    return config.row_space, config.column_space


def break_lines(
    children: list[FlowChild],
    config: FlowConfig,
    available: float | None,
) -> list[FlowLine]:
    """Greedy line breaking along the main axis.

    ``available`` is the main-axis room inside the padding; None means
    unbounded. A child that does not fit starts a new line, except as the
    first child of a line, which is always accepted.
    """
    vertical = config.orientation == Orientation.VERTICAL
    main_space, _ = _spacing(config)
    limit = math.inf if available is None else available

    lines: list[FlowLine] = []
    current = FlowLine()
    for index, child in enumerate(children):
        size = _main_size(child, vertical)
        if current.count and current.main_size + main_space + size > limit:
            lines.append(current)
            current = FlowLine()
        if current.count:
            current.main_size += main_space
        current.indices.append(index)
        current.main_size += size
        current.cross_size = max(current.cross_size, _cross_size(child, vertical))
    if current.count:
        lines.append(current)
    return lines


def _available(config: FlowConfig, width: float | None, height: float | None) -> float | None:
    if config.orientation == Orientation.VERTICAL:
        if width is None:
            return None
        return width - config.padding_start - config.padding_end
    if height is None:
        return None
    return height - config.padding_top - config.padding_bottom


def measure_flow(
    children: list[FlowChild],
    config: FlowConfig,
    max_width: float | None = None,
    max_height: float | None = None,
) -> FlowMeasurement:
    """Wrapped content size plus padding.

    Only the main-axis bound matters: ``max_width`` for a vertical flow,
    ``max_height`` for a horizontal one.
    """
    lines = break_lines(children, config, _available(config, max_width, max_height))
    _, cross_space = _spacing(config)
    main = max((line.main_size for line in lines), default=0.0)
    cross = sum(line.cross_size for line in lines) + cross_space * max(len(lines) - 1, 0)

    pad_h = config.padding_start + config.padding_end
    pad_v = config.padding_top + config.padding_bottom
    if config.orientation == Orientation.VERTICAL:
        width, height = main + pad_h, cross + pad_v
    else:
        width, height = cross + pad_h, main + pad_v

    logger.debug("Flow measured %d children into %d lines: %.1fx%.1f", len(children), len(lines), width, height)
    return FlowMeasurement(width=width, height=height, lines=lines)


def _cross_offset(
    gravity: FlowGravity,
    vertical: bool,
    line_size: float,
    size: float,
    margin_before: float,
    margin_after: float,
) -> float:
    leading = FlowGravity.TOP if vertical else FlowGravity.LEFT
    trailing = FlowGravity.BOTTOM if vertical else FlowGravity.RIGHT
    if gravity == leading:
        return margin_before
    if gravity == trailing:
        return line_size - size - margin_after
    return (line_size - (size + margin_before + margin_after)) / 2 + margin_before


def layout_flow(
    children: list[FlowChild],
    config: FlowConfig,
    width: float | None = None,
    height: float | None = None,
) -> list[Rect]:
    """Frame of every child, in child order, inside a ``width`` x ``height`` box."""
    vertical = config.orientation == Orientation.VERTICAL
    main_space, cross_space = _spacing(config)
    lines = break_lines(children, config, _available(config, width, height))

    frames: list[Rect] = [Rect(0.0, 0.0, 0.0, 0.0)] * len(children)
    cross_pos = config.padding_top if vertical else config.padding_start
    for line in lines:
        main_pos = config.padding_start if vertical else config.padding_top
        for index in line.indices:
            child = children[index]
            if vertical:
                x = main_pos + child.margin_start
                y = cross_pos + _cross_offset(
                    config.gravity, True, line.cross_size, child.height,
                    child.margin_top, child.margin_bottom,
                )
            else:
                x = cross_pos + _cross_offset(
                    config.gravity, False, line.cross_size, child.width,
                    child.margin_start, child.margin_end,
                )
                y = main_pos + child.margin_top
            frames[index] = Rect.from_size(x, y, child.width, child.height)
            main_pos += _main_size(child, vertical) + main_space
        cross_pos += line.cross_size + cross_space
    return frames
