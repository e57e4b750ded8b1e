"""Divider decorations: trailing offsets and divider lines for list cells.

A grid carries up to two dividers:

* the column divider draws a vertical line in the gap to the right of a cell
  (reserved as ``left + thickness + right``),
* the row divider draws a horizontal line in the gap below a cell (reserved
  as ``top + thickness + bottom``).

Each line lies along the cell's trailing edge and is trimmed by its own
leading/trailing margins. At grid edges an unset margin collapses against
the companion divider: the line stretches to the middle of the crossing
divider so the two meet without a gap.

Measurement happens once per item and the resulting ``MeasuredItem`` is
handed to the draw pass unchanged; the draw pass never re-derives the cell.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from widgetgeom.engine.grid import locate
from widgetgeom.errors import LayoutMismatchError
from widgetgeom.models.divider import DividerSpec, ItemOffsets, MeasuredItem
from widgetgeom.models.geometry import LineSegment, Rect
from widgetgeom.models.layout import CellPosition, LayoutKind, LayoutSpec, Orientation

logger = logging.getLogger(__name__)


def cell_trailing_offset(
    cell: CellPosition,
    row_divider: DividerSpec | None,
    column_divider: DividerSpec | None,
) -> ItemOffsets:
    """Space to reserve right of and below a cell. Last column/row get none."""
    right = 0
    if column_divider is not None and not cell.is_last_column:
        right = column_divider.horizontal_span
    bottom = 0
    if row_divider is not None and not cell.is_last_row:
        bottom = row_divider.vertical_span
    return ItemOffsets(right=right, bottom=bottom)


def _edge_margins(
    index: int,
    total: int,
    leading: int | None,
    trailing: int | None,
    companion: DividerSpec | None,
    companion_leading: int | None,
    companion_trailing: int | None,
) -> tuple[int, int]:
    """Leading/trailing margins of a line spanning one cell.

    Only unset margins collapse. The first row/column collapses its trailing
    end into the companion divider after it, the last its leading end into the
    one before it, and interior cells both. A single row/column counts as the
    first.
    """
    if companion is not None:
        half = companion.half_thickness
        collapse_trailing = index == 0 or index < total - 1
        collapse_leading = index > 0
        if trailing is None and collapse_trailing:
            trailing = -((companion_leading or 0) + half)
        if leading is None and collapse_leading:
            leading = -((companion_trailing or 0) + half)
    return leading or 0, trailing or 0


def column_line(
    cell: CellPosition,
    bounds: Rect,
    column_divider: DividerSpec,
    row_divider: DividerSpec | None = None,
) -> LineSegment | None:
    """Vertical divider right of the cell, or None on the last column."""
    if cell.is_last_column:
        return None
    top, bottom = _edge_margins(
        cell.row,
        cell.total_rows,
        column_divider.top_margin,
        column_divider.bottom_margin,
        row_divider,
        row_divider.top_margin if row_divider else None,
        row_divider.bottom_margin if row_divider else None,
    )
    x = bounds.right + (column_divider.left_margin or 0) + column_divider.half_thickness
    return LineSegment(x, bounds.top + top, x, bounds.bottom - bottom)


def row_line(
    cell: CellPosition,
    bounds: Rect,
    row_divider: DividerSpec,
    column_divider: DividerSpec | None = None,
) -> LineSegment | None:
    """Horizontal divider below the cell, or None on the last row."""
    if cell.is_last_row:
        return None
    left, right = _edge_margins(
        cell.column,
        cell.total_columns,
        row_divider.left_margin,
        row_divider.right_margin,
        column_divider,
        column_divider.left_margin if column_divider else None,
        column_divider.right_margin if column_divider else None,
    )
    y = bounds.bottom + (row_divider.top_margin or 0) + row_divider.half_thickness
    return LineSegment(bounds.left + left, y, bounds.right - right, y)


# ---------------------------------------------------------------------------
# Linear lists
# ---------------------------------------------------------------------------


def linear_offset(
    position: int,
    item_count: int,
    orientation: Orientation,
    divider: DividerSpec,
) -> ItemOffsets:
    if position >= item_count - 1:
        return ItemOffsets()
    if orientation == Orientation.HORIZONTAL:
        return ItemOffsets(right=divider.horizontal_span)
    return ItemOffsets(bottom=divider.vertical_span)


def linear_line(
    position: int,
    item_count: int,
    orientation: Orientation,
    bounds: Rect,
    divider: DividerSpec,
) -> LineSegment | None:
    """Divider after a list item; none after the last one. No margin collapsing."""
    if position >= item_count - 1:
        return None
    half = divider.half_thickness
    if orientation == Orientation.HORIZONTAL:
        x = bounds.right + (divider.left_margin or 0) + half
        return LineSegment(
            x,
            bounds.top + (divider.top_margin or 0),
            x,
            bounds.bottom - (divider.bottom_margin or 0),
        )
    y = bounds.bottom + (divider.top_margin or 0) + half
    return LineSegment(
        bounds.left + (divider.left_margin or 0),
        y,
        bounds.right - (divider.right_margin or 0),
        y,
    )


# ---------------------------------------------------------------------------
# Decorations: measurement pass + draw pass
# ---------------------------------------------------------------------------


class GridDividerDecoration:
    """Dividers for grid and staggered-grid lists. Either divider may be absent."""

    supported_kinds = (LayoutKind.GRID, LayoutKind.STAGGERED_GRID)

    def __init__(
        self,
        row_divider: DividerSpec | None = None,
        column_divider: DividerSpec | None = None,
    ) -> None:
        self.row_divider = row_divider
        self.column_divider = column_divider

    def check_layout(self, layout: LayoutSpec) -> None:
        if layout.kind not in self.supported_kinds:
            raise LayoutMismatchError(type(self).__name__, layout.kind, self.supported_kinds)

    def measure(self, index: int, layout: LayoutSpec) -> MeasuredItem:
        self.check_layout(layout)
        cell = locate(index, layout.item_count, layout.span_count, layout.orientation)
        offsets = cell_trailing_offset(cell, self.row_divider, self.column_divider)
        logger.debug("Grid item %d -> %s, offsets %s", index, cell, offsets)
        return MeasuredItem(index=index, cell=cell, offsets=offsets, orientation=layout.orientation)

    def lines(self, measured: MeasuredItem, bounds: Rect) -> list[LineSegment]:
        out: list[LineSegment] = []
        if self.column_divider is not None:
            line = column_line(measured.cell, bounds, self.column_divider, self.row_divider)
            if line is not None:
                out.append(line)
        if self.row_divider is not None:
            line = row_line(measured.cell, bounds, self.row_divider, self.column_divider)
            if line is not None:
                out.append(line)
        return out

    def draw(self, items: Iterable[tuple[MeasuredItem, Rect]]) -> list[LineSegment]:
        """All divider lines for the laid-out items of one draw pass."""
        return [line for measured, bounds in items for line in self.lines(measured, bounds)]


class LinearDividerDecoration:
    """Dividers between consecutive items of a linear list."""

    supported_kinds = (LayoutKind.LINEAR,)

    def __init__(self, divider: DividerSpec) -> None:
        self.divider = divider

    def check_layout(self, layout: LayoutSpec) -> None:
        if layout.kind not in self.supported_kinds:
            raise LayoutMismatchError(type(self).__name__, layout.kind, self.supported_kinds)

    def measure(self, index: int, layout: LayoutSpec) -> MeasuredItem:
        self.check_layout(layout)
        # A linear list is a one-span grid along its orientation
        cell = locate(index, layout.item_count, 1, layout.orientation)
        offsets = linear_offset(index, layout.item_count, layout.orientation, self.divider)
        return MeasuredItem(index=index, cell=cell, offsets=offsets, orientation=layout.orientation)

    def lines(self, measured: MeasuredItem, bounds: Rect) -> list[LineSegment]:
        item_count = measured.cell.total_rows * measured.cell.total_columns
        line = linear_line(measured.index, item_count, measured.orientation, bounds, self.divider)
        return [] if line is None else [line]

    def draw(self, items: Iterable[tuple[MeasuredItem, Rect]]) -> list[LineSegment]:
        return [line for measured, bounds in items for line in self.lines(measured, bounds)]
