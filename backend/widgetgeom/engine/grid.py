"""Grid cell location: flat item index to (row, column) in a fixed-span grid.

Vertical grids fill row by row, horizontal grids column by column:

    VERTICAL, span 3        HORIZONTAL, span 3
     0  1  2                 0  3  6  9
     3  4  5                 1  4  7 10
     6  7  8                 2  5  8 11
     9 10 11
"""

from __future__ import annotations

from collections.abc import Iterator

from widgetgeom.models.layout import CellPosition, LayoutSpec, Orientation


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def locate(index: int, item_count: int, span_count: int, orientation: Orientation) -> CellPosition:
    """Cell of ``index``. ``span_count`` must be positive (not checked)."""
    if orientation == Orientation.HORIZONTAL:
        return CellPosition(
            row=index % span_count,
            column=index // span_count,
            total_rows=span_count,
            total_columns=_ceil_div(item_count, span_count),
        )
    return CellPosition(
        row=index // span_count,
        column=index % span_count,
        total_rows=_ceil_div(item_count, span_count),
        total_columns=span_count,
    )


def cell_index(cell: CellPosition, orientation: Orientation) -> int:
    """Inverse of ``locate``."""
    if orientation == Orientation.HORIZONTAL:
        return cell.column * cell.total_rows + cell.row
    return cell.row * cell.total_columns + cell.column


def iter_cells(layout: LayoutSpec) -> Iterator[tuple[int, CellPosition]]:
    for index in range(layout.item_count):
        yield index, locate(index, layout.item_count, layout.span_count, layout.orientation)
