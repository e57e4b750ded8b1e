"""List layout descriptions, per-cell grid positions and view padding."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pydantic import BaseModel, Field

from widgetgeom.models.geometry import Rect


class Orientation(str, enum.Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class LayoutKind(str, enum.Enum):
    LINEAR = "linear"
    GRID = "grid"
    STAGGERED_GRID = "staggered_grid"


class LayoutSpec(BaseModel):
    """What the host list reports about its layout manager."""

    item_count: int = Field(..., ge=0)
    span_count: int = 1
    orientation: Orientation = Orientation.VERTICAL
    kind: LayoutKind = LayoutKind.GRID


# Grid-specific alias; a linear list is a LayoutSpec with kind=LINEAR.
GridLayoutSpec = LayoutSpec


@dataclass(frozen=True)
class CellPosition:
    row: int
    column: int
    total_rows: int
    total_columns: int

    @property
    def is_last_row(self) -> bool:
        return self.row >= self.total_rows - 1

    @property
    def is_last_column(self) -> bool:
        return self.column >= self.total_columns - 1


class Padding(BaseModel):
    """Inner padding of a view, in px."""

    padding_start: float = 0.0
    padding_end: float = 0.0
    padding_top: float = 0.0
    padding_bottom: float = 0.0

    def content_box(self, width: float, height: float) -> Rect:
        """The view box minus padding; a negative extent collapses to 0."""
        inner_w = max(width - self.padding_start - self.padding_end, 0.0)
        inner_h = max(height - self.padding_top - self.padding_bottom, 0.0)
        return Rect.from_size(self.padding_start, self.padding_top, inner_w, inner_h)
