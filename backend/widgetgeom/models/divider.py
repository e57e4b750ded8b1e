"""Divider line parameters and per-item measurement results."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

from widgetgeom.models.layout import CellPosition, Orientation


class DividerSpec(BaseModel):
    """One divider axis.

    Margins left as ``None`` are unset: they count as 0 for spacing and may be
    collapsed against the companion divider at grid edges. An explicit 0 is
    kept as 0.
    """

    color: str = "#00000000"
    thickness: int = Field(default=0, ge=0)
    left_margin: int | None = None
    right_margin: int | None = None
    top_margin: int | None = None
    bottom_margin: int | None = None

    @property
    def half_thickness(self) -> int:
        return self.thickness // 2

    @property
    def horizontal_span(self) -> int:
        """Gap reserved to the right of a cell: left + thickness + right."""
        return (self.left_margin or 0) + self.thickness + (self.right_margin or 0)

    @property
    def vertical_span(self) -> int:
        """Gap reserved below a cell: top + thickness + bottom."""
        return (self.top_margin or 0) + self.thickness + (self.bottom_margin or 0)


@dataclass(frozen=True)
class ItemOffsets:
    """Trailing space reserved after a cell for its dividers."""

    right: int = 0
    bottom: int = 0


@dataclass(frozen=True)
class MeasuredItem:
    """Result of the measurement pass, handed unchanged to the draw pass."""

    index: int
    cell: CellPosition
    offsets: ItemOffsets
    orientation: Orientation = Orientation.VERTICAL
