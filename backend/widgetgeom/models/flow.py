"""Flow layout configuration."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field

from widgetgeom.models.layout import Orientation, Padding


class FlowGravity(str, enum.Enum):
    """Cross-axis placement of a child inside its line.

    TOP/BOTTOM apply to rows (vertical flow), LEFT/RIGHT to columns
    (horizontal flow). Anything else falls back to CENTER.
    """

    CENTER = "center"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class FlowChild(BaseModel):
    width: float = Field(..., ge=0.0)
    height: float = Field(..., ge=0.0)
    margin_start: float = 0.0
    margin_end: float = 0.0
    margin_top: float = 0.0
    margin_bottom: float = 0.0

    @property
    def outer_width(self) -> float:
        return self.width + self.margin_start + self.margin_end

    @property
    def outer_height(self) -> float:
        return self.height + self.margin_top + self.margin_bottom


class FlowConfig(Padding):
    # VERTICAL fills rows and grows downward, HORIZONTAL fills columns and grows right
    orientation: Orientation = Orientation.VERTICAL
    gravity: FlowGravity = FlowGravity.CENTER
    row_space: float = 0.0
    column_space: float = 0.0
