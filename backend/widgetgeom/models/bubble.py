"""Speech-bubble background configuration."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field

# Any negative value means "derive from the box size".
AUTO = -1.0


class ArrowDirection(str, enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_vertical(self) -> bool:
        """Arrow sits on a horizontal edge and points up or down."""
        return self in (ArrowDirection.TOP, ArrowDirection.BOTTOM)


class BubbleConfig(BaseModel):
    box_width: float = Field(..., ge=0.0)
    box_height: float = Field(..., ge=0.0)
    arrow_width: float = AUTO
    arrow_height: float = AUTO
    arrow_direction: ArrowDirection = ArrowDirection.TOP
    # Distance from the (shadow-inset) origin to the arrow tip, along the arrow's edge
    arrow_distance_from_origin: float = AUTO
    corner_radius: float = AUTO
    fill_color: str = "#FFFFFF"

    shadow_enabled: bool = False
    shadow_radius: float = AUTO
    shadow_dx: float = 0.0
    shadow_dy: float = 0.0
    shadow_color: str = "#EEEEEE"


class ResolvedBubbleConfig(BaseModel):
    """BubbleConfig with every auto field made concrete."""

    model_config = {"frozen": True}

    box_width: float
    box_height: float
    arrow_width: float
    arrow_height: float
    arrow_direction: ArrowDirection
    arrow_distance_from_origin: float
    corner_radius: float
    fill_color: str

    shadow_enabled: bool
    shadow_radius: float
    shadow_dx: float
    shadow_dy: float
    shadow_color: str

    @property
    def shadow_inset(self) -> float:
        """Space taken from each side of the box by the shadow."""
        return self.shadow_radius if self.shadow_enabled else 0.0
