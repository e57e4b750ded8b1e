"""Corner marker configuration."""

from __future__ import annotations

import enum

from widgetgeom.models.bubble import AUTO
from widgetgeom.models.layout import Padding


class MarkerPosition(str, enum.Enum):
    LEFT_TOP = "left_top"
    RIGHT_TOP = "right_top"
    RIGHT_BOTTOM = "right_bottom"
    LEFT_BOTTOM = "left_bottom"

    @property
    def is_top(self) -> bool:
        return self in (MarkerPosition.LEFT_TOP, MarkerPosition.RIGHT_TOP)


class MarkerStyle(str, enum.Enum):
    TRIANGLE = "triangle"
    # Right angle rounded off with corner_radius
    CORNER_TRIANGLE = "corner_triangle"
    # Right angle cut off by a smaller copy of the triangle; looks like a trapezoid
    MISSING_TRIANGLE = "missing_triangle"


class MarkerConfig(Padding):
    """A right isosceles triangle filling one corner of a square view.

    Size-dependent fields left on ``AUTO`` are derived from
    ``min(width, height)`` of the view.
    """

    text: str = ""
    text_size: float = AUTO
    text_color: str = "#FFFFFF"
    bg_color: str = "#FF0000"
    corner_radius: float = AUTO
    # Leg length of the triangle cut from the corner in MISSING_TRIANGLE style
    missing_triangle_waist_length: float = AUTO
    # Shift of the label across the hypotenuse; positive moves it down the rotated y axis
    offset: float = 0.0
    position: MarkerPosition = MarkerPosition.LEFT_TOP
    style: MarkerStyle = MarkerStyle.TRIANGLE
