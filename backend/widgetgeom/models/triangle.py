"""Isosceles triangle configuration."""

from __future__ import annotations

import enum

from widgetgeom.models.layout import Padding


class TriangleStyle(str, enum.Enum):
    """Named by the direction from the apex to the base."""

    TOP_TO_BOTTOM = "top_to_bottom"  # apex up
    BOTTOM_TO_TOP = "bottom_to_top"  # apex down
    LEFT_TO_RIGHT = "left_to_right"  # apex left
    RIGHT_TO_LEFT = "right_to_left"  # apex right


class TriangleConfig(Padding):
    style: TriangleStyle = TriangleStyle.TOP_TO_BOTTOM
    color: str = "#000000"
