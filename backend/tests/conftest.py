"""Shared test fixtures."""

from __future__ import annotations

import pytest

from widgetgeom.models.bubble import ArrowDirection, BubbleConfig
from widgetgeom.models.divider import DividerSpec
from widgetgeom.models.flow import FlowChild
from widgetgeom.models.layout import LayoutKind, LayoutSpec, Orientation


# The 12-item, 3-span grid used throughout the divider tests:
#    0  1  2
#    3  4  5
#    6  7  8
#    9 10 11
GRID_12x3 = LayoutSpec(item_count=12, span_count=3, orientation=Orientation.VERTICAL)

LIST_5 = LayoutSpec(item_count=5, orientation=Orientation.VERTICAL, kind=LayoutKind.LINEAR)

ALL_DIRECTIONS = list(ArrowDirection)


@pytest.fixture
def grid_layout() -> LayoutSpec:
    return GRID_12x3


@pytest.fixture
def list_layout() -> LayoutSpec:
    return LIST_5


@pytest.fixture
def row_divider() -> DividerSpec:
    return DividerSpec(color="#CCCCCC", thickness=4, top_margin=6, bottom_margin=2)


@pytest.fixture
def column_divider() -> DividerSpec:
    return DividerSpec(color="#CCCCCC", thickness=2, left_margin=3, right_margin=5)


@pytest.fixture
def wide_bubble() -> BubbleConfig:
    return BubbleConfig(box_width=180, box_height=90, arrow_direction=ArrowDirection.TOP)


@pytest.fixture
def chips() -> list[FlowChild]:
    """Five tag chips of mixed width."""
    return [
        FlowChild(width=40, height=20),
        FlowChild(width=60, height=24),
        FlowChild(width=30, height=20),
        FlowChild(width=50, height=30),
        FlowChild(width=20, height=20),
    ]
