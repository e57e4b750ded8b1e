"""Geometry value types shared by every component.

Screen coordinates: x grows right, y grows down. Angles are degrees measured
from +x, and a positive sweep turns clockwise on screen.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle as (left, top, right, bottom)."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Point:
        return Point((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    @classmethod
    def from_size(cls, left: float, top: float, width: float, height: float) -> Rect:
        return cls(left, top, left + width, top + height)

    def inset(self, dx: float, dy: float | None = None) -> Rect:
        dy = dx if dy is None else dy
        return Rect(self.left + dx, self.top + dy, self.right - dx, self.bottom - dy)

    def intersects(self, other: Rect) -> bool:
        """True when the interiors overlap (shared edges do not count)."""
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


@dataclass(frozen=True)
class LineSegment:
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    @property
    def is_vertical(self) -> bool:
        return self.x1 == self.x2

    @property
    def is_horizontal(self) -> bool:
        return self.y1 == self.y2


# ---------------------------------------------------------------------------
# Path segments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class ArcTo:
    """Elliptical arc on the ellipse inscribed in ``oval``.

    Starts at ``start_angle`` and turns by ``sweep_angle`` degrees.
    """

    oval: Rect
    start_angle: float
    sweep_angle: float

    @property
    def radius_x(self) -> float:
        return self.oval.width / 2

    @property
    def radius_y(self) -> float:
        return self.oval.height / 2

    def point_at(self, angle: float) -> Point:
        c = self.oval.center
        rad = math.radians(angle)
        return Point(c.x + self.radius_x * math.cos(rad), c.y + self.radius_y * math.sin(rad))

    @property
    def start_point(self) -> Point:
        return self.point_at(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.point_at(self.start_angle + self.sweep_angle)


@dataclass(frozen=True)
class Close:
    pass


Segment = Union[MoveTo, LineTo, ArcTo, Close]


# ---------------------------------------------------------------------------
# Filled outlines
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ShadowParams:
    radius: float
    dx: float
    dy: float
    color: str


@dataclass(frozen=True)
class ShapeOutline:
    """Fill path plus the shadow applied once to the whole path."""

    segments: list[Segment]
    bounds: Rect
    fill_color: str
    shadow: ShadowParams | None = None
