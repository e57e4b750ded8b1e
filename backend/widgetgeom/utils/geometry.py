"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon

from widgetgeom.config import settings
from widgetgeom.models.geometry import ArcTo, Close, LineTo, MoveTo, Rect, Segment


def quarter_turn(quarter_turns: int) -> NDArray[np.float64]:
    """Clockwise-on-screen rotation by k·90° (y axis points down)."""
    c, s = [(1, 0), (0, 1), (-1, 0), (0, -1)][quarter_turns % 4]
    return np.array([[c, -s], [s, c]], dtype=np.float64)


class QuarterTurnFrame:
    """Local (u, v) frame laid on one edge of a box.

    With ``quarter_turns == 0`` the frame sits on the top edge: u runs left to
    right along it and v runs down into the box. Each extra quarter turn moves
    the frame clockwise to the next edge (right, bottom, left), so a path
    written once in local coordinates keeps its winding on every edge.
    """

    def __init__(self, box: Rect, quarter_turns: int) -> None:
        k = quarter_turns % 4
        origins = (
            (box.left, box.top),
            (box.right, box.top),
            (box.right, box.bottom),
            (box.left, box.bottom),
        )
        self.quarter_turns = k
        self.rotation = quarter_turn(k)
        self.origin = np.array(origins[k], dtype=np.float64)
        # length along the edge, depth into the box
        if k % 2 == 0:
            self.length, self.depth = box.width, box.height
        else:
            self.length, self.depth = box.height, box.width

    def point(self, u: float, v: float) -> tuple[float, float]:
        x, y = self.origin + self.rotation @ np.array([u, v], dtype=np.float64)
        # right-angle rotations leave 1e-16 noise
        return float(round(x, 9)), float(round(y, 9))

    def angle(self, local_degrees: float) -> float:
        return (local_degrees + 90.0 * self.quarter_turns) % 360.0

    def oval(self, cu: float, cv: float, radius: float) -> Rect:
        """Bounding square of a circle centred at local (cu, cv)."""
        cx, cy = self.point(cu, cv)
        return Rect(cx - radius, cy - radius, cx + radius, cy + radius)


def sample_arc(arc: ArcTo, samples_per_quarter: int | None = None) -> NDArray[np.float64]:
    """Points along an arc, endpoints included. Density scales with the sweep."""
    per_quarter = samples_per_quarter or settings.widgetgeom_arc_samples
    n = max(2, int(math.ceil(abs(arc.sweep_angle) / 90.0 * per_quarter)) + 1)
    angles = np.radians(np.linspace(arc.start_angle, arc.start_angle + arc.sweep_angle, n))
    c = arc.oval.center
    xs = c.x + arc.radius_x * np.cos(angles)
    ys = c.y + arc.radius_y * np.sin(angles)
    return np.column_stack([xs, ys])


def flatten(segments: list[Segment], samples_per_quarter: int | None = None) -> NDArray[np.float64]:
    """Polyline through a path: every vertex plus sampled arc points."""
    points: list[NDArray[np.float64]] = []
    for seg in segments:
        if isinstance(seg, (MoveTo, LineTo)):
            points.append(np.array([[seg.x, seg.y]], dtype=np.float64))
        elif isinstance(seg, ArcTo):
            points.append(sample_arc(seg, samples_per_quarter))
        elif isinstance(seg, Close):
            continue
    if not points:
        return np.empty((0, 2))
    return np.vstack(points)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def path_bounds(segments: list[Segment]) -> tuple[float, float, float, float]:
    return bbox(flatten(segments))


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula on a closed ring.

    With y pointing down, positive = clockwise on screen.
    """
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for clockwise on screen, -1 for counter-clockwise, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def outline_polygon(segments: list[Segment]) -> Polygon:
    """Shapely polygon of a closed outline, for area, containment and validity checks."""
    points = flatten(segments)
    return Polygon(points)
