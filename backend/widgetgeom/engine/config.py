"""Geometry defaults: the ratios used when a style field is left on auto."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GeometryDefaults:
    """Auto-derivation constants for every component."""

    # Bubble: fractions of the box size
    arrow_width_ratio: float = 2.0 / 9.0  # of the edge the arrow sits on
    arrow_height_ratio: float = 2.0 / 9.0
    corner_radius_ratio: float = 1.0 / 18.0  # of min(width, height)
    shadow_radius_ratio: float = 7.0 / 90.0  # of max(width, height)

    # Ring: divisors of min(width, height)
    ring_thickness_divisor: float = 15.0
    ring_text_size_divisor: float = 2.2
    ring_color: str = "#FF0000"
    ring_background_color: str = "#D3D3D3"

    # Marker: fractions of min(width, height)
    marker_text_size_ratio: float = 42.0 / 179.0
    marker_corner_radius_ratio: float = 27.0 / 179.0
    marker_cut_ratio: float = 27.0 / 179.0


DEFAULTS = GeometryDefaults()
