"""widget-geometry: path construction and layout measurement for custom-drawn widgets."""

__version__ = "0.1.0"
