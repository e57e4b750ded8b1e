"""Write SVG path data and documents from path segments."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape

from widgetgeom.engine.config import DEFAULTS, GeometryDefaults
from widgetgeom.engine.marker import build_marker_outline, marker_label
from widgetgeom.engine.ring import RingGeometry, ring_arc_path, ring_background_path
from widgetgeom.models.geometry import ArcTo, Close, LineTo, MoveTo, Segment, ShapeOutline
from widgetgeom.models.marker import MarkerConfig


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _arc_commands(arc: ArcTo, current: tuple[float, float] | None) -> list[str]:
    commands: list[str] = []
    start = arc.start_point
    if current is None:
        commands.append(f"M {_fmt(start.x)} {_fmt(start.y)}")
    elif (_fmt(current[0]), _fmt(current[1])) != (_fmt(start.x), _fmt(start.y)):
        commands.append(f"L {_fmt(start.x)} {_fmt(start.y)}")

    sweep = arc.sweep_angle
    if sweep == 0:
        return commands
    # An SVG arc cannot end where it starts; split full turns in half.
    pieces = 2 if abs(sweep) >= 360.0 else 1
    step = sweep / pieces
    angle = arc.start_angle
    for _ in range(pieces):
        angle += step
        end = arc.point_at(angle)
        large = 1 if abs(step) > 180.0 else 0
        flag = 1 if step > 0 else 0
        commands.append(
            f"A {_fmt(arc.radius_x)} {_fmt(arc.radius_y)} 0 {large} {flag} "
            f"{_fmt(end.x)} {_fmt(end.y)}"
        )
    return commands


def path_data(segments: list[Segment]) -> str:
    """SVG ``d`` attribute for a segment list."""
    commands: list[str] = []
    current: tuple[float, float] | None = None
    subpath_start: tuple[float, float] | None = None
    for seg in segments:
        if isinstance(seg, MoveTo):
            commands.append(f"M {_fmt(seg.x)} {_fmt(seg.y)}")
            current = subpath_start = (seg.x, seg.y)
        elif isinstance(seg, LineTo):
            commands.append(f"L {_fmt(seg.x)} {_fmt(seg.y)}")
            current = (seg.x, seg.y)
        elif isinstance(seg, ArcTo):
            commands.extend(_arc_commands(seg, current))
            end = seg.end_point
            current = (end.x, end.y)
        elif isinstance(seg, Close):
            commands.append("Z")
            current = subpath_start
    return " ".join(commands)


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    title: str = "",
    description: str = "",
) -> str:
    """Generate clean SVG markup from element definitions."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {_fmt(canvas_w)} {_fmt(canvas_h)}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img">',
    ]

    if title:
        lines.append(f"  <title>{title}</title>")
    if description:
        lines.append(f"  <desc>{description}</desc>")

    defs = [e for e in elements if e.get("tag") == "filter"]
    if defs:
        lines.append("  <defs>")
        for elem in defs:
            lines.append(f"    {elem['markup']}")
        lines.append("  </defs>")

    for elem in elements:
        tag = elem.get("tag", "path")
        if tag == "filter":
            continue
        attrs = {k: v for k, v in elem.items() if k not in ("tag", "children", "markup", "content")}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        if "content" in elem:
            lines.append(f"  <{tag} {attr_str}>{escape(elem['content'])}</{tag}>")
        else:
            lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def outline_to_svg(outline: ShapeOutline, canvas_w: float, canvas_h: float) -> str:
    """Standalone SVG of a filled outline; the shadow becomes one drop-shadow filter on the path."""
    path: dict[str, Any] = {"tag": "path", "d": path_data(outline.segments), "fill": outline.fill_color}
    elements: list[dict[str, Any]] = []
    if outline.shadow is not None:
        s = outline.shadow
        elements.append(
            {
                "tag": "filter",
                "markup": (
                    '<filter id="outline-shadow"><feDropShadow '
                    f'dx="{_fmt(s.dx)}" dy="{_fmt(s.dy)}" stdDeviation="{_fmt(s.radius / 2)}" '
                    f'flood-color="{s.color}" /></filter>'
                ),
            }
        )
        path["filter"] = "url(#outline-shadow)"
    elements.append(path)
    return serialize_svg(elements, canvas_w, canvas_h)


def ring_to_svg(
    geometry: RingGeometry,
    ring_color: str | None = None,
    background_color: str | None = None,
) -> str:
    """Background circle plus progress arc, both stroked at the ring thickness."""
    ring_color = ring_color or DEFAULTS.ring_color
    background_color = background_color or DEFAULTS.ring_background_color
    stroke = _fmt(geometry.thickness)
    elements: list[dict[str, Any]] = [
        {
            "tag": "path",
            "d": path_data(ring_background_path(geometry)),
            "fill": "none",
            "stroke": background_color,
            "stroke-width": stroke,
        },
        {
            "tag": "path",
            "d": path_data(ring_arc_path(geometry)),
            "fill": "none",
            "stroke": ring_color,
            "stroke-width": stroke,
        },
    ]
    return serialize_svg(elements, geometry.size, geometry.size)


def marker_to_svg(
    cfg: MarkerConfig,
    width: float,
    height: float,
    defaults: GeometryDefaults | None = None,
) -> str:
    """Marker fill plus its label, rotated about the baseline anchor."""
    outline = build_marker_outline(cfg, width, height, defaults)
    elements: list[dict[str, Any]] = [
        {"tag": "path", "d": path_data(outline.segments), "fill": outline.fill_color},
    ]
    if cfg.text:
        label = marker_label(cfg, width, height, defaults)
        x, y = _fmt(label.anchor.x), _fmt(label.anchor.y)
        elements.append(
            {
                "tag": "text",
                "x": x,
                "y": y,
                "transform": f"rotate({_fmt(label.rotation)} {x} {y})",
                "text-anchor": "middle",
                "font-size": _fmt(label.text_size),
                "fill": cfg.text_color,
                "content": label.text,
            }
        )
    return serialize_svg(elements, width, height)
