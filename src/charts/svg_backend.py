# This module is a reference drawing backend that serializes chart primitives into an SVG document.
# It exists so the CLI and API can return a viewable chart without a native UI toolkit.
# Elements are written in primitive order, which is also SVG paint order.
# Arcs become filled pie sectors; an arc covering a full turn is written as a circle.

from __future__ import annotations

import math
from collections.abc import Sequence
from html import escape

from src.charts.primitives import Arc, Circle, Polyline, Primitive, Rectangle, Surface

FULL_TURN_TOLERANCE = 1e-9


def _fmt(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in {"", "-0"} else text


def _paint_attrs(color: str, *, attribute: str) -> str:
    # Eight-digit colors are alpha-first (#AARRGGBB).
    if len(color) == 9:
        alpha = int(color[1:3], 16) / 255
        rgb = f"#{color[3:]}"
        return f'{attribute}="{rgb}" {attribute}-opacity="{_fmt(alpha)}"'
    return f'{attribute}="{color}"'


def _polyline_element(primitive: Polyline) -> str:
    points = " ".join(f"{_fmt(point.x)},{_fmt(point.y)}" for point in primitive.points)
    return (
        f'<polyline points="{points}" fill="none" {_paint_attrs(primitive.color, attribute="stroke")} '
        f'stroke-width="{_fmt(primitive.stroke_width)}" stroke-linejoin="round"/>'
    )


def _circle_element(primitive: Circle) -> str:
    return (
        f'<circle cx="{_fmt(primitive.center.x)}" cy="{_fmt(primitive.center.y)}" '
        f'r="{_fmt(primitive.radius)}" {_paint_attrs(primitive.color, attribute="fill")}/>'
    )


def _rectangle_element(primitive: Rectangle) -> str:
    # SVG rejects negative sizes, so flip negative-height bars around their origin.
    y = primitive.origin.y
    height = primitive.height
    if height < 0:
        y += height
        height = -height
    radius = min(primitive.corner_radius, primitive.width / 2, height / 2)
    return (
        f'<rect x="{_fmt(primitive.origin.x)}" y="{_fmt(y)}" width="{_fmt(primitive.width)}" '
        f'height="{_fmt(height)}" rx="{_fmt(radius)}" ry="{_fmt(radius)}" '
        f'{_paint_attrs(primitive.color, attribute="fill")}/>'
    )


def _arc_element(primitive: Arc) -> str:
    cx, cy, radius = primitive.center.x, primitive.center.y, primitive.radius
    fill = _paint_attrs(primitive.color, attribute="fill")
    if abs(abs(primitive.sweep_angle) - math.tau) <= FULL_TURN_TOLERANCE:
        return f'<circle cx="{_fmt(cx)}" cy="{_fmt(cy)}" r="{_fmt(radius)}" {fill}/>'

    start = primitive.start_angle
    end = start + primitive.sweep_angle
    x1 = cx + radius * math.cos(start)
    y1 = cy + radius * math.sin(start)
    x2 = cx + radius * math.cos(end)
    y2 = cy + radius * math.sin(end)
    large_arc = 1 if abs(primitive.sweep_angle) > math.pi else 0
    sweep_flag = 1 if primitive.sweep_angle >= 0 else 0
    path = (
        f"M {_fmt(cx)} {_fmt(cy)} L {_fmt(x1)} {_fmt(y1)} "
        f"A {_fmt(radius)} {_fmt(radius)} 0 {large_arc} {sweep_flag} {_fmt(x2)} {_fmt(y2)} Z"
    )
    return f'<path d="{path}" {fill}/>'


def primitive_to_svg(primitive: Primitive) -> str:
    if isinstance(primitive, Polyline):
        return _polyline_element(primitive)
    if isinstance(primitive, Circle):
        return _circle_element(primitive)
    if isinstance(primitive, Rectangle):
        return _rectangle_element(primitive)
    if isinstance(primitive, Arc):
        return _arc_element(primitive)
    raise TypeError(f"Unsupported primitive type: {type(primitive).__name__}")


def primitives_to_svg(
    primitives: Sequence[Primitive],
    surface: Surface,
    *,
    background: str | None = None,
    title: str | None = None,
) -> str:
    width, height = _fmt(surface.width), _fmt(surface.height)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    ]
    if title:
        lines.append(f"<title>{escape(title)}</title>")
    if background:
        lines.append(
            f'<rect x="0" y="0" width="{width}" height="{height}" {_paint_attrs(background, attribute="fill")}/>'
        )
    lines.extend(primitive_to_svg(primitive) for primitive in primitives)
    lines.append("</svg>")
    return "\n".join(lines)
