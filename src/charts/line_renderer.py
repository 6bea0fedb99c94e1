# This module maps an ordered series of data points onto a polyline with per-point markers.
# It exists so line charts share one deterministic coordinate mapping across every host surface.
# Values are range-normalized between the series minimum and maximum, then flipped onto the vertical axis.
# The polyline is emitted first and the markers after it, so markers paint on top.

from __future__ import annotations

from collections.abc import Sequence

from src.charts.chart_config import DEFAULT_CHART_STYLE, ChartStyle
from src.charts.geometry import even_positions, normalize, scale_to_axis, value_extent
from src.charts.primitives import Circle, DataPoint, Point, Polyline, Primitive, Surface


def line_vertices(
    points: Sequence[DataPoint],
    surface: Surface,
    *,
    degenerate_fraction: float = DEFAULT_CHART_STYLE.degenerate_fraction,
) -> list[Point]:
    if not points:
        return []

    minimum, maximum = value_extent(point.value for point in points)
    xs = even_positions(len(points), surface.width)
    vertices: list[Point] = []
    for x, point in zip(xs, points, strict=True):
        fraction = normalize(point.value, minimum, maximum, degenerate_fraction=degenerate_fraction)
        y = scale_to_axis(fraction, surface.height, inverted=True)
        vertices.append(Point(x=x, y=y))
    return vertices


def render_line_chart(
    points: Sequence[DataPoint],
    surface: Surface,
    *,
    default_color: str,
    color: str | None = None,
    style: ChartStyle = DEFAULT_CHART_STYLE,
) -> list[Primitive]:
    if not points or surface.is_empty:
        return []

    resolved_color = color or default_color
    vertices = line_vertices(points, surface, degenerate_fraction=style.degenerate_fraction)

    primitives: list[Primitive] = [
        Polyline(points=tuple(vertices), color=resolved_color, stroke_width=style.line_stroke_width)
    ]
    primitives.extend(
        Circle(center=vertex, radius=style.marker_radius, color=resolved_color) for vertex in vertices
    )
    return primitives
