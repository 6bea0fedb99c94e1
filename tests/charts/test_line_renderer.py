# This test file validates line chart geometry.
# It exists to ensure vertex counts, range mapping, and marker placement are deterministic.
# The cases also cover single-point series and constant series fallbacks.

from __future__ import annotations

import math

from src.charts.chart_config import ChartStyle
from src.charts.line_renderer import render_line_chart
from src.charts.primitives import Circle, DataPoint, Polyline, Surface

COLOR = "#1565C0"


def _points(*values: float) -> list[DataPoint]:
    return [DataPoint(label=f"p{index}", value=value) for index, value in enumerate(values)]


def test_empty_series_renders_nothing() -> None:
    assert render_line_chart([], Surface(width=100.0, height=50.0), default_color=COLOR) == []


def test_empty_surface_renders_nothing() -> None:
    assert render_line_chart(_points(1.0, 2.0), Surface(width=0.0, height=0.0), default_color=COLOR) == []


def test_polyline_then_one_marker_per_point() -> None:
    primitives = render_line_chart(_points(3.0, 1.0, 4.0, 1.5), Surface(width=300.0, height=100.0), default_color=COLOR)

    assert isinstance(primitives[0], Polyline)
    assert len(primitives[0].points) == 4
    markers = primitives[1:]
    assert len(markers) == 4
    assert all(isinstance(marker, Circle) and marker.radius == 4.0 for marker in markers)
    assert [marker.center for marker in markers] == list(primitives[0].points)


def test_range_maps_min_to_bottom_and_max_to_top() -> None:
    height = 80.0
    polyline = render_line_chart(_points(0.0, 10.0), Surface(width=100.0, height=height), default_color=COLOR)[0]

    assert polyline.points[0].x == 0.0
    assert polyline.points[0].y == height
    assert polyline.points[1].x == 100.0
    assert polyline.points[1].y == 0.0


def test_single_point_is_centered() -> None:
    polyline = render_line_chart(_points(7.0), Surface(width=120.0, height=60.0), default_color=COLOR)[0]

    assert polyline.points[0].x == 60.0
    assert polyline.points[0].y == 30.0


def test_constant_series_stays_finite_and_centered_vertically() -> None:
    primitives = render_line_chart(_points(5.0, 5.0, 5.0), Surface(width=100.0, height=40.0), default_color=COLOR)

    polyline = primitives[0]
    assert [point.y for point in polyline.points] == [20.0, 20.0, 20.0]
    assert all(math.isfinite(point.x) and math.isfinite(point.y) for point in polyline.points)


def test_explicit_color_overrides_default_and_style_applies() -> None:
    style = ChartStyle(marker_radius=6.0, line_stroke_width=3.0)
    primitives = render_line_chart(
        _points(1.0, 2.0),
        Surface(width=100.0, height=40.0),
        default_color=COLOR,
        color="#FF5722",
        style=style,
    )

    assert primitives[0].color == "#FF5722"
    assert primitives[0].stroke_width == 3.0
    assert primitives[1].radius == 6.0


def test_render_is_deterministic() -> None:
    points = _points(2.0, 9.0, 4.0)
    surface = Surface(width=90.0, height=45.0)
    assert render_line_chart(points, surface, default_color=COLOR) == render_line_chart(
        points, surface, default_color=COLOR
    )


def test_extreme_range_maps_to_finite_edges() -> None:
    primitives = render_line_chart(_points(-1e308, 1e308), Surface(width=100.0, height=50.0), default_color=COLOR)

    polyline = primitives[0]
    assert [vertex.y for vertex in polyline.points] == [50.0, 0.0]
    assert all(math.isfinite(vertex.y) for vertex in polyline.points)
