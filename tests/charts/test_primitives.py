# This test file validates construction rules for datasets, surfaces, and primitives.
# It exists so invalid input is rejected before any renderer does arithmetic on it.
# The cases also confirm primitive serialization carries the `kind` discriminator.

from __future__ import annotations

import math

import pytest

from src.charts.bar_renderer import render_bar_chart
from src.charts.line_renderer import render_line_chart
from src.charts.primitives import (
    Arc,
    Circle,
    DataPoint,
    Point,
    Polyline,
    Rectangle,
    SliceDatum,
    Surface,
    primitives_to_dicts,
)


def test_data_point_rejects_non_finite_values() -> None:
    with pytest.raises(ValueError, match="finite"):
        DataPoint(label="bad", value=math.nan)
    with pytest.raises(ValueError, match="finite"):
        DataPoint(label="bad", value=math.inf)


def test_slice_accepts_negative_values_but_validates_color() -> None:
    assert SliceDatum(label="refund", value=-2.0, color="#FF0000").value == -2.0
    with pytest.raises(ValueError, match="Color"):
        SliceDatum(label="x", value=1.0, color="red")


def test_surface_rejects_negative_dimensions() -> None:
    with pytest.raises(ValueError, match="nonnegative"):
        Surface(width=-1.0, height=10.0)
    assert Surface(width=0.0, height=0.0).is_empty
    assert Surface(width=100.0, height=0.0).is_empty
    assert not Surface(width=100.0, height=50.0).is_empty


def test_primitive_dicts_include_kind() -> None:
    arc = Arc(center=Point(x=1.0, y=2.0), radius=3.0, start_angle=0.0, sweep_angle=1.0, color="#123456")
    payload = primitives_to_dicts([arc])
    assert payload == [
        {
            "kind": "arc",
            "center": {"x": 1.0, "y": 2.0},
            "radius": 3.0,
            "start_angle": 0.0,
            "sweep_angle": 1.0,
            "color": "#123456",
        }
    ]


@pytest.mark.parametrize(
    "build",
    [
        lambda color: Polyline(points=(Point(x=0.0, y=0.0),), color=color, stroke_width=2.0),
        lambda color: Circle(center=Point(x=0.0, y=0.0), radius=4.0, color=color),
        lambda color: Rectangle(origin=Point(x=0.0, y=0.0), width=1.0, height=1.0, corner_radius=0.0, color=color),
        lambda color: Arc(center=Point(x=0.0, y=0.0), radius=1.0, start_angle=0.0, sweep_angle=1.0, color=color),
    ],
)
def test_primitives_reject_malformed_colors(build) -> None:
    assert build("#80FF0000").color == "#80FF0000"
    with pytest.raises(ValueError, match="Color"):
        build("not-a-color")


def test_renderers_reject_malformed_default_color() -> None:
    points = [DataPoint(label="a", value=1.0), DataPoint(label="b", value=2.0)]
    surface = Surface(width=100.0, height=50.0)

    with pytest.raises(ValueError, match="Color"):
        render_line_chart(points, surface, default_color="not-a-color")
    with pytest.raises(ValueError, match="Color"):
        render_bar_chart(points, surface, default_color="not-a-color")
