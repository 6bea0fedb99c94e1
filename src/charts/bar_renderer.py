# This module maps an ordered series of data points onto evenly spaced rounded rectangles.
# It exists so bar charts size every bar in proportion to the series maximum.
# Bars grow upward from zero rather than being range-normalized like the line chart.
# A series without a positive maximum renders zero-height bars on the bottom edge.

from __future__ import annotations

from collections.abc import Sequence

from src.charts.chart_config import DEFAULT_CHART_STYLE, ChartStyle
from src.charts.geometry import ratio, value_extent
from src.charts.primitives import DataPoint, Point, Rectangle, Surface


def render_bar_chart(
    points: Sequence[DataPoint],
    surface: Surface,
    *,
    default_color: str,
    color: str | None = None,
    style: ChartStyle = DEFAULT_CHART_STYLE,
) -> list[Rectangle]:
    if not points or surface.is_empty:
        return []

    resolved_color = color or default_color
    _, maximum = value_extent(point.value for point in points)
    # Non-positive maximum collapses every bar to zero height.
    scale_max = maximum if maximum > 0 else 0.0

    slot_width = surface.width / len(points)
    bar_width = slot_width * style.bar_width_fraction
    gap = slot_width - bar_width

    bars: list[Rectangle] = []
    for index, point in enumerate(points):
        bar_height = ratio(point.value, scale_max) * surface.height
        x = index * slot_width + gap / 2
        y = surface.height - bar_height
        bars.append(
            Rectangle(
                origin=Point(x=x, y=y),
                width=bar_width,
                height=bar_height,
                corner_radius=style.bar_corner_radius,
                color=resolved_color,
            )
        )
    return bars
