# This module maps pie slices onto circular sectors that together cover one full turn.
# It exists so slice order and angular accumulation are deterministic for every host surface.
# Slices start at 12 o'clock and proceed clockwise in input order.
# Boundaries come from cumulative shares, so the final slice closes the circle exactly.

from __future__ import annotations

import math
from collections.abc import Sequence

from src.charts.chart_config import DEFAULT_CHART_STYLE, ChartStyle
from src.charts.geometry import cumulative_fractions, magnitude_scaled
from src.charts.primitives import Arc, Point, SliceDatum, Surface

START_ANGLE = -math.pi / 2
FULL_TURN = math.tau


def slice_shares(slices: Sequence[SliceDatum]) -> list[float]:
    return magnitude_scaled([item.value for item in slices])


def pie_total(slices: Sequence[SliceDatum]) -> float:
    """Sum of the slice shares; zero exactly when the slices carry no angle to distribute."""

    return sum(slice_shares(slices))


def render_pie_chart(
    slices: Sequence[SliceDatum],
    surface: Surface,
    *,
    style: ChartStyle = DEFAULT_CHART_STYLE,
) -> list[Arc]:
    if not slices or surface.is_empty:
        return []

    shares = slice_shares(slices)
    total = sum(shares)
    if total == 0:
        return []

    center = Point(x=surface.width / 2, y=surface.height / 2)
    radius = min(surface.width, surface.height) / 2 * style.pie_radius_fraction
    boundaries = cumulative_fractions(shares, total)

    arcs: list[Arc] = []
    start_angle = START_ANGLE
    for item, boundary in zip(slices, boundaries, strict=True):
        end_angle = START_ANGLE + boundary * FULL_TURN
        arcs.append(
            Arc(
                center=center,
                radius=radius,
                start_angle=start_angle,
                sweep_angle=end_angle - start_angle,
                color=item.color,
            )
        )
        start_angle = end_angle
    return arcs
