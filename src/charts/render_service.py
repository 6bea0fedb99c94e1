# This module dispatches render requests to the line, bar, or pie renderer by chart kind.
# It exists so the render job and API share one entrypoint and one logging convention.
# Degenerate datasets are reported with a warning log; the renderers already resolve them safely.
# Dispatch stays a plain mapping of kind to function; the renderers share no base class.

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from src.charts.bar_renderer import render_bar_chart
from src.charts.chart_config import DEFAULT_CHART_STYLE, ChartStyle
from src.charts.geometry import value_extent
from src.charts.line_renderer import render_line_chart
from src.charts.pie_renderer import pie_total, render_pie_chart
from src.charts.primitives import DataPoint, Primitive, SliceDatum, Surface

LOGGER = logging.getLogger("charts")

CHART_KINDS = ("line", "bar", "pie")


def degenerate_reason(kind: str, dataset: Sequence[Any]) -> str | None:
    """Name the fallback a renderer applies to `dataset`, if any."""

    if not dataset:
        return None
    if kind == "pie":
        return "zero_total" if pie_total(dataset) == 0 else None

    minimum, maximum = value_extent(item.value for item in dataset)
    if kind == "line" and minimum == maximum:
        return "constant_series"
    if kind == "bar" and maximum <= 0:
        return "nonpositive_max"
    return None


def render_chart(
    kind: str,
    dataset: Sequence[DataPoint] | Sequence[SliceDatum],
    surface: Surface,
    *,
    default_color: str | None = None,
    color: str | None = None,
    style: ChartStyle = DEFAULT_CHART_STYLE,
) -> list[Primitive]:
    if kind not in CHART_KINDS:
        raise ValueError(f"Unknown chart kind: {kind!r}. Expected one of {list(CHART_KINDS)}")

    resolved_default = default_color or style.default_color
    reason = degenerate_reason(kind, dataset)
    if reason is not None:
        LOGGER.warning("degenerate %s dataset reason=%s points=%s", kind, reason, len(dataset))

    primitives: list[Primitive]
    if kind == "line":
        primitives = render_line_chart(dataset, surface, default_color=resolved_default, color=color, style=style)
    elif kind == "bar":
        primitives = list(
            render_bar_chart(dataset, surface, default_color=resolved_default, color=color, style=style)
        )
    else:
        primitives = list(render_pie_chart(dataset, surface, style=style))

    LOGGER.debug(
        "rendered %s chart points=%s surface=%sx%s primitives=%s",
        kind,
        len(dataset),
        surface.width,
        surface.height,
        len(primitives),
    )
    return primitives
