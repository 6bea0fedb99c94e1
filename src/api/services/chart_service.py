# This file implements the render service behind the chart endpoints.
# It exists so routers stay thin and never call the renderers or the SVG backend directly.
# The service enforces request size limits, renders primitives, and attaches render check results.
# One configured chart style is shared by every request the service handles.

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from src.api.api_config import ApiConfig
from src.charts.chart_config import ChartStyle
from src.charts.primitives import DataPoint, Primitive, SliceDatum, Surface, primitives_to_dicts
from src.charts.render_checks import run_render_checks
from src.charts.render_service import render_chart
from src.charts.svg_backend import primitives_to_svg


class ChartRequestTooLarge(ValueError):
    def __init__(self, message: str, *, details: dict[str, Any]) -> None:
        super().__init__(message)
        self.details = details


class ChartService:
    """Rendering for chart endpoints."""

    def __init__(self, *, config: ApiConfig, style: ChartStyle) -> None:
        self.config = config
        self.style = style

    def _enforce_limits(self, *, dataset_size: int, surface: Surface) -> None:
        if dataset_size > self.config.max_points:
            raise ChartRequestTooLarge(
                f"Dataset has {dataset_size} entries; the limit is {self.config.max_points}.",
                details={"dataset_size": dataset_size, "max_points": self.config.max_points},
            )
        largest = max(surface.width, surface.height)
        if largest > self.config.max_surface_size:
            raise ChartRequestTooLarge(
                f"Surface dimension {largest} exceeds the limit of {self.config.max_surface_size}.",
                details={"surface": {"width": surface.width, "height": surface.height}},
            )

    def render(
        self,
        *,
        kind: str,
        dataset: Sequence[DataPoint] | Sequence[SliceDatum],
        surface: Surface,
        color: str | None = None,
    ) -> tuple[list[Primitive], dict[str, Any]]:
        self._enforce_limits(dataset_size=len(dataset), surface=surface)
        primitives = render_chart(kind, dataset, surface, color=color, style=self.style)
        summary = run_render_checks(kind=kind, primitives=primitives, expected_count=len(dataset))
        return primitives, summary.to_dict()

    def render_payload(
        self,
        *,
        kind: str,
        dataset: Sequence[DataPoint] | Sequence[SliceDatum],
        surface: Surface,
        color: str | None = None,
    ) -> dict[str, Any]:
        primitives, checks = self.render(kind=kind, dataset=dataset, surface=surface, color=color)
        return {
            "kind": kind,
            "surface": {"width": surface.width, "height": surface.height},
            "primitive_count": len(primitives),
            "primitives": primitives_to_dicts(primitives),
            "checks": checks,
        }

    def render_svg(
        self,
        *,
        kind: str,
        dataset: Sequence[DataPoint] | Sequence[SliceDatum],
        surface: Surface,
        color: str | None = None,
    ) -> str:
        primitives, _ = self.render(kind=kind, dataset=dataset, surface=surface, color=color)
        return primitives_to_svg(primitives, surface, title=f"{kind} chart")
