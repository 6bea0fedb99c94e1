# This file defines the style configuration shared by the chart renderers.
# It exists so marker sizes, corner radii, proportions, and the default color are tuned in one place.
# The loader merges YAML defaults with environment overrides and validates every value.
# Renderers receive a `ChartStyle` explicitly, so nothing reads ambient theme state at draw time.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

import yaml

from src.charts.primitives import validate_color


def _load_yaml(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping, got: {type(loaded).__name__}")
    return dict(loaded)


def _env_str(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value


def _env_float(name: str, default: float | None = None) -> float | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return float(value)


@dataclass(frozen=True)
class ChartStyle:
    default_color: str = "#2E7D32"
    line_stroke_width: float = 2.0
    marker_radius: float = 4.0
    bar_width_fraction: float = 0.8
    bar_corner_radius: float = 4.0
    pie_radius_fraction: float = 0.8
    degenerate_fraction: float = 0.5

    def to_dict(self) -> dict[str, Any]:
        return {
            "default_color": self.default_color,
            "line_stroke_width": self.line_stroke_width,
            "marker_radius": self.marker_radius,
            "bar_width_fraction": self.bar_width_fraction,
            "bar_corner_radius": self.bar_corner_radius,
            "pie_radius_fraction": self.pie_radius_fraction,
            "degenerate_fraction": self.degenerate_fraction,
        }


DEFAULT_CHART_STYLE = ChartStyle()


def validate_chart_style(style: ChartStyle) -> ChartStyle:
    validate_color(style.default_color)
    if style.line_stroke_width <= 0:
        raise ValueError("line_stroke_width must be > 0")
    if style.marker_radius < 0:
        raise ValueError("marker_radius must be nonnegative")
    if not (0 < style.bar_width_fraction <= 1):
        raise ValueError("bar_width_fraction must be in (0, 1]")
    if style.bar_corner_radius < 0:
        raise ValueError("bar_corner_radius must be nonnegative")
    if not (0 < style.pie_radius_fraction <= 1):
        raise ValueError("pie_radius_fraction must be in (0, 1]")
    if not (0 <= style.degenerate_fraction <= 1):
        raise ValueError("degenerate_fraction must be in [0, 1]")
    return style


def load_chart_style(*, config_path: str = "configs/chart_style.yaml") -> ChartStyle:
    cfg = _load_yaml(config_path) if os.path.exists(config_path) else {}
    line_cfg = dict(cfg.get("line", {}))
    bar_cfg = dict(cfg.get("bar", {}))
    pie_cfg = dict(cfg.get("pie", {}))
    defaults = DEFAULT_CHART_STYLE

    style = ChartStyle(
        default_color=str(_env_str("CHART_DEFAULT_COLOR", str(cfg.get("default_color", defaults.default_color)))),
        line_stroke_width=float(
            _env_float("CHART_LINE_STROKE_WIDTH", float(line_cfg.get("stroke_width", defaults.line_stroke_width)))
        ),
        marker_radius=float(
            _env_float("CHART_MARKER_RADIUS", float(line_cfg.get("marker_radius", defaults.marker_radius)))
        ),
        bar_width_fraction=float(
            _env_float("CHART_BAR_WIDTH_FRACTION", float(bar_cfg.get("width_fraction", defaults.bar_width_fraction)))
        ),
        bar_corner_radius=float(
            _env_float("CHART_BAR_CORNER_RADIUS", float(bar_cfg.get("corner_radius", defaults.bar_corner_radius)))
        ),
        pie_radius_fraction=float(
            _env_float("CHART_PIE_RADIUS_FRACTION", float(pie_cfg.get("radius_fraction", defaults.pie_radius_fraction)))
        ),
        degenerate_fraction=float(
            _env_float(
                "CHART_DEGENERATE_FRACTION",
                float(line_cfg.get("degenerate_fraction", defaults.degenerate_fraction)),
            )
        ),
    )
    return validate_chart_style(style)
