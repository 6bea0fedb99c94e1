# This module provides the command-line render job for chart datasets.
# It exists so operators can render a dataset file to SVG or primitive JSON without running the API.
# The job loads the dataset, renders it with the configured style, runs render checks, and writes output.
# Strict mode turns failed render checks into a non-zero exit.

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from src.charts.chart_config import load_chart_style
from src.charts.dataset_loader import load_dataset
from src.charts.primitives import Surface, primitives_to_dicts, validate_color
from src.charts.render_checks import RenderCheckError, assert_render_checks, run_render_checks
from src.charts.render_service import CHART_KINDS, render_chart
from src.charts.svg_backend import primitives_to_svg
from src.common.logging import configure_logging
from src.common.settings import get_settings

LOGGER = logging.getLogger("charts")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a chart dataset file to SVG or primitive JSON")
    parser.add_argument("--kind", choices=CHART_KINDS, required=True, help="Chart kind to render")
    parser.add_argument("--input", required=True, help="Dataset file (.yaml, .yml, .json, or .csv)")
    parser.add_argument("--width", type=float, required=True, help="Surface width in pixels")
    parser.add_argument("--height", type=float, required=True, help="Surface height in pixels")
    parser.add_argument("--format", choices=("svg", "json"), default="svg", help="Output format")
    parser.add_argument("--output", default=None, help="Output path; defaults to stdout")
    parser.add_argument("--color", default=None, help="Series color for line and bar charts")
    parser.add_argument("--style-config", default=None, help="Chart style YAML; defaults to CHART_STYLE_PATH")
    parser.add_argument("--strict", action="store_true", help="Fail when render checks report failures")
    return parser.parse_args(argv)


def run_render_job(
    *,
    kind: str,
    input_path: str,
    width: float,
    height: float,
    output_format: str = "svg",
    color: str | None = None,
    style_config_path: str | None = None,
    strict: bool = False,
) -> dict[str, Any]:
    style = load_chart_style(config_path=style_config_path or get_settings().CHART_STYLE_PATH)
    if color is not None:
        validate_color(color)

    dataset = load_dataset(input_path, kind=kind)
    surface = Surface(width=width, height=height)
    primitives = render_chart(kind, dataset, surface, color=color, style=style)

    summary = run_render_checks(kind=kind, primitives=primitives, expected_count=len(dataset))
    if strict:
        assert_render_checks(summary)

    if output_format == "svg":
        content = primitives_to_svg(primitives, surface, title=Path(input_path).stem)
    else:
        content = json.dumps(
            {
                "kind": kind,
                "surface": {"width": surface.width, "height": surface.height},
                "primitives": primitives_to_dicts(primitives),
                "checks": summary.to_dict(),
            },
            indent=2,
        )

    return {
        "kind": kind,
        "points": len(dataset),
        "primitive_count": len(primitives),
        "checks": summary.to_dict(),
        "content": content,
    }


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    try:
        result = run_render_job(
            kind=args.kind,
            input_path=args.input,
            width=args.width,
            height=args.height,
            output_format=args.format,
            color=args.color,
            style_config_path=args.style_config,
            strict=args.strict,
        )
    except RenderCheckError as exc:
        LOGGER.error("render checks failed details=%s", exc.details)
        return 1

    if args.output:
        Path(args.output).write_text(result["content"], encoding="utf-8")
    else:
        sys.stdout.write(result["content"] + "\n")

    LOGGER.info(
        "render completed kind=%s points=%s primitives=%s checks_passed=%s",
        result["kind"],
        result["points"],
        result["primitive_count"],
        result["checks"]["passed"],
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
