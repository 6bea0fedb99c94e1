# This module implements structural quality checks over rendered chart primitives.
# It exists so hosts can reject malformed output before it reaches a drawing backend.
# The checks enforce finite geometry, per-kind primitive counts, and the pie sweep-sum law.
# Results are structured dictionaries so the render job and API can report them verbatim.

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from src.charts.primitives import Arc, Circle, Polyline, Primitive, Rectangle

SWEEP_TOLERANCE = 1e-9
CHECKED_KINDS = ("line", "bar", "pie")


class RenderCheckError(RuntimeError):
    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


@dataclass(frozen=True)
class RenderCheckSummary:
    passed: bool
    failures: list[dict[str, Any]]
    warnings: list[dict[str, Any]]

    def to_dict(self) -> dict[str, Any]:
        return {"passed": self.passed, "failures": self.failures, "warnings": self.warnings}


def geometry_values(primitive: Primitive) -> list[float]:
    """Every numeric field of `primitive`, flattened in declaration order."""

    if isinstance(primitive, Polyline):
        coords = [value for point in primitive.points for value in (point.x, point.y)]
        return [*coords, primitive.stroke_width]
    if isinstance(primitive, Circle):
        return [primitive.center.x, primitive.center.y, primitive.radius]
    if isinstance(primitive, Rectangle):
        return [
            primitive.origin.x,
            primitive.origin.y,
            primitive.width,
            primitive.height,
            primitive.corner_radius,
        ]
    if isinstance(primitive, Arc):
        return [
            primitive.center.x,
            primitive.center.y,
            primitive.radius,
            primitive.start_angle,
            primitive.sweep_angle,
        ]
    raise TypeError(f"Unsupported primitive type: {type(primitive).__name__}")


def _count_kinds(primitives: Sequence[Primitive]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for primitive in primitives:
        counts[primitive.kind] = counts.get(primitive.kind, 0) + 1
    return counts


def run_render_checks(
    *,
    kind: str,
    primitives: Sequence[Primitive],
    expected_count: int,
) -> RenderCheckSummary:
    """Check rendered output for `kind` against a dataset of `expected_count` entries."""

    if kind not in CHECKED_KINDS:
        raise ValueError(f"Unknown chart kind: {kind!r}")

    failures: list[dict[str, Any]] = []
    warnings: list[dict[str, Any]] = []

    non_finite = 0
    for primitive in primitives:
        values = np.asarray(geometry_values(primitive), dtype=float)
        if not np.isfinite(values).all():
            non_finite += 1
    if non_finite:
        failures.append({"check": "finite_geometry", "invalid_primitives": non_finite})

    counts = _count_kinds(primitives)
    if not primitives:
        if expected_count:
            warnings.append({"check": "empty_output", "expected_count": expected_count})
    elif kind == "line":
        polylines = [primitive for primitive in primitives if isinstance(primitive, Polyline)]
        vertex_count = len(polylines[0].points) if len(polylines) == 1 else None
        if len(polylines) != 1 or vertex_count != expected_count or counts.get("circle", 0) != expected_count:
            failures.append(
                {
                    "check": "line_counts",
                    "expected_points": expected_count,
                    "polylines": len(polylines),
                    "vertices": vertex_count,
                    "markers": counts.get("circle", 0),
                }
            )
    elif kind == "bar":
        if counts.get("rectangle", 0) != expected_count or len(counts) != 1:
            failures.append({"check": "bar_counts", "expected_bars": expected_count, "actual": counts})
        zero_height = sum(1 for primitive in primitives if isinstance(primitive, Rectangle) and primitive.height == 0)
        if zero_height:
            warnings.append({"check": "zero_height_bars", "bars": zero_height})
    elif kind == "pie":
        if counts.get("arc", 0) != expected_count or len(counts) != 1:
            failures.append({"check": "pie_counts", "expected_arcs": expected_count, "actual": counts})
        sweep_sum = math.fsum(primitive.sweep_angle for primitive in primitives if isinstance(primitive, Arc))
        if abs(sweep_sum - math.tau) > SWEEP_TOLERANCE:
            failures.append({"check": "pie_sweep_sum", "expected": math.tau, "actual": sweep_sum})

    return RenderCheckSummary(passed=not failures, failures=failures, warnings=warnings)


def assert_render_checks(summary: RenderCheckSummary) -> None:
    if summary.passed:
        return
    names = ", ".join(str(failure["check"]) for failure in summary.failures)
    raise RenderCheckError(f"Render checks failed: {names}", details=summary.to_dict())
