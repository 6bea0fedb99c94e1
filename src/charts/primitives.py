# This module defines the immutable value types shared by every chart renderer.
# It exists so datasets, surfaces, and drawing primitives have one validated representation.
# Primitives carry geometry plus a color only; drawing backends decide how to paint them.
# Validation happens at construction so renderers can assume finite inputs.

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Union

_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def validate_color(color: str) -> str:
    if not isinstance(color, str) or not _COLOR_RE.match(color):
        raise ValueError(f"Color must be a hex string like '#RRGGBB' or '#AARRGGBB', got: {color!r}")
    return color


def _require_finite(name: str, value: float) -> float:
    numeric = float(value)
    if not math.isfinite(numeric):
        raise ValueError(f"{name} must be finite, got: {value!r}")
    return numeric


@dataclass(frozen=True)
class DataPoint:
    label: str
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _require_finite("DataPoint.value", self.value))


@dataclass(frozen=True)
class SliceDatum:
    label: str
    value: float
    color: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _require_finite("SliceDatum.value", self.value))
        validate_color(self.color)


@dataclass(frozen=True)
class Surface:
    """Target drawing rectangle in device-independent pixels, origin at the top-left."""

    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = _require_finite(f"Surface.{name}", getattr(self, name))
            if value < 0:
                raise ValueError(f"Surface.{name} must be nonnegative, got: {value!r}")
            object.__setattr__(self, name, value)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]
    color: str
    stroke_width: float

    kind = "polyline"

    def __post_init__(self) -> None:
        validate_color(self.color)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "points": [point.to_dict() for point in self.points],
            "color": self.color,
            "stroke_width": self.stroke_width,
        }


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    color: str

    kind = "circle"

    def __post_init__(self) -> None:
        validate_color(self.color)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "center": self.center.to_dict(),
            "radius": self.radius,
            "color": self.color,
        }


@dataclass(frozen=True)
class Rectangle:
    origin: Point
    width: float
    height: float
    corner_radius: float
    color: str

    kind = "rectangle"

    def __post_init__(self) -> None:
        validate_color(self.color)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "origin": self.origin.to_dict(),
            "width": self.width,
            "height": self.height,
            "corner_radius": self.corner_radius,
            "color": self.color,
        }


@dataclass(frozen=True)
class Arc:
    """Filled circular sector; angles are radians, clockwise on a top-left origin surface."""

    center: Point
    radius: float
    start_angle: float
    sweep_angle: float
    color: str

    kind = "arc"

    def __post_init__(self) -> None:
        validate_color(self.color)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "center": self.center.to_dict(),
            "radius": self.radius,
            "start_angle": self.start_angle,
            "sweep_angle": self.sweep_angle,
            "color": self.color,
        }


Primitive = Union[Polyline, Circle, Rectangle, Arc]


def primitives_to_dicts(primitives: list[Primitive]) -> list[dict[str, Any]]:
    return [primitive.to_dict() for primitive in primitives]
