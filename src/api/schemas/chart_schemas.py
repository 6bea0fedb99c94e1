# This file defines request and response schemas for the chart render endpoints.
# It exists so datasets are validated before they reach the renderers and primitives have a stable contract.
# Primitive models use a `kind` discriminator that matches the core primitives' `to_dict` output.
# Keeping these models explicit helps catch accidental payload drift during development.

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from src.api.schemas.common import EnvelopeFields

COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"


class ChartSurfaceV1(BaseModel):
    width: float = Field(ge=0, allow_inf_nan=False)
    height: float = Field(ge=0, allow_inf_nan=False)


class DataPointV1(BaseModel):
    label: str
    value: float = Field(allow_inf_nan=False)


class SliceDatumV1(BaseModel):
    label: str
    value: float = Field(allow_inf_nan=False)
    color: str = Field(pattern=COLOR_PATTERN)


class SeriesChartRequestV1(BaseModel):
    surface: ChartSurfaceV1
    points: list[DataPointV1]
    color: str | None = Field(default=None, pattern=COLOR_PATTERN)


class PieChartRequestV1(BaseModel):
    surface: ChartSurfaceV1
    slices: list[SliceDatumV1]


class PointV1(BaseModel):
    x: float
    y: float


class PolylineV1(BaseModel):
    kind: Literal["polyline"]
    points: list[PointV1]
    color: str
    stroke_width: float


class CircleV1(BaseModel):
    kind: Literal["circle"]
    center: PointV1
    radius: float
    color: str


class RectangleV1(BaseModel):
    kind: Literal["rectangle"]
    origin: PointV1
    width: float
    height: float
    corner_radius: float
    color: str


class ArcV1(BaseModel):
    kind: Literal["arc"]
    center: PointV1
    radius: float
    start_angle: float
    sweep_angle: float
    color: str


PrimitiveV1 = Annotated[Union[PolylineV1, CircleV1, RectangleV1, ArcV1], Field(discriminator="kind")]


class RenderChecksV1(BaseModel):
    passed: bool
    failures: list[dict[str, Any]]
    warnings: list[dict[str, Any]]


class ChartRenderDataV1(BaseModel):
    kind: str
    surface: ChartSurfaceV1
    primitive_count: int
    primitives: list[PrimitiveV1]
    checks: RenderChecksV1


class ChartRenderResponseV1(EnvelopeFields):
    data: ChartRenderDataV1


class ChartStyleResponseV1(EnvelopeFields):
    data: dict[str, Any]
