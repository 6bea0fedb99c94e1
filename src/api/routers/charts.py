# This file defines the chart render endpoints under the versioned API path.
# It exists so hosts can submit a dataset and surface and receive drawing primitives or an SVG document.
# Request bodies are validated by Pydantic models before conversion into core value types.
# JSON responses use the shared object envelope with render check results attached.

from __future__ import annotations

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, Request, Response

from src.api.api_config import ApiConfig
from src.api.dependencies import get_chart_service, get_config
from src.api.error_handlers import APIError
from src.api.response_envelope import build_object_envelope
from src.api.schemas.chart_schemas import (
    ChartRenderResponseV1,
    ChartStyleResponseV1,
    ChartSurfaceV1,
    PieChartRequestV1,
    SeriesChartRequestV1,
)
from src.api.services.chart_service import ChartRequestTooLarge, ChartService
from src.charts.primitives import DataPoint, SliceDatum, Surface

router = APIRouter(prefix="/charts", tags=["charts"])
ChartServiceDep = Annotated[ChartService, Depends(get_chart_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
OutputFormat = Literal["json", "svg"]

SVG_MEDIA_TYPE = "image/svg+xml"


def _surface(payload: ChartSurfaceV1) -> Surface:
    return Surface(width=payload.width, height=payload.height)


def _render_response(
    *,
    request: Request,
    config: ApiConfig,
    service: ChartService,
    kind: str,
    dataset: list[DataPoint] | list[SliceDatum],
    surface: Surface,
    color: str | None,
    output_format: str,
) -> dict[str, object] | Response:
    try:
        if output_format == "svg":
            svg = service.render_svg(kind=kind, dataset=dataset, surface=surface, color=color)
            return Response(content=svg, media_type=SVG_MEDIA_TYPE)
        payload = service.render_payload(kind=kind, dataset=dataset, surface=surface, color=color)
    except ChartRequestTooLarge as exc:
        raise APIError(
            status_code=413,
            error_code="CHART_REQUEST_TOO_LARGE",
            message=str(exc),
            details=exc.details,
        ) from exc

    warnings = [str(item["check"]) for item in payload["checks"]["warnings"]] or None
    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=payload,
        warnings=warnings,
    )


def _series_dataset(body: SeriesChartRequestV1) -> list[DataPoint]:
    return [DataPoint(label=point.label, value=point.value) for point in body.points]


@router.post(
    "/line/render",
    response_model=ChartRenderResponseV1,
    responses={200: {"content": {SVG_MEDIA_TYPE: {}}}},
)
def render_line(
    request: Request,
    body: SeriesChartRequestV1,
    service: ChartServiceDep,
    config: ConfigDep,
    output_format: OutputFormat = Query(default="json", alias="format"),
) -> dict[str, object] | Response:
    return _render_response(
        request=request,
        config=config,
        service=service,
        kind="line",
        dataset=_series_dataset(body),
        surface=_surface(body.surface),
        color=body.color,
        output_format=output_format,
    )


@router.post(
    "/bar/render",
    response_model=ChartRenderResponseV1,
    responses={200: {"content": {SVG_MEDIA_TYPE: {}}}},
)
def render_bar(
    request: Request,
    body: SeriesChartRequestV1,
    service: ChartServiceDep,
    config: ConfigDep,
    output_format: OutputFormat = Query(default="json", alias="format"),
) -> dict[str, object] | Response:
    return _render_response(
        request=request,
        config=config,
        service=service,
        kind="bar",
        dataset=_series_dataset(body),
        surface=_surface(body.surface),
        color=body.color,
        output_format=output_format,
    )


@router.post(
    "/pie/render",
    response_model=ChartRenderResponseV1,
    responses={200: {"content": {SVG_MEDIA_TYPE: {}}}},
)
def render_pie(
    request: Request,
    body: PieChartRequestV1,
    service: ChartServiceDep,
    config: ConfigDep,
    output_format: OutputFormat = Query(default="json", alias="format"),
) -> dict[str, object] | Response:
    dataset = [SliceDatum(label=item.label, value=item.value, color=item.color) for item in body.slices]
    return _render_response(
        request=request,
        config=config,
        service=service,
        kind="pie",
        dataset=dataset,
        surface=_surface(body.surface),
        color=None,
        output_format=output_format,
    )


@router.get("/style", response_model=ChartStyleResponseV1)
def chart_style(
    request: Request,
    service: ChartServiceDep,
    config: ConfigDep,
) -> dict[str, object]:
    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=service.style.to_dict(),
    )
