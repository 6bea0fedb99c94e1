# This file provides shared helpers for API endpoint tests.
# It exists so tests can override the config and chart service without touching process settings.
# The helpers build consistent config objects and scoped TestClient contexts.
# Centralized test wiring keeps API tests small and focused on behavior.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi.testclient import TestClient

from src.api.api_config import ApiConfig
from src.api.app import app
from src.api.dependencies import get_chart_service, get_config
from src.api.services.chart_service import ChartService
from src.charts.chart_config import DEFAULT_CHART_STYLE, ChartStyle


def build_test_config(*, max_points: int = 50) -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Chart API",
        api_version_path="/api/v1",
        schema_version="1.0.0",
        host="0.0.0.0",
        port=8000,
        environment="test",
        max_points=max_points,
        max_surface_size=2000.0,
        chart_style_path="configs/chart_style.yaml",
        allowed_origins=[],
        app_version="0.1.0",
    )


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    style: ChartStyle | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()
    service = ChartService(config=resolved_config, style=style or DEFAULT_CHART_STYLE)

    app.dependency_overrides[get_config] = lambda: resolved_config
    app.dependency_overrides[get_chart_service] = lambda: service

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
