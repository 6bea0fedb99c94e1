# This file provides dependency factories for FastAPI routes.
# It exists so the chart service is created once and shared through dependency injection.
# The setup keeps routers thin and makes endpoint tests easy to override.
# Centralized construction also ensures one consistent API configuration and chart style are used.

from __future__ import annotations

from functools import lru_cache

from src.api.api_config import ApiConfig, get_api_config
from src.api.services.chart_service import ChartService
from src.charts.chart_config import load_chart_style


@lru_cache(maxsize=1)
def get_chart_service() -> ChartService:
    config = get_api_config()
    style = load_chart_style(config_path=config.chart_style_path)
    return ChartService(config=config, style=style)


def get_config() -> ApiConfig:
    return get_api_config()
