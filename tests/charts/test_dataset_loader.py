# This test file validates dataset construction from DataFrames, records, and files.
# It exists to ensure row order survives ingestion and bad rows are rejected explicitly.

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from src.charts.dataset_loader import (
    load_dataset,
    points_from_frame,
    points_from_records,
    slices_from_frame,
    slices_from_records,
)
from src.charts.primitives import DataPoint, SliceDatum


def test_points_from_frame_preserves_order_and_fields() -> None:
    frame = pd.DataFrame({"month": ["Jan", "Feb", "Mar"], "rain_mm": [12, 30.5, 7]})

    points = points_from_frame(frame, label_field="month", value_field="rain_mm")

    assert points == [
        DataPoint(label="Jan", value=12.0),
        DataPoint(label="Feb", value=30.5),
        DataPoint(label="Mar", value=7.0),
    ]


def test_frame_with_nulls_or_missing_columns_rejected() -> None:
    with pytest.raises(ValueError, match="null values"):
        points_from_frame(pd.DataFrame({"label": ["a", "b"], "value": [1.0, None]}))
    with pytest.raises(ValueError, match="missing required columns"):
        slices_from_frame(pd.DataFrame({"label": ["a"], "value": [1.0]}))


def test_empty_frame_yields_empty_dataset() -> None:
    assert points_from_frame(pd.DataFrame()) == []
    assert slices_from_frame(pd.DataFrame()) == []


def test_records_helpers() -> None:
    assert points_from_records([{"label": "a", "value": 2}]) == [DataPoint(label="a", value=2.0)]
    assert slices_from_records([{"label": "wheat", "value": 40, "color": "#FFC107"}]) == [
        SliceDatum(label="wheat", value=40.0, color="#FFC107")
    ]


def test_load_yaml_json_and_csv(tmp_path: Path) -> None:
    yaml_path = tmp_path / "yield.yaml"
    yaml_path.write_text("points:\n  - {label: a, value: 1}\n  - {label: b, value: 3}\n", encoding="utf-8")
    json_path = tmp_path / "crops.json"
    json_path.write_text(
        json.dumps({"slices": [{"label": "rice", "value": 2, "color": "#4CAF50"}]}),
        encoding="utf-8",
    )
    csv_path = tmp_path / "series.csv"
    csv_path.write_text("label,value\nx,5\ny,6\n", encoding="utf-8")

    assert [point.value for point in load_dataset(yaml_path, kind="line")] == [1.0, 3.0]
    assert load_dataset(json_path, kind="pie") == [SliceDatum(label="rice", value=2.0, color="#4CAF50")]
    assert [point.label for point in load_dataset(csv_path, kind="bar")] == ["x", "y"]


def test_unsupported_format_rejected(tmp_path: Path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("label,value\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported dataset format"):
        load_dataset(path, kind="bar")
