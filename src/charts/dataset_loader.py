# This module builds renderer datasets from DataFrames, record lists, and dataset files.
# It exists so hosts can hand tabular application state to the renderers without bespoke glue.
# Row order is preserved because it defines x-axis order and pie slice order.
# Missing columns and null values are rejected with explicit errors instead of being dropped.

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import pandas as pd
import yaml

from src.charts.primitives import DataPoint, SliceDatum

SUPPORTED_SUFFIXES = {".yaml", ".yml", ".json", ".csv"}


def _require_columns(frame: pd.DataFrame, columns: list[str]) -> None:
    missing = [column for column in columns if column not in frame.columns]
    if missing:
        raise ValueError(f"Dataset is missing required columns: {', '.join(missing)}")


def _reject_nulls(frame: pd.DataFrame, columns: list[str]) -> None:
    null_counts = {column: int(frame[column].isna().sum()) for column in columns}
    offending = {column: count for column, count in null_counts.items() if count}
    if offending:
        raise ValueError(f"Dataset has null values: {offending}")


def points_from_frame(
    frame: pd.DataFrame,
    *,
    label_field: str = "label",
    value_field: str = "value",
) -> list[DataPoint]:
    if frame.empty:
        return []
    _require_columns(frame, [label_field, value_field])
    _reject_nulls(frame, [value_field])

    labels = frame[label_field].astype(str)
    values = frame[value_field].astype(float)
    return [DataPoint(label=label, value=value) for label, value in zip(labels, values, strict=True)]


def slices_from_frame(
    frame: pd.DataFrame,
    *,
    label_field: str = "label",
    value_field: str = "value",
    color_field: str = "color",
) -> list[SliceDatum]:
    if frame.empty:
        return []
    _require_columns(frame, [label_field, value_field, color_field])
    _reject_nulls(frame, [value_field, color_field])

    labels = frame[label_field].astype(str)
    values = frame[value_field].astype(float)
    colors = frame[color_field].astype(str)
    return [
        SliceDatum(label=label, value=value, color=color)
        for label, value, color in zip(labels, values, colors, strict=True)
    ]


def points_from_records(records: Iterable[Mapping[str, Any]]) -> list[DataPoint]:
    return [DataPoint(label=str(record["label"]), value=float(record["value"])) for record in records]


def slices_from_records(records: Iterable[Mapping[str, Any]]) -> list[SliceDatum]:
    return [
        SliceDatum(label=str(record["label"]), value=float(record["value"]), color=str(record["color"]))
        for record in records
    ]


def _records_from_payload(payload: Any, *, kind: str) -> list[dict[str, Any]]:
    if isinstance(payload, list):
        return [dict(item) for item in payload]
    if isinstance(payload, dict):
        key = "slices" if kind == "pie" else "points"
        records = payload.get(key, payload.get("data"))
        if isinstance(records, list):
            return [dict(item) for item in records]
        raise ValueError(f"Dataset mapping must contain a '{key}' or 'data' list")
    raise ValueError(f"Dataset must be a list or mapping, got: {type(payload).__name__}")


def load_dataset_frame(path: str | Path, *, kind: str) -> pd.DataFrame:
    """Read a dataset file into a DataFrame with one row per point or slice."""

    dataset_path = Path(path)
    suffix = dataset_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported dataset format {suffix!r}; expected one of {sorted(SUPPORTED_SUFFIXES)}")

    if suffix == ".csv":
        return pd.read_csv(dataset_path)

    with open(dataset_path, encoding="utf-8") as handle:
        payload = json.load(handle) if suffix == ".json" else yaml.safe_load(handle)
    return pd.DataFrame(_records_from_payload(payload or [], kind=kind))


def load_dataset(path: str | Path, *, kind: str) -> list[DataPoint] | list[SliceDatum]:
    frame = load_dataset_frame(path, kind=kind)
    if kind == "pie":
        return slices_from_frame(frame)
    return points_from_frame(frame)
