# This file builds response envelopes for chart endpoints in a consistent format.
# It exists so clients always receive version metadata and request tracing fields next to primitives.
# The helpers return plain dictionaries that Pydantic response models validate at runtime.
# This keeps endpoint functions focused on rendering instead of repetitive envelope assembly.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from src.api.schema_versions import build_version_fields


def utc_now_iso() -> datetime:
    """Return timezone-aware UTC timestamp for response generation."""

    return datetime.now(tz=UTC)


def build_object_envelope(
    *,
    api_version_path: str,
    schema_version: str,
    request_id: str,
    data: dict[str, Any] | list[dict[str, Any]] | None,
    warnings: list[str] | None = None,
) -> dict[str, Any]:
    """Build standard non-list response envelope."""

    return {
        **build_version_fields(api_version_path=api_version_path, schema_version=schema_version),
        "request_id": request_id,
        "generated_at": utc_now_iso(),
        "data": data,
        "warnings": warnings,
    }
