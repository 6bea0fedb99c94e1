# This file defines helpers for API path versioning and schema version metadata.
# It exists so every response can carry explicit version fields for consumers.
# Version labels are derived from the configured path instead of being duplicated in config.

from __future__ import annotations


def api_version_label(api_version_path: str) -> str:
    """Convert `/api/v1` style paths into `v1` labels."""

    cleaned = api_version_path.rstrip("/")
    parts = [part for part in cleaned.split("/") if part]
    if not parts:
        raise ValueError(f"Invalid api_version_path: {api_version_path!r}")
    return parts[-1]


def build_version_fields(*, api_version_path: str, schema_version: str) -> dict[str, str]:
    """Return a normalized version metadata block."""

    return {
        "api_version": api_version_label(api_version_path),
        "schema_version": schema_version,
    }
