"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
    ensure_utc,
    generate_cuid,
    generate_uuid,
    to_timestamp_ms,
    utc_now,
)

__all__ = [
    "generate_cuid",
    "generate_uuid",
    "utc_now",
    "ensure_utc",
    "to_timestamp_ms",
]
