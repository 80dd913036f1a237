"""Shared utilities: datetime and id generators."""

from app.shared.utils.datetime import ensure_utc, to_timestamp_ms, utc_now
from app.shared.utils.generators import generate_cuid, generate_uuid

__all__ = [
    "generate_cuid",
    "generate_uuid",
    "utc_now",
    "ensure_utc",
    "to_timestamp_ms",
]
