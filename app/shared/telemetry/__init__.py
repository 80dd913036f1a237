"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from app.shared.telemetry.logging import request_id_var, setup_logging
from app.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    get_tracer,
    set_telemetry,
)
from app.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    set_span_error,
    traced,
)

__all__ = [
    "setup_logging",
    "request_id_var",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "get_tracer",
    "traced",
    "add_span_attributes",
    "add_span_event",
    "set_span_error",
]
