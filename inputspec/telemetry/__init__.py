"""Telemetry package - OpenTelemetry metrics and tracing for checks."""

from .metrics import (
    check_latency_ms,
    check_total,
    field_rejection_total,
    final_validator_total,
    record_check_metrics,
)
from .runtime import get_tracer, meter

__all__ = [
    "check_latency_ms",
    "check_total",
    "field_rejection_total",
    "final_validator_total",
    "record_check_metrics",
    "get_tracer",
    "meter",
]
