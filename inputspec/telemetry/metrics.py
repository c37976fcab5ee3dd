# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for inputspec."""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping

from .runtime import meter

logger = logging.getLogger(__name__)

check_total = meter.create_counter(
    name="inputspec.check.total",
    description="Counts specification-set checks partitioned by status.",
    unit="1",
)

field_rejection_total = meter.create_counter(
    name="inputspec.field.rejection.total",
    description="Counts rejected inputs partitioned by reason.",
    unit="1",
)

final_validator_total = meter.create_counter(
    name="inputspec.final_validator.total",
    description="Counts final (cross-field) validator invocations partitioned by status.",
    unit="1",
)

check_latency_ms = meter.create_histogram(
    name="inputspec.check.latency.ms",
    description="Time taken by a single specification-set check, validators included.",
    unit="ms",
)


def check_status(result) -> str:
    if result.has_field_errors:
        return "field_errors"
    if result.has_final_errors:
        return "final_errors"
    return "valid"


def rejection_reason(error: Any) -> str:
    from ..validation.outcome import FieldViolation

    if isinstance(error, FieldViolation):
        return error.reason.value
    return "validator"


def record_check_metrics(result, started_at: float) -> None:
    """Record latency and outcome counters for one check.

    Args:
        result: The :class:`~inputspec.validation.result.CheckResult` produced.
        started_at: Timestamp from ``time.perf_counter()`` taken before the check.
    """
    try:
        status = check_status(result)
        duration_ms = (time.perf_counter() - started_at) * 1000.0
        check_latency_ms.record(duration_ms, {"status": status})
        check_total.add(1, {"status": status})

        field_errors: Mapping[str, Any] = result.field_errors
        for error in field_errors.values():
            field_rejection_total.add(1, {"reason": rejection_reason(error)})

        if result.final_validated:
            final_validator_total.add(1, {"status": "rejected" if result.has_final_errors else "passed"})
    except Exception:
        # Telemetry must never interfere with validation results
        logger.debug("Failed to record check metrics", exc_info=True)


__all__ = [
    "check_total",
    "field_rejection_total",
    "final_validator_total",
    "check_latency_ms",
    "check_status",
    "rejection_reason",
    "record_check_metrics",
]
