# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Helpers for turning check results into text or exceptions."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..exceptions import InputRejectedError
from ..validation import CheckResult, SpecificationSet

logger = logging.getLogger(__name__)


def format_check_failure(result: CheckResult, subject: Optional[str] = None) -> str:
    """Produce a human-readable reason for a failed check.

    A valid result has nothing to report and yields an empty string.
    """

    if result.valid:
        return ""

    header = "Input validation failed"
    if subject:
        header += f" for '{subject}'"
    lines = [header + ":"]

    if result.has_field_errors:
        lines.append("Some inputs' values are not valid:")
        for name, error in result.field_errors.items():
            lines.append(f" - {name}: {error}")
    elif result.has_final_errors:
        lines.append("All inputs' values are individually valid, but the final validation failed:")
        for error in result.final_errors:
            lines.append(f" - {error}")
    return "\n".join(lines)


def ensure_valid(
    specifications: SpecificationSet,
    values: Mapping[str, Any],
    *,
    subject: Optional[str] = None,
) -> CheckResult:
    """Check *values* and raise :class:`InputRejectedError` when they are invalid."""

    result = specifications.check(values)
    if result.valid:
        return result

    reason = format_check_failure(result, subject)
    logger.info("%s", reason)
    raise InputRejectedError(result, reason)


__all__ = ["ensure_valid", "format_check_failure"]
