# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

Values are read on every call so tests and host applications can flip them
without re-importing the package.
"""

from __future__ import annotations

import os
from typing import Optional

STRICT_OUTCOMES_ENV = "INPUTSPEC_STRICT_OUTCOMES"
TELEMETRY_ENV = "INPUTSPEC_TELEMETRY"

_FALSY = ("", "0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY


def strict_outcomes_enabled(override: Optional[bool] = None) -> bool:
    """Return whether validators must use the explicit outcome contract.

    An explicit *override* (e.g. ``SpecificationSet(strict=False)``) wins over
    the environment.
    """

    if override is not None:
        return override
    return _env_flag(STRICT_OUTCOMES_ENV, True)


def telemetry_enabled() -> bool:
    """Return whether ``check`` records metrics and opens tracing spans."""

    return _env_flag(TELEMETRY_ENV, True)


__all__ = [
    "STRICT_OUTCOMES_ENV",
    "TELEMETRY_ENV",
    "strict_outcomes_enabled",
    "telemetry_enabled",
]
