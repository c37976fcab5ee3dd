# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for inputspec.

Only programmer errors are raised. Bad input data is never raised: it is
collected into a :class:`~inputspec.validation.result.CheckResult`.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class InputSpecError(Exception):
    """Base class for every error raised by inputspec."""

    default_message = "inputspec error"

    def __init__(self, message: Optional[str] = None, *, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(InputSpecError):
    """A specification or validator was declared incorrectly."""

    default_message = "Invalid input specification"


class FieldNotFoundError(InputSpecError, LookupError):
    """Raised when a field name was never registered in a specification set."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(
            f'The input which name is "{field_name}" is not specified!',
            details={"field": field_name},
        )


class InvalidOutcomeError(InputSpecError, TypeError):
    """A validator returned something outside its declared contract."""

    def __init__(self, source: str, returned: Any, expected: str):
        self.source = source
        self.returned = returned
        super().__init__(
            f"{source} returned {returned!r}; expected {expected}",
            details={"source": source, "expected": expected},
        )


class InputRejectedError(InputSpecError):
    """Raised by :func:`inputspec.runtime.ensure_valid` when a check fails."""

    default_message = "Input validation failed"

    def __init__(self, result: Any, reason: Optional[str] = None):
        self.result = result
        super().__init__(reason)


__all__ = [
    "InputSpecError",
    "ConfigurationError",
    "FieldNotFoundError",
    "InvalidOutcomeError",
    "InputRejectedError",
]
