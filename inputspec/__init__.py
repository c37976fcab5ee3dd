# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""inputspec - declarative checks for named inputs.

Describe each expected input with a :class:`FieldSpecification`, gather them
in a :class:`SpecificationSet`, optionally attach a final validator, then call
``check(values)``.
"""

from .exceptions import (
    ConfigurationError,
    FieldNotFoundError,
    InputRejectedError,
    InputSpecError,
    InvalidOutcomeError,
)
from .runtime import ensure_valid, format_check_failure
from .validation import (
    VALID,
    CheckResult,
    FieldSpecification,
    FieldViolation,
    Invalid,
    Outcome,
    SpecificationSet,
    Valid,
    ViolationReason,
    final_errors_from_legacy,
    outcome_from_legacy,
)

__version__ = "1.0.0"

__all__ = [
    "FieldSpecification",
    "SpecificationSet",
    "CheckResult",
    "VALID",
    "Valid",
    "Invalid",
    "Outcome",
    "FieldViolation",
    "ViolationReason",
    "outcome_from_legacy",
    "final_errors_from_legacy",
    "ensure_valid",
    "format_check_failure",
    "InputSpecError",
    "ConfigurationError",
    "FieldNotFoundError",
    "InvalidOutcomeError",
    "InputRejectedError",
]
