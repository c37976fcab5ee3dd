"""Validation package - input specifications and the two-phase check.

Inputs are first checked in isolation; the final (cross-field) validator only
runs once every input is individually valid. Nothing is transformed here.
"""

from .field import FieldSpecification, FieldValidator
from .outcome import (
    VALID,
    FieldViolation,
    Invalid,
    Outcome,
    Valid,
    ViolationReason,
    final_errors_from_legacy,
    outcome_from_legacy,
)
from .result import CheckResult
from .specset import FinalValidator, SpecificationSet

__all__ = [
    "FieldSpecification",
    "FieldValidator",
    "SpecificationSet",
    "FinalValidator",
    "CheckResult",
    "VALID",
    "Valid",
    "Invalid",
    "Outcome",
    "FieldViolation",
    "ViolationReason",
    "outcome_from_legacy",
    "final_errors_from_legacy",
]
