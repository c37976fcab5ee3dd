# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Outcome types shared by field and final validators.

A field validator reports either ``VALID`` or ``Invalid(error)``. The error
identifier is opaque: the library stores and forwards it, nothing more.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Sequence, Tuple, TypeVar, Union

from ..exceptions import InvalidOutcomeError

E = TypeVar("E")


class Valid:
    """Marker for a successful validation. Use the ``VALID`` singleton."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "VALID"

    def __reduce__(self):
        return (Valid, ())


VALID = Valid()


@dataclass(frozen=True)
class Invalid(Generic[E]):
    """A rejected value, carrying the caller-chosen error identifier."""

    error: E


Outcome = Union[Valid, Invalid[E]]


class ViolationReason(str, Enum):
    MISSING = "missing"
    NULL_NOT_ALLOWED = "null_not_allowed"


@dataclass(frozen=True)
class FieldViolation:
    """Error identifier produced by the library itself (not by a validator)."""

    field: str
    reason: ViolationReason
    message: str

    def __str__(self) -> str:
        return self.message

    @classmethod
    def missing(cls, field: str) -> "FieldViolation":
        return cls(
            field=field,
            reason=ViolationReason.MISSING,
            message=f'The input which name is "{field}" is mandatory!',
        )

    @classmethod
    def null_not_allowed(cls, field: str) -> "FieldViolation":
        return cls(
            field=field,
            reason=ViolationReason.NULL_NOT_ALLOWED,
            message=f"Input \"{field}\": the input's value cannot be null.",
        )


def is_outcome(value: Any) -> bool:
    return isinstance(value, (Valid, Invalid))


def outcome_from_legacy(value: Any) -> Outcome:
    """Translate the loose ``True``-or-error convention into an ``Outcome``.

    ``True`` (the literal, not a truthy value) means valid; anything else is
    the error identifier. Values that already are outcomes pass through.
    """

    if is_outcome(value):
        return value
    if value is True:
        return VALID
    return Invalid(value)


def final_errors_from_legacy(value: Any) -> Tuple[Any, ...]:
    """Translate a legacy final-validator return (``True`` or a list)."""

    if value is True:
        return ()
    return require_final_errors(value, "final validator")


def require_outcome(value: Any, source: str) -> Outcome:
    if not is_outcome(value):
        raise InvalidOutcomeError(source, value, "VALID or Invalid(error)")
    return value


def require_final_errors(value: Any, source: str) -> Tuple[Any, ...]:
    """Return the final validator's errors as a tuple; ``()`` means success."""

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return tuple(value)
    raise InvalidOutcomeError(source, value, "a sequence of error identifiers (empty when valid)")


__all__ = [
    "E",
    "Valid",
    "VALID",
    "Invalid",
    "Outcome",
    "ViolationReason",
    "FieldViolation",
    "is_outcome",
    "outcome_from_legacy",
    "final_errors_from_legacy",
    "require_outcome",
    "require_final_errors",
]
