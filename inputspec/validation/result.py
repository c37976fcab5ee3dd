# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Immutable result of a specification-set check."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, Iterable, Mapping, Optional, Tuple

from .outcome import E

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class CheckResult(Generic[E]):
    """Outcome of :meth:`SpecificationSet.check`.

    ``field_errors`` maps input names to their error identifier, in
    registration order. ``final_errors`` holds whatever the final validator
    reported. Field errors always mean the final validator did not run, so
    ``final_errors`` is empty in that case.
    """

    field_errors: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    final_errors: Tuple[Any, ...] = ()
    final_validated: bool = False

    def __post_init__(self):
        if not isinstance(self.field_errors, MappingProxyType):
            object.__setattr__(self, "field_errors", MappingProxyType(dict(self.field_errors)))
        if not isinstance(self.final_errors, tuple):
            object.__setattr__(self, "final_errors", tuple(self.final_errors))
        if self.field_errors and (self.final_errors or self.final_validated):
            raise ValueError("final validation cannot run when some inputs are invalid")

    @classmethod
    def success(cls, *, final_validated: bool = False) -> "CheckResult":
        return cls(final_validated=final_validated)

    @classmethod
    def from_field_errors(cls, errors: Mapping[str, Any]) -> "CheckResult":
        return cls(field_errors=errors)

    @classmethod
    def from_final_errors(cls, errors: Iterable[Any]) -> "CheckResult":
        return cls(final_errors=tuple(errors), final_validated=True)

    @property
    def valid(self) -> bool:
        return not self.field_errors and not self.final_errors

    @property
    def has_field_errors(self) -> bool:
        return bool(self.field_errors)

    @property
    def has_final_errors(self) -> bool:
        return bool(self.final_errors)

    def field_error(self, name: str, default: Optional[Any] = None) -> Any:
        return self.field_errors.get(name, default)

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "field_errors": dict(self.field_errors),
            "final_errors": list(self.final_errors),
        }


__all__ = ["CheckResult"]
