# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Ordered set of input specifications with an optional final validator.

Checking is two-phase:

1. Every registered input is checked in isolation, in registration order.
2. Only if phase 1 found nothing, the final (cross-field) validator runs over
   the whole mapping of values, exactly as the caller supplied it.

``check`` returns an immutable :class:`~inputspec.validation.result.CheckResult`
and keeps no per-check state, so a configured set can be shared freely.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..config import strict_outcomes_enabled, telemetry_enabled
from ..exceptions import ConfigurationError, FieldNotFoundError
from ..telemetry.metrics import record_check_metrics
from ..telemetry.runtime import get_tracer
from .field import FieldSpecification
from .outcome import FieldViolation, Invalid, final_errors_from_legacy, require_final_errors
from .result import CheckResult

logger = logging.getLogger(__name__)

FinalValidator = Callable[[Mapping[str, Any]], Sequence[Any]]


class SpecificationSet:
    """A named collection of :class:`FieldSpecification` objects.

    Example:
        ```python
        specs = (
            SpecificationSet()
            .add_field(FieldSpecification("path", nullable=False, validator=path_exists))
            .add_field(FieldSpecification("force", mandatory=False))
        )
        specs.set_final_validator(lambda values: [])
        result = specs.check({"path": "/bin/ls"})
        assert result.valid
        ```

    Args:
        fields: Specifications to register, in order.
        final_validator: Optional cross-field validator. It receives the values
            mapping and returns a sequence of error identifiers, empty when the
            combination is valid.
        strict: Enforce the explicit outcome contract for validators. ``None``
            reads ``INPUTSPEC_STRICT_OUTCOMES`` on each check.
    """

    def __init__(
        self,
        fields: Iterable[FieldSpecification] = (),
        *,
        final_validator: Optional[FinalValidator] = None,
        strict: Optional[bool] = None,
    ):
        self._fields: Dict[str, FieldSpecification] = {}
        self._final_validator: Optional[FinalValidator] = None
        self.strict = strict

        for spec in fields:
            self.add_field(spec)
        if final_validator is not None:
            self.set_final_validator(final_validator)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_field(self, spec: FieldSpecification) -> "SpecificationSet":
        """Register *spec* under its name and return the set for chaining.

        Registering a name twice replaces the earlier specification in place.
        """
        if not isinstance(spec, FieldSpecification):
            raise ConfigurationError(
                f"Expected a FieldSpecification, got {type(spec).__name__}",
            )
        if spec.name in self._fields:
            logger.debug("Replacing specification for input '%s'", spec.name)
        self._fields[spec.name] = spec
        return self

    def remove_field(self, name: str) -> FieldSpecification:
        try:
            return self._fields.pop(name)
        except KeyError:
            raise FieldNotFoundError(name) from None

    def get_field(self, name: str) -> FieldSpecification:
        """Return the specification registered under *name*.

        Raises:
            FieldNotFoundError: If *name* was never registered.
        """
        try:
            return self._fields[name]
        except KeyError:
            raise FieldNotFoundError(name) from None

    __getitem__ = get_field

    def names(self) -> List[str]:
        return list(self._fields)

    @property
    def final_validator(self) -> Optional[FinalValidator]:
        return self._final_validator

    def set_final_validator(self, validator: Optional[FinalValidator]) -> "SpecificationSet":
        """Attach the cross-field validator, replacing any previous one.

        Passing ``None`` removes it.
        """
        if validator is not None and not callable(validator):
            raise ConfigurationError(
                f"Final validator must be callable, got {type(validator).__name__}",
            )
        self._final_validator = validator
        return self

    # ------------------------------------------------------------------
    # Checking
    # ------------------------------------------------------------------

    def check(self, values: Mapping[str, Any]) -> CheckResult:
        """Check *values* against every registered specification.

        Presence is decided by key membership: ``{"x": None}`` supplies ``x``
        with the null value, ``{}`` does not supply it at all.

        Returns:
            A fresh :class:`CheckResult`. Errors raised by validators propagate
            unchanged.
        """
        if not isinstance(values, Mapping):
            raise TypeError(f"values must be a mapping, got {type(values).__name__}")

        if not telemetry_enabled():
            return self._check(values)

        started_at = time.perf_counter()
        with get_tracer().start_as_current_span(
            "inputspec.check",
            attributes={"inputspec.field_count": len(self._fields)},
        ) as span:
            result = self._check(values)
            span.set_attribute("inputspec.valid", result.valid)
        record_check_metrics(result, started_at)
        return result

    def _check(self, values: Mapping[str, Any]) -> CheckResult:
        strict = strict_outcomes_enabled(self.strict)
        field_errors: Dict[str, Any] = {}

        for name, spec in self._fields.items():
            if name not in values:
                if spec.mandatory:
                    field_errors[name] = FieldViolation.missing(name)
                continue

            outcome = spec.check_value(values[name], strict=strict)
            if isinstance(outcome, Invalid):
                field_errors[name] = outcome.error

        if field_errors:
            logger.debug("Inputs rejected in isolation: %s", ", ".join(field_errors))
            return CheckResult.from_field_errors(field_errors)

        if self._final_validator is None:
            return CheckResult.success()

        returned = self._final_validator(values)
        if strict:
            final_errors = require_final_errors(returned, "Final validator")
        else:
            final_errors = final_errors_from_legacy(returned)

        if final_errors:
            logger.debug("Final validation reported %d error(s)", len(final_errors))
            return CheckResult.from_final_errors(final_errors)
        return CheckResult.success(final_validated=True)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def summary(self) -> Dict[str, str]:
        """Return ``{name: description}`` for every input, in registration order."""
        return {name: spec.describe() for name, spec in self._fields.items()}

    def __iter__(self) -> Iterator[Tuple[str, FieldSpecification]]:
        yield from self._fields.items()

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __repr__(self) -> str:
        return f"SpecificationSet(fields={self.names()!r}, final_validator={self._final_validator is not None})"


__all__ = ["SpecificationSet", "FinalValidator"]
