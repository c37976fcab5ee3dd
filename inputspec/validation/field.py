# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Single input specification.

A :class:`FieldSpecification` is frozen. Its name is the lookup key inside a
:class:`~inputspec.validation.specset.SpecificationSet`, so changing any
constraint produces a new instance that has to be registered again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from ..config import strict_outcomes_enabled
from ..exceptions import ConfigurationError
from .outcome import VALID, FieldViolation, Invalid, Outcome, outcome_from_legacy, require_outcome

logger = logging.getLogger(__name__)

FieldValidator = Callable[[Any], Outcome]


@dataclass(frozen=True)
class FieldSpecification:
    """Constraints for one named input.

    Example:
        ```python
        path = FieldSpecification("Path", nullable=False, validator=file_exists)
        token = FieldSpecification("Token", mandatory=False)
        ```
    """

    name: str
    mandatory: bool = True
    nullable: bool = True
    validator: Optional[FieldValidator] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError(
                f"Input name must be a non-empty string, got {self.name!r}",
                details={"name": self.name},
            )
        for flag in ("mandatory", "nullable"):
            value = getattr(self, flag)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"Flag '{flag}' of input '{self.name}' must be a bool, got {value!r}",
                    details={"name": self.name, "flag": flag},
                )
        if self.validator is not None and not callable(self.validator):
            raise ConfigurationError(
                f"Validator for input '{self.name}' must be callable, got {type(self.validator).__name__}",
                details={"name": self.name},
            )

    # ------------------------------------------------------------------
    # Derivations
    # ------------------------------------------------------------------

    def as_mandatory(self, mandatory: bool = True) -> "FieldSpecification":
        return replace(self, mandatory=mandatory)

    def as_optional(self) -> "FieldSpecification":
        return replace(self, mandatory=False)

    def as_nullable(self, nullable: bool = True) -> "FieldSpecification":
        return replace(self, nullable=nullable)

    def as_not_nullable(self) -> "FieldSpecification":
        return replace(self, nullable=False)

    def with_validator(self, validator: Optional[FieldValidator]) -> "FieldSpecification":
        return replace(self, validator=validator)

    @property
    def has_validator(self) -> bool:
        return self.validator is not None

    # ------------------------------------------------------------------
    # Checking
    # ------------------------------------------------------------------

    def check_value(self, value: Any, *, strict: Optional[bool] = None) -> Outcome:
        """Check a value that is present in the input mapping.

        Presence and the mandatory flag are handled by the specification set;
        an explicit ``None`` is still a present value.

        Args:
            value: The supplied value (``None`` is the null marker).
            strict: Override for the outcome contract. ``None`` reads
                ``INPUTSPEC_STRICT_OUTCOMES``.

        Returns:
            ``VALID`` or ``Invalid(error)``. Errors returned by the validator are
            forwarded unchanged.

        Raises:
            InvalidOutcomeError: In strict mode, when the validator returns
                neither ``VALID`` nor ``Invalid``.
        """
        if value is None and not self.nullable:
            return Invalid(FieldViolation.null_not_allowed(self.name))

        if self.validator is None:
            return VALID

        returned = self.validator(value)
        if strict_outcomes_enabled(strict):
            outcome = require_outcome(returned, f"Validator for input '{self.name}'")
        else:
            outcome = outcome_from_legacy(returned)

        if isinstance(outcome, Invalid):
            logger.debug("Validator rejected input '%s': %r", self.name, outcome.error)
        return outcome

    def describe(self) -> str:
        """Return a one-line summary of the constraints."""
        constraints = [
            "Can be null." if self.nullable else "Can not be null.",
            "Is mandatory." if self.mandatory else "Is not mandatory.",
            "Has a validator." if self.has_validator else "Does not have a validator.",
        ]
        return " ".join(constraints)


__all__ = ["FieldSpecification", "FieldValidator"]
