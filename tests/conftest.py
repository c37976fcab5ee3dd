"""Shared fixtures for the inputspec test-suite.

The ``specs`` fixture reproduces the reference matrix of inputs:

    A:  not mandatory, may be null,     no validator
    B:  not mandatory, must not be null, no validator
    V1: not mandatory, must not be null, validator
    C:  mandatory,     may be null,     no validator
    D:  mandatory,     must not be null, no validator
    V2: mandatory,     must not be null, validator
"""
from __future__ import annotations

import re
from typing import Any, Dict, List

import pytest

from inputspec import VALID, FieldSpecification, Invalid, SpecificationSet
from inputspec.config import STRICT_OUTCOMES_ENV, TELEMETRY_ENV

_ABC = re.compile(r"^(A|B|C)$")


def abc_validator(value):
    if isinstance(value, str) and _ABC.match(value):
        return VALID
    return Invalid(f"The given value <{value}> is not valid.")


class CallCounter:
    """Final-validator stub that records every call and returns fixed errors."""

    def __init__(self, errors=()):
        self.errors: List[Any] = list(errors)
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, values):
        self.calls.append(values)
        return list(self.errors)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Tests start from the documented defaults regardless of the host env."""
    monkeypatch.delenv(STRICT_OUTCOMES_ENV, raising=False)
    monkeypatch.delenv(TELEMETRY_ENV, raising=False)
    yield


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def fields() -> Dict[str, FieldSpecification]:
    return {
        "A": FieldSpecification("A", mandatory=False, nullable=True),
        "B": FieldSpecification("B", mandatory=False, nullable=False),
        "C": FieldSpecification("C", mandatory=True, nullable=True),
        "D": FieldSpecification("D", mandatory=True, nullable=False),
        "V1": FieldSpecification("V1", mandatory=False, nullable=False, validator=abc_validator),
        "V2": FieldSpecification("V2", mandatory=True, nullable=False, validator=abc_validator),
    }


@pytest.fixture()
def specs(fields) -> SpecificationSet:
    return SpecificationSet(fields.values())


@pytest.fixture()
def minimal_values() -> Dict[str, Any]:
    """Smallest mapping that satisfies every mandatory input of ``specs``."""
    return {"C": None, "D": 10, "V2": "A"}


@pytest.fixture()
def final_stub():
    """Factory for call-counting final validators: ``final_stub(["err"])``."""
    return CallCounter
