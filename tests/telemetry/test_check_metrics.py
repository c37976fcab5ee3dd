# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric and span emission around SpecificationSet.check."""

from __future__ import annotations

import time

import pytest

from inputspec import CheckResult, FieldSpecification, Invalid, SpecificationSet
from inputspec.telemetry import metrics as metrics_mod
from inputspec.validation import specset as specset_mod


class _Recorder:
    def __init__(self):
        self.calls = []

    def add(self, amount, attributes=None):
        self.calls.append((amount, dict(attributes or {})))

    def record(self, amount, attributes=None):
        self.calls.append((amount, dict(attributes or {})))


class _Span:
    def __init__(self, name, attributes):
        self.name = name
        self.attributes = dict(attributes or {})

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def set_attribute(self, key, value):
        self.attributes[key] = value


class _Tracer:
    def __init__(self):
        self.spans = []

    def start_as_current_span(self, name, attributes=None):
        span = _Span(name, attributes)
        self.spans.append(span)
        return span


@pytest.fixture()
def recorders(monkeypatch):
    names = ["check_total", "field_rejection_total", "final_validator_total", "check_latency_ms"]
    patched = {}
    for name in names:
        patched[name] = _Recorder()
        monkeypatch.setattr(metrics_mod, name, patched[name])
    return patched


@pytest.fixture()
def tracer(monkeypatch):
    fake = _Tracer()
    monkeypatch.setattr(specset_mod, "get_tracer", lambda name=None: fake)
    return fake


def test_valid_check_records_status(recorders, tracer, specs, minimal_values):
    specs.check(minimal_values)

    assert recorders["check_total"].calls == [(1, {"status": "valid"})]
    assert recorders["field_rejection_total"].calls == []
    assert recorders["final_validator_total"].calls == []
    [(latency, attrs)] = recorders["check_latency_ms"].calls
    assert latency >= 0
    assert attrs == {"status": "valid"}


def test_field_rejections_are_partitioned_by_reason(recorders, tracer):
    specs = SpecificationSet(
        [
            FieldSpecification("missing"),
            FieldSpecification("null", nullable=False),
            FieldSpecification("custom", validator=lambda v: Invalid("nope")),
        ]
    )
    specs.check({"null": None, "custom": 1})

    assert recorders["check_total"].calls == [(1, {"status": "field_errors"})]
    reasons = [attrs["reason"] for _, attrs in recorders["field_rejection_total"].calls]
    assert reasons == ["missing", "null_not_allowed", "validator"]


def test_final_validator_status(recorders, tracer, specs, minimal_values, final_stub):
    specs.set_final_validator(final_stub(["bad"]))
    specs.check(minimal_values)
    specs.set_final_validator(final_stub())
    specs.check(minimal_values)

    statuses = [attrs["status"] for _, attrs in recorders["final_validator_total"].calls]
    assert statuses == ["rejected", "passed"]
    assert [attrs["status"] for _, attrs in recorders["check_total"].calls] == ["final_errors", "valid"]


def test_check_opens_a_span(recorders, tracer, specs):
    specs.check({})

    [span] = tracer.spans
    assert span.name == "inputspec.check"
    assert span.attributes["inputspec.field_count"] == 6
    assert span.attributes["inputspec.valid"] is False


def test_telemetry_can_be_disabled(monkeypatch, recorders, tracer, specs, minimal_values):
    monkeypatch.setenv("INPUTSPEC_TELEMETRY", "off")

    assert specs.check(minimal_values).valid
    assert tracer.spans == []
    assert recorders["check_total"].calls == []


def test_metric_failures_do_not_change_results(monkeypatch, tracer, specs, minimal_values):
    class _Broken:
        def add(self, *_a, **_kw):
            raise RuntimeError("exporter down")

        def record(self, *_a, **_kw):
            raise RuntimeError("exporter down")

    monkeypatch.setattr(metrics_mod, "check_latency_ms", _Broken())
    monkeypatch.setattr(metrics_mod, "check_total", _Broken())

    assert specs.check(minimal_values).valid


def test_real_instruments_accept_records():
    """The OpenTelemetry API instruments are no-ops without an SDK provider."""
    metrics_mod.record_check_metrics(CheckResult.from_final_errors(["x"]), time.perf_counter())


@pytest.mark.parametrize(
    "result,status",
    [
        (CheckResult.success(), "valid"),
        (CheckResult.from_field_errors({"a": "bad"}), "field_errors"),
        (CheckResult.from_final_errors(["x"]), "final_errors"),
    ],
)
def test_check_status(result, status):
    assert metrics_mod.check_status(result) == status
