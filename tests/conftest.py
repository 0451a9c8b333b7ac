# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Shared fixtures for the precheck test-suite.

Failure metrics are observed through a real OpenTelemetry SDK
``MeterProvider`` backed by an ``InMemoryMetricReader``. The provider is
never installed globally; instead its counter is swapped in for the
module-level instrument so each test gets an isolated view.
"""
from __future__ import annotations

import locale
from typing import Dict, Tuple

import pytest
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import InMemoryMetricReader

import precheck.telemetry.metrics as precheck_metrics


class FailureMetrics:
    """Reads back ``precheck.check.failure.total`` as ``{(check, kind): count}``."""

    def __init__(self, reader: InMemoryMetricReader):
        self._reader = reader

    def counts(self) -> Dict[Tuple[str, str], int]:
        data = self._reader.get_metrics_data()
        result: Dict[Tuple[str, str], int] = {}
        if data is None:
            return result
        for resource_metrics in data.resource_metrics:
            for scope_metrics in resource_metrics.scope_metrics:
                for metric in scope_metrics.metrics:
                    if metric.name != "precheck.check.failure.total":
                        continue
                    for point in metric.data.data_points:
                        key = (point.attributes["check"], point.attributes["kind"])
                        result[key] = result.get(key, 0) + point.value
        return result

    def total(self) -> int:
        return sum(self.counts().values())


@pytest.fixture(autouse=True)
def _metrics_enabled_by_default(monkeypatch):
    """Tests start from the documented default, whatever the runner's env says."""
    monkeypatch.delenv("PRECHECK_METRICS", raising=False)


@pytest.fixture
def failure_metrics(monkeypatch) -> FailureMetrics:
    reader = InMemoryMetricReader()
    provider = MeterProvider(metric_readers=[reader])
    counter = provider.get_meter("precheck-tests").create_counter(
        name="precheck.check.failure.total",
        unit="1",
    )
    monkeypatch.setattr(precheck_metrics, "check_failure_total", counter)
    yield FailureMetrics(reader)
    provider.shutdown()


@pytest.fixture
def numeric_locale():
    """Switch LC_NUMERIC and LC_TIME to ``en_US.UTF-8`` for one test.

    Skips when the locale is not installed on the runner.
    """
    saved = {
        category: locale.setlocale(category)
        for category in (locale.LC_NUMERIC, locale.LC_TIME)
    }
    try:
        for category in saved:
            locale.setlocale(category, "en_US.UTF-8")
    except locale.Error:
        for category, value in saved.items():
            locale.setlocale(category, value)
        pytest.skip("en_US.UTF-8 locale is not available")
    yield
    for category, value in saved.items():
        locale.setlocale(category, value)
