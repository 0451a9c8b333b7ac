# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for precheck."""

from __future__ import annotations

from .runtime import meter, metrics_enabled

check_failure_total = meter.create_counter(
    name="precheck.check.failure.total",
    description="Counts guard clauses that failed and raised, tagged by check and error kind.",
    unit="1",
)


def record_check_failure(check: str, kind: str) -> None:
    """Increment the failure counter unless metrics are disabled."""

    if not metrics_enabled():
        return
    check_failure_total.add(1, {"check": check, "kind": kind})


__all__ = [
    "check_failure_total",
    "record_check_failure",
]
