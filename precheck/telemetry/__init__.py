# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Telemetry package - OpenTelemetry instruments for failed checks."""

from .runtime import meter, metrics_enabled
from .metrics import check_failure_total, record_check_failure

__all__ = [
    "meter",
    "metrics_enabled",
    "check_failure_total",
    "record_check_failure",
]
