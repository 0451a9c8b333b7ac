# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter shared by the precheck instruments.

Until the host application installs a meter provider the API hands out a
proxy meter whose instruments are no-ops.
"""

from __future__ import annotations

import os

from opentelemetry import metrics

meter = metrics.get_meter("precheck")


def metrics_enabled() -> bool:
    """Return ``False`` when ``PRECHECK_METRICS`` is set to a falsy value."""

    return os.getenv("PRECHECK_METRICS", "1") not in ("", "0", "false", "no")


__all__ = ["meter", "metrics_enabled"]
