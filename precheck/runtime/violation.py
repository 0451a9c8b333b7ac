# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Bookkeeping for failed checks before the error is raised."""

from __future__ import annotations

import logging

from .. import telemetry
from ..exceptions import PrecheckError

logger = logging.getLogger(__name__)


def report_violation(check: str, error: PrecheckError) -> PrecheckError:
    """Log and count a failed check, then hand the error back for raising.

    The caller raises the returned error so the traceback ends at the check.
    """

    logger.debug(
        "Check '%s' failed (%s) for parameter %r: %s",
        check,
        error.kind,
        error.param_name,
        error.message,
    )
    telemetry.record_check_failure(check, error.kind)
    return error


__all__ = ["report_violation"]
