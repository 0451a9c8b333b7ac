# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""precheck - guard clauses that fail fast with precisely typed errors.

Typical use keeps the module namespace at the call site::

    from precheck import requires

    requires.not_null(value, "value")

Every check is also importable directly from ``precheck``.
"""

import logging

from . import requires
from .exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    MalformedInputError,
    NullArgumentError,
    OutOfRangeError,
    PrecheckError,
    UnsupportedError,
)
from .requires import (
    end_contract_block,
    fail,
    in_range,
    is_true,
    is_true_formatted,
    is_true_unnamed,
    length_greater_or_equal,
    length_greater_than,
    length_less_or_equal,
    length_less_than,
    not_null,
    not_null_or_empty,
    not_null_subtype,
    null_or_no_null_elements,
    supported,
    valid_format,
    valid_state,
    valid_state_formatted,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "requires",
    # Exceptions
    "PrecheckError",
    "InvalidArgumentError",
    "NullArgumentError",
    "OutOfRangeError",
    "InvalidStateError",
    "MalformedInputError",
    "UnsupportedError",
    # Checks
    "not_null",
    "not_null_or_empty",
    "null_or_no_null_elements",
    "length_less_or_equal",
    "length_less_than",
    "length_greater_or_equal",
    "length_greater_than",
    "in_range",
    "is_true",
    "is_true_unnamed",
    "is_true_formatted",
    "valid_state",
    "valid_state_formatted",
    "not_null_subtype",
    "valid_format",
    "supported",
    "fail",
    "end_contract_block",
]
