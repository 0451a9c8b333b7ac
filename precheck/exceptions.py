# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Error taxonomy raised by the guard clauses in :mod:`precheck.requires`.

Every error carries the resolved ``message`` (or ``None``) and, for
parameter-scoped checks, the ``param_name`` that was blamed. ``kind`` is a
stable string usable as a metric label or in structured logs.

The argument errors form a small hierarchy so callers can catch either the
broad kind or the specific one::

    PrecheckError
    ├── InvalidArgumentError (ValueError)
    │   ├── NullArgumentError
    │   └── OutOfRangeError
    ├── InvalidStateError (RuntimeError)
    ├── MalformedInputError (ValueError)
    └── UnsupportedError (NotImplementedError)
"""

from __future__ import annotations

from typing import Optional


class PrecheckError(Exception):
    """Base class for every error raised by a failed check."""

    kind = "precheck"

    def __init__(self, message: Optional[str] = None, param_name: Optional[str] = None):
        self.message = message
        self.param_name = param_name
        if message is None:
            super().__init__()
        else:
            super().__init__(message)

    def __str__(self) -> str:
        text = self.message or ""
        if self.param_name:
            suffix = f"(Parameter '{self.param_name}')"
            return f"{text} {suffix}" if text else suffix
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, param_name={self.param_name!r})"


class InvalidArgumentError(PrecheckError, ValueError):
    """An argument violates a stated condition."""

    kind = "invalid_argument"


class NullArgumentError(InvalidArgumentError):
    """A required argument is ``None``."""

    kind = "null_argument"


class OutOfRangeError(InvalidArgumentError):
    """An argument lies outside its acceptable range."""

    kind = "out_of_range"


class InvalidStateError(PrecheckError, RuntimeError):
    """The object's state does not permit the requested operation.

    State errors are never parameter-scoped.
    """

    kind = "invalid_state"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message)


class MalformedInputError(PrecheckError, ValueError):
    """Structured input does not conform to its expected format."""

    kind = "malformed_input"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message)


class UnsupportedError(PrecheckError, NotImplementedError):
    """The operation is not supported in the current configuration."""

    kind = "unsupported"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message)


__all__ = [
    "PrecheckError",
    "InvalidArgumentError",
    "NullArgumentError",
    "OutOfRangeError",
    "InvalidStateError",
    "MalformedInputError",
    "UnsupportedError",
]
