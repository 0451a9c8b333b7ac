# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Guard clauses for function arguments and object state.

Each check returns ``None`` when its condition holds and otherwise raises one
error from :mod:`precheck.exceptions`. Checks keep no state, so they are safe
to call from any thread.

.. code-block:: python

    from precheck import requires

    def rename(self, name: str, aliases=None):
        requires.not_null_or_empty(name, "name")
        requires.length_less_or_equal(name, 64, "name")
        requires.null_or_no_null_elements(aliases, "aliases")
        requires.valid_state(not self.closed, "The document is closed.")
        requires.end_contract_block()
        ...
"""

from __future__ import annotations

from typing import Any, Iterable, NoReturn, Optional, Sized

from . import messages
from .exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    MalformedInputError,
    NullArgumentError,
    OutOfRangeError,
    UnsupportedError,
)
from .runtime import report_violation

# Sentinel returned by next() when an iterable is exhausted
_empty = object()


def _resolve(message: Optional[str], default: str) -> str:
    return default if message is None else message


# ---------------------------------------------------------------------------
# Nullness and emptiness
# ---------------------------------------------------------------------------


def not_null(value: Any, param_name: str, message: Optional[str] = None) -> None:
    """Validate that ``value`` is not ``None``.

    :raises NullArgumentError: if ``value`` is ``None``.
    """
    if value is None:
        raise report_violation(
            "not_null", NullArgumentError(_resolve(message, messages.NULL_VALUE), param_name)
        )


def not_null_or_empty(
    value: Optional[Iterable[Any]], param_name: str, message: Optional[str] = None
) -> None:
    """Validate that a string or iterable is neither ``None`` nor empty.

    ``None`` is always reported as :class:`NullArgumentError`, before any
    emptiness test. Strings are measured with ``len``. Any other iterable is
    iterated once and at most one element is pulled, so generators work but
    lose their first item.

    :raises NullArgumentError: if ``value`` is ``None``.
    :raises InvalidArgumentError: if ``value`` is empty.
    """
    not_null(value, param_name, message)
    if isinstance(value, str):
        empty = len(value) == 0
        default = messages.EMPTY_STRING
    else:
        empty = next(iter(value), _empty) is _empty
        default = messages.EMPTY_SEQUENCE
    if empty:
        raise report_violation(
            "not_null_or_empty",
            InvalidArgumentError(_resolve(message, default), param_name),
        )


def null_or_no_null_elements(sequence: Optional[Iterable[Any]], param_name: str) -> None:
    """Validate that ``sequence`` is either ``None`` or yields no ``None`` element.

    The scan is lazy and stops at the first ``None``.

    :raises InvalidArgumentError: if an element is ``None``.
    """
    if sequence is None:
        return
    if any(element is None for element in sequence):
        raise report_violation(
            "null_or_no_null_elements",
            InvalidArgumentError(messages.NULL_ELEMENT, param_name),
        )


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def length_less_or_equal(
    value: Optional[Sized], length: int, param_name: str, message: Optional[str] = None
) -> None:
    """Validate that ``len(value) <= length``."""
    not_null(value, param_name, message)
    if len(value) > length:
        _length_violation(
            "length_less_or_equal", param_name, message, messages.LENGTH_LESS_OR_EQUAL, length
        )


def length_less_than(
    value: Optional[Sized], length: int, param_name: str, message: Optional[str] = None
) -> None:
    """Validate that ``len(value) < length``."""
    not_null(value, param_name, message)
    if len(value) >= length:
        _length_violation(
            "length_less_than", param_name, message, messages.LENGTH_LESS_THAN, length
        )


def length_greater_or_equal(
    value: Optional[Sized], length: int, param_name: str, message: Optional[str] = None
) -> None:
    """Validate that ``len(value) >= length``."""
    not_null(value, param_name, message)
    if len(value) < length:
        _length_violation(
            "length_greater_or_equal",
            param_name,
            message,
            messages.LENGTH_GREATER_OR_EQUAL,
            length,
        )


def length_greater_than(
    value: Optional[Sized], length: int, param_name: str, message: Optional[str] = None
) -> None:
    """Validate that ``len(value) > length``."""
    not_null(value, param_name, message)
    if len(value) <= length:
        _length_violation(
            "length_greater_than", param_name, message, messages.LENGTH_GREATER_THAN, length
        )


def _length_violation(
    check: str, param_name: str, message: Optional[str], default: str, length: int
) -> NoReturn:
    if message is None:
        message = messages.format_message(default, length)
    raise report_violation(check, InvalidArgumentError(message, param_name))


# ---------------------------------------------------------------------------
# Boolean and range conditions
# ---------------------------------------------------------------------------


def in_range(condition: bool, param_name: str, message: Optional[str] = None) -> None:
    """Validate a pre-evaluated range test.

    :raises OutOfRangeError: if ``condition`` is false. No default message is
        synthesized.
    """
    if not condition:
        raise report_violation("in_range", OutOfRangeError(message, param_name))


def is_true(condition: bool, param_name: str, message: str) -> None:
    """Validate an argument condition, failing with exactly ``message``."""
    if not condition:
        raise report_violation("is_true", InvalidArgumentError(message, param_name))


def is_true_unnamed(condition: bool, message: str) -> None:
    """Like :func:`is_true` when no single parameter is to blame."""
    if not condition:
        raise report_violation("is_true_unnamed", InvalidArgumentError(message))


def is_true_formatted(
    condition: bool, param_name: str, unformatted_message: str, *args: Any
) -> None:
    """Like :func:`is_true` with a locale-formatted ``str.format`` template.

    ``args`` are only formatted when the check fails.
    """
    if not condition:
        raise report_violation(
            "is_true_formatted",
            InvalidArgumentError(
                messages.format_message(unformatted_message, *args), param_name
            ),
        )


# ---------------------------------------------------------------------------
# Object state
# ---------------------------------------------------------------------------


def valid_state(condition: bool, message: Optional[str] = None) -> None:
    """Validate that the object is in a state that permits the operation.

    Without ``message`` the raised error carries no message at all.
    """
    if not condition:
        raise report_violation("valid_state", InvalidStateError(message))


def valid_state_formatted(condition: bool, unformatted_message: str, *args: Any) -> None:
    """Like :func:`valid_state` with a locale-formatted ``str.format`` template.

    ``args`` are only formatted when the check fails.
    """
    if not condition:
        raise report_violation(
            "valid_state_formatted",
            InvalidStateError(messages.format_message(unformatted_message, *args)),
        )


# ---------------------------------------------------------------------------
# Type relationships
# ---------------------------------------------------------------------------


def not_null_subtype(required_type: type, type_: Optional[type], param_name: str) -> None:
    """Validate that ``type_`` is ``required_type`` or a subclass of it.

    Virtual subclasses registered on an ABC and classes accepted by a
    ``__subclasshook__`` count as subclasses. Anything that is not a class
    fails the check.

    :raises NullArgumentError: if ``type_`` is ``None``.
    :raises InvalidArgumentError: if ``type_`` is not assignable to
        ``required_type``.
    """
    not_null(type_, param_name)
    if isinstance(type_, type) and issubclass(type_, required_type):
        return
    message = messages.format_message(
        messages.SUBTYPE_EXPECTED,
        messages.qualified_name(required_type),
        messages.qualified_name(type_),
    )
    raise report_violation("not_null_subtype", InvalidArgumentError(message, param_name))


# ---------------------------------------------------------------------------
# Format, support and unconditional failure
# ---------------------------------------------------------------------------


def valid_format(condition: bool, message: str) -> None:
    """:raises MalformedInputError: if ``condition`` is false."""
    if not condition:
        raise report_violation("valid_format", MalformedInputError(message))


def supported(condition: bool, message: str) -> None:
    """:raises UnsupportedError: if ``condition`` is false."""
    if not condition:
        raise report_violation("supported", UnsupportedError(message))


def fail(param_name: str, message: str) -> NoReturn:
    """Raise :class:`InvalidArgumentError` unconditionally.

    Use at the top of a branch that earlier validation should have made
    unreachable.
    """
    raise report_violation("fail", InvalidArgumentError(message, param_name))


def end_contract_block() -> None:
    """Mark the end of a function's guard clauses.

    A no-op hint for external tooling.
    """


__all__ = [
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
