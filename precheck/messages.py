# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Default messages and locale-aware template formatting.

Templates use ``str.format`` positional placeholders (``"{0}"``). Values
without an explicit format spec are rendered per the *current* process
locale: floats use its decimal point and dates/times its preferred
representation. Integers are rendered ungrouped, as ``str`` does. The
library never calls :func:`locale.setlocale` itself.
"""

from __future__ import annotations

import enum
import locale
import string
from datetime import date, datetime, time
from typing import Any


NULL_VALUE = "Null value is not allowed."
EMPTY_STRING = "The empty string is not allowed."
EMPTY_SEQUENCE = "The argument has an unexpected value."
NULL_ELEMENT = "The list contains a null element."

LENGTH_LESS_OR_EQUAL = "The string length should be less than or equal to {0}"
LENGTH_LESS_THAN = "The string length should be less than {0}"
LENGTH_GREATER_OR_EQUAL = "The string length should be greater than or equal to {0}"
LENGTH_GREATER_THAN = "The string length should be greater than {0}"

SUBTYPE_EXPECTED = "The type {0} or a derived type was expected, but {1} was given."


class LocaleFormatter(string.Formatter):
    """``string.Formatter`` that renders bare floats and dates per locale."""

    def format_field(self, value: Any, format_spec: str) -> str:
        if not format_spec:
            if isinstance(value, float) and not isinstance(value, enum.Enum):
                # shortest round-trip digits, never the %.12g of locale.str
                return repr(value).replace(".", locale.localeconv()["decimal_point"])
            # datetime is a date subclass, so it goes first
            if isinstance(value, datetime):
                return value.strftime("%x %X")
            if isinstance(value, date):
                return value.strftime("%x")
            if isinstance(value, time):
                return value.strftime("%X")
        return super().format_field(value, format_spec)


_FORMATTER = LocaleFormatter()


def format_message(unformatted_message: str, *args: Any) -> str:
    """Substitute ``args`` into ``unformatted_message`` using the current locale."""

    return _FORMATTER.format(unformatted_message, *args)


def qualified_name(type_: Any) -> str:
    """Return ``module.QualName`` for a class, or ``repr`` for anything else."""

    if not isinstance(type_, type):
        return repr(type_)
    module = getattr(type_, "__module__", None)
    if not module or module == "builtins":
        return type_.__qualname__
    return f"{module}.{type_.__qualname__}"


__all__ = [
    "LocaleFormatter",
    "format_message",
    "qualified_name",
]
