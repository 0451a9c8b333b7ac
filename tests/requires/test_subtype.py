# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for not_null_subtype - runtime type relationship checks."""
from __future__ import annotations

import abc
import collections.abc

import pytest

from precheck import requires
from precheck.exceptions import InvalidArgumentError, NullArgumentError


class Base:
    pass


class Derived(Base):
    pass


class Unrelated:
    pass


class Plugin(abc.ABC):
    @abc.abstractmethod
    def run(self):
        ...


class RegisteredPlugin:
    def run(self):
        return None


Plugin.register(RegisteredPlugin)


def _full_name(cls):
    return f"{cls.__module__}.{cls.__qualname__}"


def test_same_type_passes():
    requires.not_null_subtype(Base, Base, "handler")


def test_derived_type_passes():
    requires.not_null_subtype(Base, Derived, "handler")


def test_virtual_subclass_passes():
    requires.not_null_subtype(Plugin, RegisteredPlugin, "plugin")


def test_subclasshook_implementor_passes():
    requires.not_null_subtype(collections.abc.Sized, list, "container")


def test_none_type_raises_null_argument():
    with pytest.raises(NullArgumentError) as excinfo:
        requires.not_null_subtype(Base, None, "handler")

    assert excinfo.value.param_name == "handler"


def test_unrelated_type_names_both_types():
    with pytest.raises(InvalidArgumentError) as excinfo:
        requires.not_null_subtype(Base, Unrelated, "handler")

    assert type(excinfo.value) is InvalidArgumentError
    assert excinfo.value.param_name == "handler"
    assert excinfo.value.message == (
        f"The type {_full_name(Base)} or a derived type was expected, "
        f"but {_full_name(Unrelated)} was given."
    )


def test_base_type_is_not_a_subtype_of_derived():
    with pytest.raises(InvalidArgumentError):
        requires.not_null_subtype(Derived, Base, "handler")


def test_builtin_names_omit_the_builtins_module():
    with pytest.raises(InvalidArgumentError) as excinfo:
        requires.not_null_subtype(str, int, "kind")

    assert excinfo.value.message == "The type str or a derived type was expected, but int was given."


def test_instance_instead_of_class_is_rejected():
    instance = Derived()

    with pytest.raises(InvalidArgumentError) as excinfo:
        requires.not_null_subtype(Base, instance, "handler")

    assert repr(instance) in excinfo.value.message
