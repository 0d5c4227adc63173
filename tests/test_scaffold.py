"""Smoke tests — verify package wiring.

These tests prove that:
* Version is accessible.
* The exception hierarchy is correctly structured.
* The public API is re-exported from the top-level package.
"""

from __future__ import annotations

import math

import pytest

import valuekit
from valuekit import __version__
from valuekit.exceptions import TypeMismatchError, ValueKitError
from valuekit.utils.constants import UNLIMITED


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(ValueKitError, Exception)

    def test_type_mismatch_inherits_from_base(self) -> None:
        assert issubclass(TypeMismatchError, ValueKitError)

    def test_type_mismatch_is_builtin_type_error(self) -> None:
        assert issubclass(TypeMismatchError, TypeError)

    def test_hint_is_stored(self) -> None:
        err = ValueKitError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = ValueKitError("boom")
        assert err.hint is None

    @pytest.mark.parametrize(
        ("expected", "message"),
        [
            ("Array", "Input value must be an Array."),
            ("Object", "Input value must be an Object."),
        ],
    )
    def test_type_mismatch_message(self, expected: str, message: str) -> None:
        err = TypeMismatchError(expected, "int")
        assert str(err) == message
        assert err.expected == expected
        assert err.actual == "int"


# ---------------------------------------------------------------------------
# Public surface
# ---------------------------------------------------------------------------

class TestPublicAPI:
    @pytest.mark.parametrize("name", valuekit.__all__)
    def test_all_names_resolve(self, name: str) -> None:
        assert hasattr(valuekit, name)

    def test_unlimited_is_infinite(self) -> None:
        assert UNLIMITED == math.inf
        assert valuekit.UNLIMITED is UNLIMITED
