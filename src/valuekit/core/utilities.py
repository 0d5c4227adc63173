"""Depth-limited deep clone and deep freeze of nested lists and dicts.

Pipeline (shared by every public function):

1. **Classify** — arrays and plain objects are traversed, anything else
   is returned as-is (shared, never copied or frozen).
2. **Copy** — a fresh container receives every item.  While ``levels``
   is above zero each item is transformed one level deeper, otherwise
   it is shared by reference.
3. **Seal** (freeze only) — arrays become ``tuple`` and plain objects
   become a :class:`~valuekit.utils.frozen.FrozenDict`.

The validating ``*_array`` / ``*_object`` variants check the input kind
up-front and raise :class:`~valuekit.exceptions.TypeMismatchError`
before any copy is made.  Source values are never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from valuekit.core.assertions import is_array, is_object
from valuekit.exceptions import TypeMismatchError
from valuekit.utils.constants import UNLIMITED
from valuekit.utils.frozen import FrozenDict

logger = logging.getLogger(__name__)

T = TypeVar("T")


EMPTY_ARRAY: tuple[Any, ...] = ()
"""Immutable empty array shared by every caller."""

EMPTY_OBJECT: Mapping[Any, Any] = FrozenDict()
"""Immutable empty object shared by every caller."""


# ---------------------------------------------------------------------------
# Internal traversal
# ---------------------------------------------------------------------------

def _copy_items(
    array: Sequence[Any],
    levels: float,
    transform: Callable[[Any, float], Any],
) -> list[Any]:
    if levels > 0:
        return [transform(item, levels - 1) for item in array]
    return list(array)


def _copy_fields(
    obj: Mapping[Any, Any],
    levels: float,
    transform: Callable[[Any, float], Any],
) -> dict[Any, Any]:
    if levels > 0:
        return {key: transform(item, levels - 1) for key, item in obj.items()}
    return dict(obj)


def _require_array(value: object, fallback: str) -> None:
    if not is_array(value):
        actual = type(value).__name__
        logger.debug("Expected Array, got %s", actual)
        raise TypeMismatchError(
            "Array",
            actual,
            hint=f"Use {fallback}() to pass non-array values through unchanged.",
        )


def _require_object(value: object, fallback: str) -> None:
    if not is_object(value):
        actual = type(value).__name__
        logger.debug("Expected Object, got %s", actual)
        raise TypeMismatchError(
            "Object",
            actual,
            hint=f"Use {fallback}() to pass non-object values through unchanged.",
        )


# ---------------------------------------------------------------------------
# Clone
# ---------------------------------------------------------------------------

def clone(value: T, levels: float = UNLIMITED) -> T:
    """Return a deep copy of *value*.

    Arrays come back as a new ``list`` and plain objects as a new
    ``dict`` with the same key order.  Nesting deeper than *levels* is
    shared with the source.  Any other value is returned unchanged.
    """
    if is_array(value):
        return _copy_items(value, levels, clone)  # type: ignore[arg-type,return-value]
    if is_object(value):
        return _copy_fields(value, levels, clone)  # type: ignore[arg-type,return-value]
    return value


def clone_array(value: Sequence[T], levels: float = UNLIMITED) -> list[T]:
    """Return a deep copy of the array *value*.

    Raises
    ------
    TypeMismatchError
        If *value* is not a ``list`` or ``tuple``.
    """
    _require_array(value, "clone")
    return _copy_items(value, levels, clone)


def clone_object(value: Mapping[Any, T], levels: float = UNLIMITED) -> dict[Any, T]:
    """Return a deep copy of the plain object *value*.

    Raises
    ------
    TypeMismatchError
        If *value* is not a plain ``dict``.
    """
    _require_object(value, "clone")
    return _copy_fields(value, levels, clone)


# ---------------------------------------------------------------------------
# Freeze
# ---------------------------------------------------------------------------

def freeze(value: T, levels: float = UNLIMITED) -> T:
    """Return a deep, immutable copy of *value*.

    Every array reached within *levels* becomes a ``tuple`` and every
    plain object a :class:`~valuekit.utils.frozen.FrozenDict`.  Containers
    past the limit are shared and stay mutable; values that are neither
    arrays nor plain objects are returned unchanged and are not frozen.
    """
    if is_array(value):
        return tuple(_copy_items(value, levels, freeze))  # type: ignore[arg-type,return-value]
    if is_object(value):
        return FrozenDict(_copy_fields(value, levels, freeze))  # type: ignore[arg-type,return-value]
    return value


def freeze_array(value: Sequence[T], levels: float = UNLIMITED) -> tuple[T, ...]:
    """Return a deep, immutable copy of the array *value*.

    Raises
    ------
    TypeMismatchError
        If *value* is not a ``list`` or ``tuple``.
    """
    _require_array(value, "freeze")
    return tuple(_copy_items(value, levels, freeze))


def freeze_object(value: Mapping[Any, T], levels: float = UNLIMITED) -> Mapping[Any, T]:
    """Return a deep, immutable copy of the plain object *value*.

    Raises
    ------
    TypeMismatchError
        If *value* is not a plain ``dict``.
    """
    _require_object(value, "freeze")
    return FrozenDict(_copy_fields(value, levels, freeze))
