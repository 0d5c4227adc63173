"""Closed classification of arbitrary runtime values.

Two independent views of a value are exposed:

* :class:`ValueKind` — the *shape* used by the transformations:
  array, plain object, scalar, or anything else (opaque).
* :class:`TypeCategory` — the coarse ``typeof``-style category used by
  :func:`~valuekit.core.assertions.are_equal_types` and by strict
  scalar equality.

Both are computed from the type tables in
:mod:`valuekit.utils.constants` rather than by duck typing, so that a
``dict`` subclass or a custom ``Mapping`` is never mistaken for a plain
object.
"""

from __future__ import annotations

import enum
from numbers import Number

from valuekit.utils.constants import ARRAY_TYPES, OBJECT_TYPES, SCALAR_TYPES


class ValueKind(enum.Enum):
    """Shape of a value as seen by clone / freeze / equality."""

    ARRAY = "array"
    OBJECT = "object"
    SCALAR = "scalar"
    OPAQUE = "opaque"


class TypeCategory(enum.Enum):
    """Coarse runtime category, one per ``typeof`` result."""

    NONE = "none"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    BYTES = "bytes"
    FUNCTION = "function"
    OBJECT = "object"


def is_scalar(value: object) -> bool:
    """Return ``True`` for ``None``, booleans, numbers, ``str`` and ``bytes``."""
    return isinstance(value, SCALAR_TYPES)


def kind_of(value: object) -> ValueKind:
    """Classify *value* — checked in the order array, object, scalar."""
    if isinstance(value, ARRAY_TYPES):
        return ValueKind.ARRAY
    if type(value) in OBJECT_TYPES:
        return ValueKind.OBJECT
    if is_scalar(value):
        return ValueKind.SCALAR
    return ValueKind.OPAQUE


def category_of(value: object) -> TypeCategory:
    """Return the :class:`TypeCategory` of *value*.

    ``bool`` is tested before numbers since it subclasses ``int``.
    Classes count as functions because they are callable.
    """
    if value is None:
        return TypeCategory.NONE
    if isinstance(value, bool):
        return TypeCategory.BOOLEAN
    if isinstance(value, Number):
        return TypeCategory.NUMBER
    if isinstance(value, str):
        return TypeCategory.STRING
    if isinstance(value, bytes):
        return TypeCategory.BYTES
    if callable(value):
        return TypeCategory.FUNCTION
    return TypeCategory.OBJECT
