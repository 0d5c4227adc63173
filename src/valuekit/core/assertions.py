"""Total predicates over arbitrary runtime values.

Every function in this module is **pure** and **total** — it never
mutates its arguments and never raises, whatever it is given.  The
single exception is cyclic input to :func:`are_equal`, which recurses
until Python raises ``RecursionError``.

"Strict equality" below is the identity-or-same-scalar comparison
performed by :func:`_strictly_equal`; it is what the depth-limited
comparison falls back to once ``levels`` is exhausted.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from numbers import Number

from valuekit.core.kinds import (
    TypeCategory,
    ValueKind,
    category_of,
    is_scalar,
    kind_of,
)
from valuekit.utils.constants import UNLIMITED
from valuekit.utils.frozen import FrozenDict

_FROZEN_CONSTRUCTORS: dict[type, type] = {tuple: list, FrozenDict: dict}


# ---------------------------------------------------------------------------
# Shape checks
# ---------------------------------------------------------------------------

def is_array(value: object) -> bool:
    """Return ``True`` when *value* is a ``list`` or a ``tuple``."""
    return kind_of(value) is ValueKind.ARRAY


def is_object(value: object) -> bool:
    """Return ``True`` when *value* is a plain object.

    Only an exact ``dict`` (or the :class:`~valuekit.utils.frozen.FrozenDict`
    returned by :func:`~valuekit.core.utilities.freeze`) qualifies.  Other
    ``dict`` subclasses, read-only ``mappingproxy`` views (class namespaces
    included), other ``Mapping`` types and class instances do not.
    """
    return kind_of(value) is ValueKind.OBJECT


def is_empty(value: object) -> bool:
    """Return ``True`` when *value* is empty.

    Falsy scalars (``None``, ``False``, zero, NaN, ``""``, ``b""``) are
    empty; arrays and plain objects are empty when they hold nothing.
    Every other value is non-empty, even an empty ``set``.
    """
    kind = kind_of(value)
    if kind is ValueKind.SCALAR:
        return _is_nan(value) or not value
    if kind is ValueKind.ARRAY or kind is ValueKind.OBJECT:
        return len(value) == 0  # type: ignore[arg-type]
    return False


# ---------------------------------------------------------------------------
# Ancestry checks
# ---------------------------------------------------------------------------

def is_instance_of(value: object, base: object) -> bool:
    """Return ``True`` when *value* is an instance of the class *base*.

    Returns ``False`` (rather than raising) when *base* is not a class.
    A frozen object is still a ``dict``, but a frozen array is a
    ``tuple`` and therefore not a ``list``; use
    :func:`is_array` to accept both.
    """
    return isinstance(base, type) and isinstance(value, base)


def is_derived_from(value: object, base: object) -> bool:
    """Return ``True`` when *base* is a strict ancestor of *value*.

    The walk starts one step above *value*: for a class that is its first
    base class, for any other object it is the object's own class.  It
    ends at ``object``, which is included.  Scalars are never derived
    from anything, and a class is never derived from itself.
    """
    if is_scalar(value):
        return False
    if isinstance(value, type):
        ancestors = value.__mro__[1:]
    else:
        ancestors = type(value).__mro__
    return any(ancestor is base for ancestor in ancestors)


# ---------------------------------------------------------------------------
# Equality
# ---------------------------------------------------------------------------

def _is_nan(value: object) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    return isinstance(value, Number) and value != value


def _strictly_equal(base: object, value: object) -> bool:
    """Identity for containers and opaque values, typed ``==`` for scalars.

    ``1`` and ``1.0`` are equal, ``True`` and ``1`` are not, and NaN is
    never equal to anything, itself included.
    """
    if is_scalar(base) and is_scalar(value):
        if _is_nan(base) or _is_nan(value):
            return False
        if category_of(base) is not category_of(value):
            return False
        return bool(base == value)
    return base is value


def are_equal(base: object, value: object, levels: float = UNLIMITED) -> bool:
    """Return ``True`` when *base* and *value* are structurally equal.

    Arrays are compared item by item, plain objects key by key; any
    other pair must be strictly equal.  Each nested comparison consumes
    one level, and once *levels* reaches zero nested items are only
    compared strictly.
    """
    if _strictly_equal(base, value):
        return True
    if is_array(base) and is_array(value):
        return _are_equal_arrays(base, value, levels)  # type: ignore[arg-type]
    if is_object(base) and is_object(value):
        return _are_equal_objects(base, value, levels)  # type: ignore[arg-type]
    return False


def _are_equal_items(base: object, value: object, levels: float) -> bool:
    if levels > 0:
        return are_equal(base, value, levels - 1)
    return _strictly_equal(base, value)


def _are_equal_arrays(
    base: Sequence[object],
    value: Sequence[object],
    levels: float,
) -> bool:
    if len(base) != len(value):
        return False
    return all(
        _are_equal_items(base_item, item, levels)
        for base_item, item in zip(base, value)
    )


def _are_equal_objects(
    base: Mapping[object, object],
    value: Mapping[object, object],
    levels: float,
) -> bool:
    """Compare key counts, then every key of *value* against *base*.

    The key sets themselves are not compared: a key missing from *base*
    reads as ``None``, so ``{"a": None}`` equals ``{"b": None}``.
    """
    if len(base) != len(value):
        return False
    return all(
        _are_equal_items(base.get(key), item, levels)
        for key, item in value.items()
    )


def are_equal_types(value: object, base: object) -> bool:
    """Return ``True`` when *value* has the same type as *base*.

    Scalars only need the same :class:`~valuekit.core.kinds.TypeCategory`
    (``1`` and ``2.5`` are both numbers).  Objects and callables need the
    same class; a subclass instance does not match.  Frozen containers
    count as their mutable counterparts, so a ``tuple`` matches a
    ``list`` and a :class:`~valuekit.utils.frozen.FrozenDict` matches a
    ``dict``.

    Callables are compared by their Python class too: a lambda, a builtin
    such as ``len`` and a class are three different types here.
    """
    category = category_of(base)
    if category is not category_of(value):
        return False
    if category is TypeCategory.OBJECT or category is TypeCategory.FUNCTION:
        return _constructor_of(value) is _constructor_of(base)
    return True


def _constructor_of(value: object) -> type:
    cls = type(value)
    return _FROZEN_CONSTRUCTORS.get(cls, cls)
