"""Library-wide constants.

Centralised here so that every ``levels`` default and every scalar
check uses the same well-known value rather than literals scattered
across the codebase.
"""

from __future__ import annotations

import math
from numbers import Number

from valuekit.utils.frozen import FrozenDict

UNLIMITED: float = math.inf
"""Default depth for every ``levels`` parameter — recurse without limit."""

SCALAR_TYPES: tuple[type, ...] = (type(None), bool, Number, str, bytes)
"""Base types whose instances are immutable scalars."""

ARRAY_TYPES: tuple[type, ...] = (list, tuple)
"""Sequence containers treated as arrays (subclasses included)."""

OBJECT_TYPES: tuple[type, ...] = (dict, FrozenDict)
"""Exact runtime types of a plain object and its frozen form."""
