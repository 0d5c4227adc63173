"""Core layer — pure value classification and transformation.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* Source values are never mutated.
* ``assertions`` never raises; only the validating ``*_array`` and
  ``*_object`` transformations in ``utilities`` do.
"""

from valuekit.core.assertions import (
    are_equal,
    are_equal_types,
    is_array,
    is_derived_from,
    is_empty,
    is_instance_of,
    is_object,
)
from valuekit.core.kinds import TypeCategory, ValueKind, category_of, is_scalar, kind_of
from valuekit.core.utilities import (
    EMPTY_ARRAY,
    EMPTY_OBJECT,
    clone,
    clone_array,
    clone_object,
    freeze,
    freeze_array,
    freeze_object,
)

__all__: list[str] = [
    "EMPTY_ARRAY",
    "EMPTY_OBJECT",
    "TypeCategory",
    "ValueKind",
    "are_equal",
    "are_equal_types",
    "category_of",
    "clone",
    "clone_array",
    "clone_object",
    "freeze",
    "freeze_array",
    "freeze_object",
    "is_array",
    "is_derived_from",
    "is_empty",
    "is_instance_of",
    "is_object",
    "is_scalar",
    "kind_of",
]
