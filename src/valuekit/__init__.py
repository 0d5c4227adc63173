"""valuekit — runtime value assertions, deep clone and deep freeze.

Pure, synchronous helpers over nested lists and dicts with an optional
depth limit.  Everything public is re-exported from this module.
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
from valuekit.core.kinds import (
    TypeCategory,
    ValueKind,
    category_of,
    is_scalar,
    kind_of,
)
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
from valuekit.exceptions import TypeMismatchError, ValueKitError
from valuekit.utils.constants import UNLIMITED
from valuekit.utils.frozen import FrozenDict
from valuekit.version import __version__

__all__: list[str] = [
    "EMPTY_ARRAY",
    "EMPTY_OBJECT",
    "FrozenDict",
    "UNLIMITED",
    "TypeCategory",
    "TypeMismatchError",
    "ValueKind",
    "ValueKitError",
    "__version__",
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
