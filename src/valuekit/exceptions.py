"""Custom exception hierarchy for valuekit.

Every error raised on purpose by the library inherits from
:class:`ValueKitError`.  The predicates in ``core.assertions`` and the
total transformations ``clone`` / ``freeze`` never raise; only the
validating ``*_array`` / ``*_object`` variants do.

Hierarchy
---------
ValueKitError
└── TypeMismatchError  (also a built-in ``TypeError``)
"""

from __future__ import annotations


class ValueKitError(Exception):
    """Base exception for all valuekit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance for the caller."""


# --- Input validation ------------------------------------------------------

class TypeMismatchError(ValueKitError, TypeError):
    """Raised when a value is not the container kind an operation expects.

    Parameters
    ----------
    expected:
        Name of the expected kind — ``"Array"`` or ``"Object"``.
    actual:
        Name of the offending value's runtime type.
    """

    def __init__(
        self,
        expected: str,
        actual: str,
        *,
        hint: str | None = None,
    ) -> None:
        article = "an" if expected[:1].lower() in "aeiou" else "a"
        super().__init__(f"Input value must be {article} {expected}.", hint=hint)
        self.expected: str = expected
        self.actual: str = actual
