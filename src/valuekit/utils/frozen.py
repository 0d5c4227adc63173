"""Read-only ``dict`` used for frozen plain objects.

:class:`FrozenDict` is still a ``dict`` — ``isinstance`` checks, ``==``
and ``json`` serialisation keep working — but every mutating method
raises ``TypeError``.  It is the only ``dict`` subclass that
:func:`~valuekit.core.kinds.kind_of` accepts as a plain object.
"""

from __future__ import annotations

from typing import Any, NoReturn


class FrozenDict(dict):  # type: ignore[type-arg]
    """A ``dict`` whose contents cannot change after construction."""

    __slots__ = ()

    def _read_only(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = __delitem__ = __ior__ = _read_only
    clear = pop = popitem = setdefault = update = _read_only

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (dict(self),))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"
