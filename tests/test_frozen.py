"""Tests for the read-only dict (utils/frozen.py)."""

from __future__ import annotations

import copy
import json
import pickle
from collections.abc import Callable
from typing import Any

import pytest

from valuekit.utils.frozen import FrozenDict


def _frozen() -> FrozenDict:
    return FrozenDict({"a": 1, "b": [2]})


class TestFrozenDict:
    def test_is_a_dict(self) -> None:
        frozen = _frozen()
        assert isinstance(frozen, dict)
        assert frozen == {"a": 1, "b": [2]}

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda d: d.__setitem__("c", 3),
            lambda d: d.__delitem__("a"),
            lambda d: d.clear(),
            lambda d: d.pop("a"),
            lambda d: d.popitem(),
            lambda d: d.setdefault("c", 3),
            lambda d: d.update(c=3),
            lambda d: d.__ior__({"c": 3}),
        ],
    )
    def test_mutation_rejected(self, mutate: Callable[[Any], Any]) -> None:
        frozen = _frozen()
        with pytest.raises(TypeError, match="read-only"):
            mutate(frozen)
        assert frozen == {"a": 1, "b": [2]}

    def test_in_place_union_rejected(self) -> None:
        frozen = _frozen()
        with pytest.raises(TypeError):
            frozen |= {"c": 3}
        assert "c" not in frozen

    def test_copies_stay_frozen(self) -> None:
        for duplicate in (copy.copy(_frozen()), copy.deepcopy(_frozen())):
            assert type(duplicate) is FrozenDict
            assert duplicate == {"a": 1, "b": [2]}

    def test_pickle_round_trip(self) -> None:
        restored = pickle.loads(pickle.dumps(_frozen()))
        assert type(restored) is FrozenDict
        assert restored == {"a": 1, "b": [2]}

    def test_json_serialisable(self) -> None:
        assert json.loads(json.dumps(_frozen())) == {"a": 1, "b": [2]}

    def test_repr(self) -> None:
        assert repr(FrozenDict({"a": 1})) == "FrozenDict({'a': 1})"
