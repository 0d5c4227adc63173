"""Shared pytest fixtures and configuration for the valuekit test suite.

Guidelines
----------
* Every test is a pure function call — no I/O, no mocking.
* Tests must never mutate module-level sentinels except to prove that
  the mutation is rejected.
"""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def nested() -> dict[str, Any]:
    """A three-level structure mixing arrays and plain objects."""
    return {
        "name": "root",
        "tags": ["a", "b"],
        "child": {
            "values": [1, 2, {"deep": [3]}],
            "flag": True,
        },
    }
