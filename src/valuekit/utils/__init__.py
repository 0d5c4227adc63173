"""Shared utilities — constants and the read-only container types.

Rules
-----
* No business logic.
* No imports from ``core``.
* Importable by any layer.
"""
