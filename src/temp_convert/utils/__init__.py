"""Shared utilities — constants and cross-cutting values.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""
