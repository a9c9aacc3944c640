"""Shared utilities — constants, once-initialization, and logging setup.

Rules
-----
* No business logic.
* Importable by any layer.
"""
