"""Shared pytest fixtures and configuration for the ytd-formats test suite.

Guidelines
----------
* No internet access in any test.
* Core tests must be pure, without side effects.
* Tests must not depend on the caller's ``YTD_FORMATS_*`` environment.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from ytd_formats import config
from ytd_formats.infra import http_defaults


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip ytd-formats env vars and rebuild settings-derived tables per test."""
    for name in list(os.environ):
        if name.upper().startswith("YTD_FORMATS_"):
            monkeypatch.delenv(name, raising=False)
    config._SETTINGS.reset()
    http_defaults._DEFAULT_HEADERS.reset()
    yield
    config._SETTINGS.reset()
    http_defaults._DEFAULT_HEADERS.reset()
