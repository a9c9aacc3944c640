"""Smoke tests — verify package wiring.

These tests prove that:
* Version is accessible.
* The exception hierarchy is correctly structured.
* The public API is re-exported from the package root.
"""

from __future__ import annotations

import pytest

import ytd_formats
from ytd_formats import __version__
from ytd_formats.exceptions import (
    ConfigurationError,
    DuplicateItagError,
    HeaderOverrideError,
    InvalidFormatDescriptorError,
    InvalidHeaderValueError,
    InvalidVideoIdError,
    YtdFormatsError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigurationError,
            DuplicateItagError,
            InvalidFormatDescriptorError,
            InvalidHeaderValueError,
            HeaderOverrideError,
            InvalidVideoIdError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[YtdFormatsError]
    ) -> None:
        assert issubclass(exc_class, YtdFormatsError)

    @pytest.mark.parametrize(
        "exc_class",
        [DuplicateItagError, InvalidFormatDescriptorError, InvalidHeaderValueError],
    )
    def test_table_defects_are_configuration_errors(
        self, exc_class: type[YtdFormatsError]
    ) -> None:
        assert issubclass(exc_class, ConfigurationError)

    def test_caller_errors_are_not_configuration_errors(self) -> None:
        assert not issubclass(HeaderOverrideError, ConfigurationError)
        assert not issubclass(InvalidVideoIdError, ConfigurationError)

    def test_hint_is_stored(self) -> None:
        err = YtdFormatsError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = YtdFormatsError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TestPublicAPI:
    @pytest.mark.parametrize("name", ytd_formats.__all__)
    def test_exported_names_resolve(self, name: str) -> None:
        assert hasattr(ytd_formats, name)

    def test_root_resolve_is_registry_lookup(self) -> None:
        fmt = ytd_formats.resolve(22)
        assert fmt is not None
        assert fmt.quality_label == "720p"
