"""Custom exception hierarchy for ytd-formats.

Lookups and validators never raise: an unknown itag, an unranked codec
token, or malformed validator input is reported as ``None`` / ``False``.
Exceptions are reserved for defects in the static tables or settings,
which must surface once at startup, and for misuse of the few builder
helpers.

Hierarchy
---------
YtdFormatsError
├── ConfigurationError
│   ├── DuplicateItagError
│   ├── InvalidFormatDescriptorError
│   └── InvalidHeaderValueError
├── HeaderOverrideError
└── InvalidVideoIdError
"""

from __future__ import annotations


class YtdFormatsError(Exception):
    """Base exception for all ytd-formats errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Startup faults --------------------------------------------------------

class ConfigurationError(YtdFormatsError):
    """Raised when a static table or the settings are internally inconsistent.

    Only ever raised while building process-wide tables.  Callers should
    let it halt startup rather than serve partial data.
    """


class DuplicateItagError(ConfigurationError):
    """Raised when the format table lists the same itag twice."""


class InvalidFormatDescriptorError(ConfigurationError):
    """Raised when a format table entry violates the descriptor invariants."""


class InvalidHeaderValueError(ConfigurationError):
    """Raised when a default header name or value is not valid HTTP syntax."""


# --- Caller misuse ---------------------------------------------------------

class HeaderOverrideError(YtdFormatsError):
    """Raised when per-request header overrides are rejected."""


class InvalidVideoIdError(YtdFormatsError):
    """Raised when a watch URL is requested for an empty video id."""
