"""Environment-driven settings for ytd-formats.

All settings are read from ``YTD_FORMATS_*`` environment variables, e.g.
``YTD_FORMATS_USER_AGENT`` or ``YTD_FORMATS_EXTRA_HEADERS='{"Accept-Language": "en"}'``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ytd_formats.exceptions import ConfigurationError
from ytd_formats.utils.constants import DEFAULT_USER_AGENT
from ytd_formats.utils.once import Lazy

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["console", "json"]


class FormatsSettings(BaseSettings):
    """Process-wide settings.  Immutable once loaded."""

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header attached to every outbound request",
    )
    extra_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Additional default headers (JSON object in env)",
    )
    log_level: LogLevel = Field(default="INFO")
    log_format: LogFormat = Field(default="console")

    model_config = SettingsConfigDict(
        env_prefix="YTD_FORMATS_",
        extra="ignore",
        frozen=True,
    )


def load_settings() -> FormatsSettings:
    """Read settings from the environment.

    Raises
    ------
    ConfigurationError
        If any environment value fails validation.
    """
    try:
        return FormatsSettings()
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid ytd-formats settings: {exc}",
            hint="Check the YTD_FORMATS_* environment variables.",
        ) from exc


_SETTINGS: Lazy[FormatsSettings] = Lazy(load_settings)


def get_settings() -> FormatsSettings:
    """Return the process-wide settings, loading them on first call."""
    return _SETTINGS.get()
