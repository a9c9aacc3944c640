"""Explicit initialization phase.

Call :func:`initialize` once at service startup, before spawning
workers, and pass the returned :class:`FormatsRuntime` to consumers.
Any table or settings defect surfaces here as a
:class:`~ytd_formats.exceptions.ConfigurationError` so the process can
refuse to start.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import httpx
import structlog

from ytd_formats.config import FormatsSettings, get_settings
from ytd_formats.core.registry import FormatRegistry, get_registry
from ytd_formats.exceptions import ConfigurationError
from ytd_formats.infra.http_defaults import (
    build_default_headers,
    build_request_headers,
    default_headers,
)
from ytd_formats.utils.logging_setup import configure_logging

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FormatsRuntime:
    """Read-only handle to the fully built process-wide tables."""

    registry: FormatRegistry
    headers: Mapping[str, str]
    settings: FormatsSettings

    def request_headers(
        self,
        overrides: Mapping[str, str | None] | None = None,
        *,
        keep_user_agent: bool = True,
    ) -> httpx.Headers:
        """Merge *overrides* onto this runtime's baseline headers."""
        return build_request_headers(
            overrides, keep_user_agent=keep_user_agent, base=self.headers,
        )


def initialize(
    settings: FormatsSettings | None = None,
    *,
    setup_logging: bool = False,
) -> FormatsRuntime:
    """Build every table eagerly and return a shared handle.

    When *settings* is given, headers are built from it directly instead
    of from the process-wide environment settings.  In that case the
    module-level :func:`~ytd_formats.infra.http_defaults.default_headers`
    still reflects the environment, so build per-request headers with
    :meth:`FormatsRuntime.request_headers` (or pass
    ``base=runtime.headers``) to stay on this runtime's baseline.

    Raises
    ------
    ConfigurationError
        If the format table, settings, or default headers are invalid.
    """
    try:
        effective = settings if settings is not None else get_settings()
        if setup_logging:
            configure_logging(effective)
        registry = get_registry()
        headers = (
            build_default_headers(settings)
            if settings is not None
            else default_headers()
        )
    except ConfigurationError as exc:
        log.error(
            "ytd_formats_configuration_fault",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        raise

    log.info(
        "ytd_formats_initialized",
        itags=len(registry),
        headers=sorted(headers),
    )
    return FormatsRuntime(registry=registry, headers=headers, settings=effective)
