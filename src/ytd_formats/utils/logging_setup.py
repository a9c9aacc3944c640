"""structlog configuration for ytd-formats.

The library itself only ever calls ``structlog.get_logger(__name__)``.
Applications embedding it decide whether to call
:func:`configure_logging`; :func:`ytd_formats.bootstrap.initialize` does
so only when asked.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from ytd_formats.config import FormatsSettings

log = structlog.get_logger(__name__)


def _build_renderer(settings: FormatsSettings) -> Any:
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(settings: FormatsSettings) -> None:
    """Route structlog through stdlib logging at ``settings.log_level``."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _build_renderer(settings),
        ],
    )

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level)

    log.debug(
        "logging_configured",
        log_format=settings.log_format,
        log_level=settings.log_level,
    )
