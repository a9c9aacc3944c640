"""Default headers for every outbound request made by the HTTP transport.

The baseline mapping is built once from settings and validated up
front: a malformed header name or value is a
:class:`~ytd_formats.exceptions.InvalidHeaderValueError` at startup,
never a per-request failure.

Per-request overrides go through :func:`build_request_headers`, which
returns an :class:`httpx.Headers` ready to hand to an ``httpx`` client.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

import httpx
import structlog

from ytd_formats.config import FormatsSettings, get_settings
from ytd_formats.exceptions import (
    HeaderOverrideError,
    InvalidHeaderValueError,
    YtdFormatsError,
)
from ytd_formats.utils.once import Lazy

log = structlog.get_logger(__name__)

USER_AGENT: str = "User-Agent"

# RFC 9110 §5.1 token and §5.5 field-value, restricted to ASCII since
# httpx encodes header values as ASCII.
_HEADER_NAME = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_HEADER_VALUE = re.compile(r"[\x21-\x7e]([\t\x20-\x7e]*[\x21-\x7e])?")


def _check_header(
    name: str,
    value: str,
    error_cls: type[YtdFormatsError],
) -> None:
    if _HEADER_NAME.fullmatch(name) is None:
        raise error_cls(f"Invalid header name: {name!r}")
    if _HEADER_VALUE.fullmatch(value) is None:
        raise error_cls(
            f"Invalid value for header {name!r}: {value!r}",
            hint="Header values must be non-empty printable ASCII, without "
            "control characters or surrounding whitespace.",
        )


# ---------------------------------------------------------------------------
# Baseline
# ---------------------------------------------------------------------------

def build_default_headers(settings: FormatsSettings) -> Mapping[str, str]:
    """Build and validate the immutable baseline header mapping.

    Raises
    ------
    InvalidHeaderValueError
        If any configured header name or value is malformed, or two
        names differ only by case.
    """
    headers: dict[str, str] = {USER_AGENT: settings.user_agent}
    seen: set[str] = {USER_AGENT.lower()}
    for name, value in settings.extra_headers.items():
        if name.lower() == USER_AGENT.lower():
            raise InvalidHeaderValueError(
                "User-Agent must be set through the user_agent setting.",
                hint="Use YTD_FORMATS_USER_AGENT instead of extra_headers.",
            )
        if name.lower() in seen:
            raise InvalidHeaderValueError(
                f"Header {name!r} is configured more than once.",
                hint="Header names are case-insensitive; keep one spelling.",
            )
        seen.add(name.lower())
        headers[name] = value

    for name, value in headers.items():
        _check_header(name, value, InvalidHeaderValueError)

    log.debug("default_headers_built", names=sorted(headers))
    return MappingProxyType(headers)


_DEFAULT_HEADERS: Lazy[Mapping[str, str]] = Lazy(
    lambda: build_default_headers(get_settings())
)


def default_headers() -> Mapping[str, str]:
    """Return the process-wide baseline headers, building them on first call."""
    return _DEFAULT_HEADERS.get()


# ---------------------------------------------------------------------------
# Per-request merge
# ---------------------------------------------------------------------------

def build_request_headers(
    overrides: Mapping[str, str | None] | None = None,
    *,
    keep_user_agent: bool = True,
    base: Mapping[str, str] | None = None,
) -> httpx.Headers:
    """Merge caller *overrides* onto the baseline headers.

    Header names compare case-insensitively.  An override of ``None``
    removes that header.  Removing ``User-Agent`` requires
    ``keep_user_agent=False``.

    Raises
    ------
    HeaderOverrideError
        If an override is malformed or would drop ``User-Agent`` while
        *keep_user_agent* is set.
    """
    headers = httpx.Headers(dict(base if base is not None else default_headers()))
    for name, value in (overrides or {}).items():
        if value is None:
            if name.lower() == USER_AGENT.lower() and keep_user_agent:
                raise HeaderOverrideError(
                    "Refusing to remove the baseline User-Agent header.",
                    hint="Pass keep_user_agent=False to drop it deliberately.",
                )
            headers.pop(name, None)
            continue
        _check_header(name, value, HeaderOverrideError)
        headers[name] = value
    return headers
