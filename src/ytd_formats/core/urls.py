"""Watch-page URL helpers built on the accepted-host list."""

from __future__ import annotations

from urllib.parse import urlsplit

from ytd_formats.core.validators import is_supported_host
from ytd_formats.exceptions import InvalidVideoIdError
from ytd_formats.utils.constants import AGE_RESTRICTED_URLS, BASE_URL


def watch_url(video_id: str) -> str:
    """Return the canonical watch-page URL for *video_id*.

    Raises
    ------
    InvalidVideoIdError
        If *video_id* is empty or only whitespace.
    """
    stripped = video_id.strip()
    if not stripped:
        raise InvalidVideoIdError(
            "Video id must not be empty.",
            hint="Pass the 11-character id from the ?v= query parameter.",
        )
    return f"{BASE_URL}{stripped}"


def is_supported_url(url: str) -> bool:
    """True for http(s) URLs whose hostname is an accepted platform host."""
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return False
    if parts.scheme not in ("http", "https"):
        return False
    return parts.hostname is not None and is_supported_host(parts.hostname)


def is_age_restricted_url(url: str) -> bool:
    """True if *url* points at one of the platform's age-gate pages."""
    return any(marker in url for marker in AGE_RESTRICTED_URLS)
