"""Platform constants shared by the validators and the header defaults."""

from __future__ import annotations

BASE_URL: str = "https://www.youtube.com/watch?v="
"""Prefix of a canonical watch-page URL; the video id is appended."""

VALID_QUERY_DOMAINS: frozenset[str] = frozenset(
    {
        "youtube.com",
        "www.youtube.com",
        "m.youtube.com",
        "music.youtube.com",
        "gaming.youtube.com",
    }
)
"""Hostnames accepted for watch-page URLs.  Exact match only."""

AGE_RESTRICTED_URLS: tuple[str, ...] = (
    "support.google.com/youtube/?p=age_restrictions",
    "youtube.com/t/community_guidelines",
)
"""URL fragments the platform links to when a video is age-gated."""

DEFAULT_USER_AGENT: str = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/87.0.4280.101 Safari/537.36"
)
"""Browser-style User-Agent sent with every outbound request."""
