"""Core layer — pure lookup tables, ranking, and validators.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``infra``.
* All functions must be fully typed and deterministic.
"""

from ytd_formats.core.encoding import (
    AUDIO_ENCODING_RANKS,
    UNRANKED,
    VIDEO_ENCODING_RANKS,
    best_codec,
    codec_tokens,
    prefer,
    rank,
)
from ytd_formats.core.models import EncodingKind, StaticFormat
from ytd_formats.core.registry import (
    FormatRegistry,
    fill_static_metadata,
    get_registry,
    resolve,
)
from ytd_formats.core.urls import is_age_restricted_url, is_supported_url, watch_url
from ytd_formats.core.validators import is_ipv6_cidr, is_supported_host, parse_leading_int

__all__: list[str] = [
    "AUDIO_ENCODING_RANKS",
    "EncodingKind",
    "FormatRegistry",
    "StaticFormat",
    "UNRANKED",
    "VIDEO_ENCODING_RANKS",
    "best_codec",
    "codec_tokens",
    "fill_static_metadata",
    "get_registry",
    "is_age_restricted_url",
    "is_ipv6_cidr",
    "is_supported_host",
    "is_supported_url",
    "parse_leading_int",
    "prefer",
    "rank",
    "resolve",
    "watch_url",
]
