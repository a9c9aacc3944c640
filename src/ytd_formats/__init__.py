"""ytd-formats — legacy itag resolution and codec preference ranking.

Pure, deterministic lookup tables for a YouTube extraction client, plus
the small validators and request defaults that sit next to them.
"""

from ytd_formats.core import (
    EncodingKind,
    FormatRegistry,
    StaticFormat,
    is_ipv6_cidr,
    is_supported_host,
    parse_leading_int,
    rank,
    resolve,
)
from ytd_formats.infra import default_headers
from ytd_formats.version import __version__

__all__: list[str] = [
    "EncodingKind",
    "FormatRegistry",
    "StaticFormat",
    "__version__",
    "default_headers",
    "is_ipv6_cidr",
    "is_supported_host",
    "parse_leading_int",
    "rank",
    "resolve",
]
