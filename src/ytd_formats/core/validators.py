"""Primitive input validators.

Pure predicates and parsers used by URL, proxy and config validation
elsewhere in the client.  Malformed input is an ordinary outcome and is
reported as ``None`` / ``False``, never raised.  The one exception is a
digit run too long for ``int`` conversion, see :func:`parse_leading_int`.
"""

from __future__ import annotations

import re

from ytd_formats.utils.constants import VALID_QUERY_DOMAINS

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

_H = "[0-9a-f]{1,4}"
_IPV6_ADDRESS = "|".join(
    (
        f"({_H}:){{7}}{_H}",
        f"({_H}:){{1,7}}:",
        f"({_H}:){{1,6}}:{_H}",
        f"({_H}:){{1,5}}(:{_H}){{1,2}}",
        f"({_H}:){{1,4}}(:{_H}){{1,3}}",
        f"({_H}:){{1,3}}(:{_H}){{1,4}}",
        f"({_H}:){{1,2}}(:{_H}){{1,5}}",
        f"{_H}:(:{_H}){{1,6}}",
        f":((:{_H}){{1,7}}|:)",
    )
)
_IPV6_CIDR = re.compile(f"(?:{_IPV6_ADDRESS})/(1[01][0-9]|12[0-8]|[0-9]{{1,2}})")


def parse_leading_int(text: str) -> int | None:
    """Parse the signed integer at the start of *text*.

    Leading whitespace (newlines included) and an optional sign are
    accepted; anything after the digits is ignored.

    >>> parse_leading_int("  -42 trailing text")
    -42

    Raises
    ------
    ValueError
        If the digit run exceeds the interpreter's integer string
        conversion limit (``sys.get_int_max_str_digits()``, 4300 by
        default on Python 3.11+).
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def is_ipv6_cidr(text: str) -> bool:
    """True for ``<ipv6-address>/<prefix>`` with a prefix in ``[0, 128]``.

    Syntactic check only.  Hextets must be lowercase.
    """
    return _IPV6_CIDR.fullmatch(text) is not None


def is_supported_host(host: str) -> bool:
    """True if *host* is exactly one of the accepted platform hostnames."""
    return host in VALID_QUERY_DOMAINS
