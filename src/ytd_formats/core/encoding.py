"""Codec preference tables and ranking.

Every function in this module is a **pure**, deterministic
transformation with no I/O.

A token's rank is its position in the table for its
:class:`~ytd_formats.core.models.EncodingKind`; later means preferred.
Matching is exact and case-sensitive, so callers normalise raw codec
strings (``avc1.640028`` → ``avc1``) before ranking.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from ytd_formats.core.models import EncodingKind

AUDIO_ENCODING_RANKS: tuple[str, ...] = (
    "mp4a",
    "mp3",
    "vorbis",
    "aac",
    "opus",
    "flac",
)

# Order is load-bearing for stream selection; do not re-sort by era.
VIDEO_ENCODING_RANKS: tuple[str, ...] = (
    "mp4v",
    "avc1",
    "Sorenson H.283",
    "MPEG-4 Visual",
    "VP8",
    "VP9",
    "H.264",
)

UNRANKED: int = -1
"""Rank of a token missing from its table; below every listed token."""

_RANK_INDEX: dict[EncodingKind, dict[str, int]] = {
    EncodingKind.AUDIO: {token: i for i, token in enumerate(AUDIO_ENCODING_RANKS)},
    EncodingKind.VIDEO: {token: i for i, token in enumerate(VIDEO_ENCODING_RANKS)},
}

_CODECS_PARAM = re.compile(r'codecs\s*=\s*"([^"]*)"')


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------

def rank(token: str, kind: EncodingKind) -> int:
    """Return the zero-based position of *token*, or :data:`UNRANKED`."""
    return _RANK_INDEX[kind].get(token, UNRANKED)


def prefer(a: str, b: str, kind: EncodingKind) -> str | None:
    """Return whichever of *a* and *b* ranks higher.

    Returns ``None`` on a tie (including two unranked tokens); breaking
    the tie, e.g. by bitrate, is up to the caller.
    """
    rank_a = rank(a, kind)
    rank_b = rank(b, kind)
    if rank_a == rank_b:
        return None
    return a if rank_a > rank_b else b


def best_codec(tokens: Iterable[str], kind: EncodingKind) -> str | None:
    """Return the highest-ranked listed token in *tokens*.

    Unranked tokens are never returned.  Among equal tokens the first
    occurrence wins.  ``None`` when nothing in *tokens* is listed.
    """
    best: str | None = None
    best_rank = UNRANKED
    for token in tokens:
        token_rank = rank(token, kind)
        if token_rank > best_rank:
            best, best_rank = token, token_rank
    return best


# ---------------------------------------------------------------------------
# MIME parsing
# ---------------------------------------------------------------------------

def codec_tokens(mime_type: str) -> tuple[str, ...]:
    """Split the ``codecs="..."`` parameter of *mime_type* into tokens.

    >>> codec_tokens('video/mp4; codecs="H.264, aac"')
    ('H.264', 'aac')

    Whitespace around each entry is stripped; nothing else is normalised.
    """
    match = _CODECS_PARAM.search(mime_type)
    if match is None:
        return ()
    return tuple(
        part.strip() for part in match.group(1).split(",") if part.strip()
    )
