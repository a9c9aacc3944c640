"""Domain models for ytd-formats.

All models are **frozen** dataclasses: immutable value objects that are
safe to share between threads without copying.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Encoding family selector
# ---------------------------------------------------------------------------

class EncodingKind(enum.Enum):
    """Which preference table a codec token is ranked against."""

    AUDIO = "audio"
    VIDEO = "video"


# ---------------------------------------------------------------------------
# Static format descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StaticFormat:
    """Known metadata for one legacy itag.

    Optional fields use ``None`` for "unknown"; ``0`` is a real value.
    """

    mime_type: str
    """Container and codecs, e.g. ``video/mp4; codecs="H.264, aac"``."""

    quality_label: str | None
    """Resolution/framerate annotation such as ``"1080p HFR"``."""

    bitrate: int | None
    """Nominal video bitrate in bits per second."""

    audio_bitrate: int | None
    """Nominal audio bitrate in kilobits per second."""

    @property
    def container(self) -> str:
        """MIME subtype without parameters (``mp4`` for ``video/mp4; ...``)."""
        media_type = self.mime_type.split(";", 1)[0].strip()
        return media_type.partition("/")[2]

    @property
    def codecs(self) -> tuple[str, ...]:
        """Codec tokens listed in the ``codecs`` MIME parameter."""
        # Local import: encoding imports this module.
        from ytd_formats.core.encoding import codec_tokens

        return codec_tokens(self.mime_type)

    def is_empty(self) -> bool:
        """True when none of the optional descriptor fields is known."""
        return (
            self.quality_label is None
            and self.bitrate is None
            and self.audio_bitrate is None
        )
