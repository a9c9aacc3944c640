"""Legacy itag → :class:`StaticFormat` registry.

The registry is built once from :data:`FORMAT_TABLE` and never mutated.
Construction validates the table and raises a
:class:`~ytd_formats.exceptions.ConfigurationError` subclass on any
defect.  Lookups never raise: an unknown itag is an expected outcome,
since modern adaptive itags describe themselves and are not listed here.

Guarantees
----------
* No I/O beyond one debug log line at build time.
* Safe for concurrent reads once built; :func:`get_registry` builds it
  exactly once even under concurrent first access.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

import structlog

from ytd_formats.core.format_table import FORMAT_TABLE
from ytd_formats.core.models import StaticFormat
from ytd_formats.core.validators import parse_leading_int
from ytd_formats.exceptions import DuplicateItagError, InvalidFormatDescriptorError
from ytd_formats.utils.once import Lazy

log = structlog.get_logger(__name__)

# Player-response key → StaticFormat attribute.
_RAW_FIELD_MAP: tuple[tuple[str, str], ...] = (
    ("mimeType", "mime_type"),
    ("qualityLabel", "quality_label"),
    ("bitrate", "bitrate"),
    ("audioBitrate", "audio_bitrate"),
)


class FormatRegistry:
    """Immutable mapping from itag to :class:`StaticFormat`.

    Build with :meth:`from_entries`; the constructor trusts its input.
    """

    __slots__ = ("_formats",)

    def __init__(self, formats: Mapping[int, StaticFormat]) -> None:
        self._formats: Mapping[int, StaticFormat] = MappingProxyType(dict(formats))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[tuple[int, StaticFormat]],
    ) -> FormatRegistry:
        """Validate *entries* and build a registry.

        Raises
        ------
        DuplicateItagError
            If an itag appears more than once.
        InvalidFormatDescriptorError
            If an itag is not a positive ``int``, a ``mime_type`` is
            empty, or a descriptor carries no quality or bitrate at all.
        """
        formats: dict[int, StaticFormat] = {}
        for itag, fmt in entries:
            cls._check_entry(itag, fmt)
            if itag in formats:
                raise DuplicateItagError(
                    f"itag {itag} is listed more than once in the format table.",
                    hint="Each itag must map to exactly one descriptor.",
                )
            formats[itag] = fmt
        return cls(formats)

    @staticmethod
    def _check_entry(itag: object, fmt: StaticFormat) -> None:
        if isinstance(itag, bool) or not isinstance(itag, int) or itag <= 0:
            raise InvalidFormatDescriptorError(
                f"Invalid itag key {itag!r}: must be a positive integer.",
            )
        if not fmt.mime_type.strip():
            raise InvalidFormatDescriptorError(
                f"itag {itag} has an empty mime_type.",
            )
        if fmt.is_empty():
            raise InvalidFormatDescriptorError(
                f"itag {itag} has no quality label, bitrate or audio bitrate.",
            )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, itag: int) -> StaticFormat | None:
        """Return the descriptor for *itag*, or ``None`` if it is not listed."""
        if isinstance(itag, bool) or not isinstance(itag, int):
            return None
        return self._formats.get(itag)

    def itags(self) -> tuple[int, ...]:
        """All listed itags in ascending order."""
        return tuple(sorted(self._formats))

    @property
    def formats(self) -> Mapping[int, StaticFormat]:
        """Read-only view of the underlying mapping."""
        return self._formats

    def __contains__(self, itag: object) -> bool:
        return self.resolve(itag) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[int]:
        return iter(self.itags())

    def __len__(self) -> int:
        return len(self._formats)


# ---------------------------------------------------------------------------
# Process-wide instance
# ---------------------------------------------------------------------------

def _build_default_registry() -> FormatRegistry:
    registry = FormatRegistry.from_entries(FORMAT_TABLE)
    log.debug("format_registry_built", entries=len(registry))
    return registry


_REGISTRY: Lazy[FormatRegistry] = Lazy(_build_default_registry)


def get_registry() -> FormatRegistry:
    """Return the shared registry, building it on first call."""
    return _REGISTRY.get()


def resolve(itag: int) -> StaticFormat | None:
    """Look *itag* up in the shared registry."""
    return get_registry().resolve(itag)


# ---------------------------------------------------------------------------
# Merge into raw player-response formats
# ---------------------------------------------------------------------------

def _coerce_itag(raw_itag: Any) -> int | None:
    if isinstance(raw_itag, bool):
        return None
    if isinstance(raw_itag, int):
        return raw_itag
    if isinstance(raw_itag, str):
        return parse_leading_int(raw_itag)
    return None


def fill_static_metadata(
    raw: Mapping[str, Any],
    registry: FormatRegistry | None = None,
) -> dict[str, Any]:
    """Return a copy of *raw* with missing fields filled from the registry.

    *raw* is a player-response format dict (``itag``, ``mimeType``,
    ``qualityLabel``, ``bitrate``, ``audioBitrate``).  Only keys that are
    absent or ``None`` are filled; values supplied by the API always win.
    An unknown or unparseable itag leaves the copy untouched.

    Raises
    ------
    ValueError
        If a string itag carries a digit run longer than the interpreter's
        integer string conversion limit; see :func:`parse_leading_int`.
    """
    merged = dict(raw)
    itag = _coerce_itag(raw.get("itag"))
    if itag is None:
        return merged

    static = (registry or get_registry()).resolve(itag)
    if static is None:
        return merged

    for raw_key, attr in _RAW_FIELD_MAP:
        value = getattr(static, attr)
        if merged.get(raw_key) is None and value is not None:
            merged[raw_key] = value
    return merged
