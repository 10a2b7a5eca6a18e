"""Core data entities for the cache index and eviction results."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cachetrim.constants.index import (
    FILE_SIZE_MASK,
    HASH_SIZE,
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
)
from cachetrim.constants.layout import BYTES_PER_KILOBYTE
from cachetrim.exceptions import IndexFormatError


def _check_range(name: str, value: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= upper:
        raise IndexFormatError(f"{name} must be an integer in [0, {upper:#x}], got {value!r}")


@dataclass(frozen=True)
class CacheIndexHeader:
    """Header of a cache2 index file.

    All three fields are written back verbatim when the index is rewritten.
    """

    version: int
    time_stamp: int
    is_dirty: int

    def __post_init__(self) -> None:
        _check_range("version", self.version, U32_MAX)
        _check_range("time_stamp", self.time_stamp, U32_MAX)
        _check_range("is_dirty", self.is_dirty, U32_MAX)

    @property
    def dirty(self) -> bool:
        """Whether another process currently owns the index."""
        return self.is_dirty != 0


@dataclass(frozen=True)
class CacheIndexRecord:
    """Index metadata for one cache entry.

    ``file_size`` is a byte count bounded to 24 bits. The eight booleans map
    to bits 24..31 of the on-disk flags word; the packed form never leaves
    :mod:`cachetrim.index.flags`.
    """

    hash: bytes
    frecency: int
    origin_attrs_hash: int = 0
    on_start_time: int = 0
    on_stop_time: int = 0
    content_type: int = 0
    base_domain_access_count: int = 0
    file_size: int = 0
    is_reserved: bool = False
    has_cached_alt_data: bool = False
    is_pinned: bool = False
    is_fresh: bool = False
    is_dirty: bool = False
    is_removed: bool = False
    is_anonymous: bool = False
    is_initialized: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.hash, bytes) or len(self.hash) != HASH_SIZE:
            raise IndexFormatError(f"hash must be {HASH_SIZE} bytes, got {self.hash!r}")
        _check_range("frecency", self.frecency, U32_MAX)
        _check_range("origin_attrs_hash", self.origin_attrs_hash, U64_MAX)
        _check_range("on_start_time", self.on_start_time, U16_MAX)
        _check_range("on_stop_time", self.on_stop_time, U16_MAX)
        _check_range("content_type", self.content_type, U8_MAX)
        _check_range("base_domain_access_count", self.base_domain_access_count, U16_MAX)
        _check_range("file_size", self.file_size, FILE_SIZE_MASK)

    @property
    def entry_name(self) -> str:
        """Backing file name inside the entries directory."""
        return self.hash.hex().upper()


@dataclass(frozen=True)
class CacheIndex:
    """Decoded index: header plus records in file order."""

    header: CacheIndexHeader
    records: tuple[CacheIndexRecord, ...] = ()


@dataclass(frozen=True)
class EvictionPlan:
    """Outcome of ranking records against a size target.

    ``evict`` lists victims in the order they must be removed. Sizes are
    byte counts; ``*_kb`` properties give the truncated kilobyte view used
    for comparisons with the target.
    """

    keep: tuple[CacheIndexRecord, ...]
    evict: tuple[CacheIndexRecord, ...]
    initial_size: int
    final_size: int

    @property
    def initial_kb(self) -> int:
        return self.initial_size // BYTES_PER_KILOBYTE

    @property
    def final_kb(self) -> int:
        return self.final_size // BYTES_PER_KILOBYTE

    @property
    def is_noop(self) -> bool:
        return not self.evict


@dataclass(frozen=True)
class TrimResult:
    """Result of one trim run."""

    profile: Path
    target_kb: int
    measured_kb: int
    final_kb: int
    deleted: tuple[Path, ...] = ()
    dry_run: bool = False

    @property
    def changed(self) -> bool:
        """Whether entries were (or, in a dry run, would be) evicted."""
        return bool(self.deleted)
