"""Binary layout constants for the cache2 index file."""

from __future__ import annotations

SUPPORTED_INDEX_VERSION: int = 8

# Big-endian, no padding: version, time_stamp, is_dirty.
HEADER_FORMAT: str = ">III"
HEADER_SIZE: int = 12

HASH_SIZE: int = 20

# hash, frecency, origin_attrs_hash, on_start_time, on_stop_time,
# content_type, base_domain_access_count, flags.
RECORD_FORMAT: str = ">20sIQHHBHI"
RECORD_SIZE: int = 43

FILE_SIZE_BITS: int = 24
FILE_SIZE_MASK: int = 0x00FFFFFF

# Flag names in ascending bit order, starting at bit 24.
FLAG_FIELDS: tuple[str, ...] = (
    "is_reserved",
    "has_cached_alt_data",
    "is_pinned",
    "is_fresh",
    "is_dirty",
    "is_removed",
    "is_anonymous",
    "is_initialized",
)

U8_MAX: int = 0xFF
U16_MAX: int = 0xFFFF
U32_MAX: int = 0xFFFFFFFF
U64_MAX: int = 0xFFFFFFFFFFFFFFFF
