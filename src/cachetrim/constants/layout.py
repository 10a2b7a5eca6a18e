"""Fixed on-disk layout of a browser profile's HTTP cache."""

from __future__ import annotations

CACHE_DIRNAME: str = "cache2"
INDEX_FILENAME: str = "index"
ENTRIES_DIRNAME: str = "entries"

INDEX_TEMP_PREFIX: str = ".index-"
INDEX_TEMP_SUFFIX: str = ".tmp"

BYTES_PER_KILOBYTE: int = 1024
