"""Shared exception hierarchy for Cachetrim."""

from __future__ import annotations

from .base import CacheTrimError
from .config import ConfigError
from .eviction import EvictionExhaustedError
from .index import (
    DirtyIndexError,
    IndexFormatError,
    IndexTruncatedError,
    PreconditionError,
    UnsupportedVersionError,
)
from .layout import CacheLayoutError, EntryRemovalError, IndexWriteError

__all__ = [
    "CacheLayoutError",
    "CacheTrimError",
    "ConfigError",
    "DirtyIndexError",
    "EntryRemovalError",
    "EvictionExhaustedError",
    "IndexFormatError",
    "IndexTruncatedError",
    "IndexWriteError",
    "PreconditionError",
    "UnsupportedVersionError",
]
