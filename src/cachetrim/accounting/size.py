"""On-disk cache size measurement."""

from __future__ import annotations

import logging
from pathlib import Path

from cachetrim.constants.layout import BYTES_PER_KILOBYTE, CACHE_DIRNAME, ENTRIES_DIRNAME
from cachetrim.exceptions import CacheLayoutError

logger = logging.getLogger(__name__)


def cache_root_for(profile: Path) -> Path:
    """Return the cache2 directory of a browser profile."""
    return profile / CACHE_DIRNAME


def to_kilobytes(size_bytes: int) -> int:
    """Convert bytes to whole kilobytes, truncating."""
    return size_bytes // BYTES_PER_KILOBYTE


def measure_entries(cache_root: Path) -> int:
    """Return the total byte size of every file directly under ``entries``.

    Every entry must be a plain file. A subdirectory means the directory is
    not a cache2 tree, so measurement stops instead of skipping it.
    """
    entries_dir = cache_root / ENTRIES_DIRNAME
    total = 0
    count = 0
    try:
        for path in entries_dir.iterdir():
            if path.is_dir():
                raise CacheLayoutError(f"unexpected directory in cache entries: {path}")
            total += path.stat().st_size
            count += 1
    except CacheLayoutError:
        raise
    except OSError as exc:
        raise CacheLayoutError(f"cannot measure cache entries in {entries_dir}: {exc}") from exc

    logger.debug("Measured %d entries totalling %d bytes in %s", count, total, entries_dir)
    return total
