"""Filesystem layout and mutation exceptions."""

from __future__ import annotations

from pathlib import Path

from cachetrim.exceptions.base import CacheTrimError


class CacheLayoutError(CacheTrimError, OSError):
    """Raised when the cache directory does not look like a cache2 tree."""


class EntryRemovalError(CacheTrimError, OSError):
    """Raised when a selected victim's backing file cannot be deleted."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not remove cache entry {path}: {reason}")
        self.path = path


class IndexWriteError(CacheTrimError, OSError):
    """Raised when the rewritten index cannot be persisted."""
