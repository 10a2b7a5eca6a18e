"""Eviction planning exceptions."""

from __future__ import annotations

from cachetrim.exceptions.base import CacheTrimError


class EvictionExhaustedError(CacheTrimError):
    """Raised when evicting every candidate still leaves the cache over budget."""

    def __init__(self, remaining_kb: int, target_kb: int) -> None:
        super().__init__(
            f"no entries left to evict: cache is still {remaining_kb} KB, target is {target_kb} KB"
        )
        self.remaining_kb = remaining_kb
        self.target_kb = target_kb
