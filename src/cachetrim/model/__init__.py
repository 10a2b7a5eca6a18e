"""Core data models for Cachetrim."""

from .entities import (
    CacheIndex,
    CacheIndexHeader,
    CacheIndexRecord,
    EvictionPlan,
    TrimResult,
)

__all__ = [
    "CacheIndex",
    "CacheIndexHeader",
    "CacheIndexRecord",
    "EvictionPlan",
    "TrimResult",
]
