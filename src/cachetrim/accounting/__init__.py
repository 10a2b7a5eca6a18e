"""Cache size accounting."""

from .size import cache_root_for, measure_entries, to_kilobytes

__all__ = ["cache_root_for", "measure_entries", "to_kilobytes"]
