"""Root exception for Cachetrim."""

from __future__ import annotations


class CacheTrimError(Exception):
    """Base class for all errors raised by Cachetrim."""
