"""Configuration-related exceptions."""

from __future__ import annotations

from cachetrim.exceptions.base import CacheTrimError


class ConfigError(CacheTrimError, ValueError):
    """Raised when trim configuration is invalid."""
