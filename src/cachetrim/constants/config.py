"""Configuration defaults and allowed keys."""

from __future__ import annotations

DEFAULT_EXEMPT_PINNED: bool = False
DEFAULT_STRICT_INDEX: bool = False

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"exempt_pinned", "strict_index"})
