"""Config data model for Cachetrim runs."""

from __future__ import annotations

from dataclasses import dataclass

from cachetrim.constants.config import DEFAULT_EXEMPT_PINNED, DEFAULT_STRICT_INDEX


@dataclass(frozen=True)
class TrimConfig:
    """Resolved trim config."""

    exempt_pinned: bool = DEFAULT_EXEMPT_PINNED
    strict_index: bool = DEFAULT_STRICT_INDEX
