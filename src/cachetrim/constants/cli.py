"""CLI text and process exit statuses."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "Trim a browser's on-disk HTTP cache down to a size budget.\n\n"
    "Entries with the lowest frecency are evicted first and the cache2\n"
    "index is rewritten without them. The browser must not be running."
)

EXIT_OK: int = 0
EXIT_DIRTY_INDEX: int = 1
EXIT_UNSUPPORTED_VERSION: int = 2
EXIT_USAGE: int = 3
EXIT_FATAL: int = 4
