"""Index parsing and precondition exceptions."""

from __future__ import annotations

from cachetrim.exceptions.base import CacheTrimError


class IndexFormatError(CacheTrimError, ValueError):
    """Raised when the cache index cannot be decoded or encoded."""


class IndexTruncatedError(IndexFormatError):
    """Raised when the index stream ends partway through a structure."""

    def __init__(self, structure: str, expected: int, received: int) -> None:
        super().__init__(f"truncated {structure}: expected {expected} bytes, got {received}")
        self.structure = structure
        self.expected = expected
        self.received = received


class PreconditionError(CacheTrimError):
    """Raised when the index may not be modified by this process."""


class DirtyIndexError(PreconditionError):
    """Raised when another process currently owns the cache index."""

    def __init__(self) -> None:
        super().__init__("cache index is dirty, close all browser instances using this profile")


class UnsupportedVersionError(PreconditionError):
    """Raised when the index format version is not the supported one."""

    def __init__(self, version: int) -> None:
        super().__init__(f"unsupported index version: {version}")
        self.version = version
