"""Shared pytest fixtures for building synthetic browser cache profiles."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from cachetrim.constants.index import SUPPORTED_INDEX_VERSION
from cachetrim.index import write_index
from cachetrim.model import CacheIndex, CacheIndexHeader, CacheIndexRecord

RecordFactory = Callable[..., CacheIndexRecord]
ProfileFactory = Callable[..., Path]


@pytest.fixture
def make_record() -> RecordFactory:
    """Return a factory for records with a hash derived from ``seed``."""

    def _make(seed: int, frecency: int = 0, file_size: int = 0, **fields: Any) -> CacheIndexRecord:
        return CacheIndexRecord(hash=bytes([seed]) * 20, frecency=frecency, file_size=file_size, **fields)

    return _make


@pytest.fixture
def make_profile(tmp_path: Path) -> ProfileFactory:
    """Return a factory that lays out ``<profile>/cache2`` with an index and entry files.

    Each record gets a backing file of exactly ``file_size`` bytes.
    """

    def _make(
        records: Sequence[CacheIndexRecord],
        *,
        version: int = SUPPORTED_INDEX_VERSION,
        is_dirty: int = 0,
        time_stamp: int = 1_700_000_000,
        name: str = "profile",
    ) -> Path:
        profile = tmp_path / name
        entries = profile / "cache2" / "entries"
        entries.mkdir(parents=True)
        for record in records:
            (entries / record.entry_name).write_bytes(b"\0" * record.file_size)
        header = CacheIndexHeader(version=version, time_stamp=time_stamp, is_dirty=is_dirty)
        write_index(profile / "cache2" / "index", CacheIndex(header=header, records=tuple(records)))
        return profile

    return _make
