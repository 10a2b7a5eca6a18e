"""Tests for cache size accounting."""

from __future__ import annotations

from pathlib import Path

import pytest

from cachetrim.accounting import cache_root_for, measure_entries, to_kilobytes
from cachetrim.exceptions import CacheLayoutError


def test_measure_entries_sums_file_lengths(tmp_path: Path) -> None:
    entries = tmp_path / "entries"
    entries.mkdir()
    (entries / "A").write_bytes(b"x" * 1000)
    (entries / "B").write_bytes(b"x" * 2000)
    (entries / "C").write_bytes(b"")

    assert measure_entries(tmp_path) == 3000


def test_measure_entries_of_empty_directory_is_zero(tmp_path: Path) -> None:
    (tmp_path / "entries").mkdir()

    assert measure_entries(tmp_path) == 0


def test_measure_entries_rejects_subdirectory(tmp_path: Path) -> None:
    entries = tmp_path / "entries"
    (entries / "nested").mkdir(parents=True)
    (entries / "A").write_bytes(b"x")

    with pytest.raises(CacheLayoutError, match="unexpected directory"):
        measure_entries(tmp_path)


def test_measure_entries_requires_entries_directory(tmp_path: Path) -> None:
    with pytest.raises(CacheLayoutError, match="cannot measure"):
        measure_entries(tmp_path)


@pytest.mark.parametrize(
    ("size_bytes", "expected_kb"),
    [
        pytest.param(0, 0, id="zero"),
        pytest.param(1023, 0, id="below-one-kb"),
        pytest.param(1024, 1, id="exact-kb"),
        pytest.param(2047, 1, id="truncates"),
    ],
)
def test_to_kilobytes_truncates(size_bytes: int, expected_kb: int) -> None:
    assert to_kilobytes(size_bytes) == expected_kb


def test_cache_root_for_profile(tmp_path: Path) -> None:
    assert cache_root_for(tmp_path) == tmp_path / "cache2"
