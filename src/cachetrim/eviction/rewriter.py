"""Deletion of evicted entries and index rewrite."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from cachetrim.constants.layout import ENTRIES_DIRNAME, INDEX_FILENAME
from cachetrim.exceptions import EntryRemovalError
from cachetrim.index import write_index
from cachetrim.model import CacheIndex, CacheIndexHeader, CacheIndexRecord, EvictionPlan

logger = logging.getLogger(__name__)

PathReporter = Callable[[Path], None]


def entry_path(cache_root: Path, record: CacheIndexRecord) -> Path:
    """Return the backing payload file of a record."""
    return cache_root / ENTRIES_DIRNAME / record.entry_name


def victim_paths(cache_root: Path, plan: EvictionPlan) -> tuple[Path, ...]:
    """Return backing file paths of the plan's victims in eviction order."""
    return tuple(entry_path(cache_root, record) for record in plan.evict)


def apply_plan(
    cache_root: Path,
    header: CacheIndexHeader,
    plan: EvictionPlan,
    *,
    report: PathReporter | None = None,
) -> tuple[Path, ...]:
    """Delete every victim's file, then rewrite the index with the survivors.

    Each path is passed to ``report`` before it is deleted. The first failed
    deletion aborts the run and the index is left untouched, so the survivor
    set written here always matches the files still on disk. The header is
    written back verbatim.
    """
    if plan.is_noop:
        return ()

    deleted: list[Path] = []
    for path in victim_paths(cache_root, plan):
        if report is not None:
            report(path)
        try:
            path.unlink()
        except OSError as exc:
            raise EntryRemovalError(path, exc.strerror or str(exc)) from exc
        logger.debug("Removed cache entry %s", path)
        deleted.append(path)

    write_index(cache_root / INDEX_FILENAME, CacheIndex(header=header, records=plan.keep))
    logger.info("Rewrote index with %d surviving records", len(plan.keep))
    return tuple(deleted)
