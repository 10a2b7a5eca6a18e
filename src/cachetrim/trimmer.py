"""Trim orchestration: measure, parse, plan, then evict."""

from __future__ import annotations

import logging
from pathlib import Path

from cachetrim.accounting import cache_root_for, measure_entries, to_kilobytes
from cachetrim.config import TrimConfig
from cachetrim.constants.index import SUPPORTED_INDEX_VERSION
from cachetrim.constants.layout import INDEX_FILENAME
from cachetrim.eviction import apply_plan, plan_eviction, victim_paths
from cachetrim.eviction.rewriter import PathReporter
from cachetrim.exceptions import DirtyIndexError, UnsupportedVersionError
from cachetrim.index import read_index
from cachetrim.model import CacheIndexHeader, TrimResult

logger = logging.getLogger(__name__)


def trim_cache(
    profile: Path,
    target_kb: int,
    *,
    config: TrimConfig | None = None,
    dry_run: bool = False,
    report: PathReporter | None = None,
) -> TrimResult:
    """Bring a profile's HTTP cache down to ``target_kb`` kilobytes.

    Nothing is read beyond the entries directory when the cache already fits.
    The index is checked for the dirty flag and the supported version before
    anything is deleted. In a dry run victims are reported but nothing is
    modified.
    """
    config = config or TrimConfig()
    cache_root = cache_root_for(profile)

    measured = measure_entries(cache_root)
    measured_kb = to_kilobytes(measured)
    if measured_kb <= target_kb:
        logger.info("Cache is %d KB, target %d KB: nothing to do", measured_kb, target_kb)
        return TrimResult(
            profile=profile,
            target_kb=target_kb,
            measured_kb=measured_kb,
            final_kb=measured_kb,
            dry_run=dry_run,
        )

    index = read_index(
        cache_root / INDEX_FILENAME,
        strict=config.strict_index,
        check_header=check_header,
    )

    plan = plan_eviction(
        index.records,
        target_kb=target_kb,
        current_size=measured,
        exempt_pinned=config.exempt_pinned,
    )

    if dry_run:
        deleted = victim_paths(cache_root, plan)
        if report is not None:
            for path in deleted:
                report(path)
    else:
        deleted = apply_plan(cache_root, index.header, plan, report=report)

    return TrimResult(
        profile=profile,
        target_kb=target_kb,
        measured_kb=measured_kb,
        final_kb=plan.final_kb,
        deleted=deleted,
        dry_run=dry_run,
    )


def check_header(header: CacheIndexHeader) -> None:
    """Refuse to touch an index that is owned by a live process or has an unknown format."""
    if header.dirty:
        raise DirtyIndexError()
    if header.version != SUPPORTED_INDEX_VERSION:
        raise UnsupportedVersionError(header.version)
