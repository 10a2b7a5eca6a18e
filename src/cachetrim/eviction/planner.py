"""Greedy least-frecency-first eviction planning."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence

from cachetrim.accounting import to_kilobytes
from cachetrim.exceptions import EvictionExhaustedError
from cachetrim.model import CacheIndexRecord, EvictionPlan

logger = logging.getLogger(__name__)


def plan_eviction(
    records: Sequence[CacheIndexRecord],
    *,
    target_kb: int,
    current_size: int | None = None,
    exempt_pinned: bool = False,
) -> EvictionPlan:
    """Select the lowest-frecency records to drop until the cache fits ``target_kb``.

    ``current_size`` is the measured cache size in bytes; when omitted the sum
    of the records' ``file_size`` is used. Victims are taken one at a time from
    the low end of the frecency ranking and eviction stops as soon as the
    running size, in truncated kilobytes, is at or below the target. This is
    greedy and makes no attempt at an optimal subset.

    Pinned records are ranked like any other unless ``exempt_pinned`` is set.

    Raises:
        EvictionExhaustedError: every candidate was evicted and the cache is
            still over the target.
    """
    if target_kb < 0:
        raise ValueError(f"target_kb must be non-negative, got {target_kb}")

    total = current_size if current_size is not None else sum(record.file_size for record in records)
    if to_kilobytes(total) <= target_kb:
        logger.debug("Cache is %d KB, within target of %d KB", to_kilobytes(total), target_kb)
        return EvictionPlan(keep=tuple(records), evict=(), initial_size=total, final_size=total)

    protected = [record for record in records if exempt_pinned and record.is_pinned]
    ranked = deque(
        sorted(
            (record for record in records if not (exempt_pinned and record.is_pinned)),
            key=lambda record: record.frecency,
        )
    )

    evicted: list[CacheIndexRecord] = []
    remaining = total
    while to_kilobytes(remaining) > target_kb:
        if not ranked:
            raise EvictionExhaustedError(to_kilobytes(remaining), target_kb)
        victim = ranked.popleft()
        evicted.append(victim)
        remaining = max(remaining - victim.file_size, 0)

    logger.info(
        "Planned eviction of %d of %d records: %d KB -> %d KB (target %d KB)",
        len(evicted),
        len(records),
        to_kilobytes(total),
        to_kilobytes(remaining),
        target_kb,
    )
    return EvictionPlan(
        keep=tuple(ranked) + tuple(protected),
        evict=tuple(evicted),
        initial_size=total,
        final_size=remaining,
    )
