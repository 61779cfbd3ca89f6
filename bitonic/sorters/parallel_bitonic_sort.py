"""
Parallel Bitonic Sort
=====================
Runs the bitonic network on a thread pool.

Each pass is split into contiguous index ranges, one per worker, and
submitted to a ThreadPoolExecutor.  All chunks of a pass must finish before
the next pass starts.  A comparator of a pass pairs i with i ^ step, and
both indices are owned by the chunk holding i, so workers share the
sequence without any locking.

Only the current pass's bounds are held in memory; the schedule is never
materialized.

Under the GIL this does not beat the sequential sort for plain Python
objects; it exists to exercise the disjoint-pass contract and for
comparators that release the GIL.
"""

from __future__ import annotations

import concurrent.futures
from typing import Any, List, MutableSequence, Optional, Tuple

from bitonic.sorters.bitonic_network import stages
from bitonic.sorters.comparators import Comparator, Direction, natural_order
from bitonic.sorters.sort_config import resolve_max_workers
from bitonic.sorters.sort_errors import check_length


def parallel_sort_by(
    x: MutableSequence[Any],
    comparator: Comparator,
    max_workers: Optional[int] = None,
) -> None:
    """
    Sort *x* in place, ascending per *comparator*, using a thread pool.

    max_workers falls back to $BITONIC_MAX_WORKERS, then to 4.
    An exception raised by *comparator* propagates once the failing pass
    has drained; *x* may then be partially sorted.
    """
    n = check_length(x)
    if n <= 1:
        return

    workers = resolve_max_workers(max_workers)
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as pool:
        for stage, step in stages(n):
            futures = [
                pool.submit(_run_chunk, x, stage, step, start, stop, comparator)
                for start, stop in _chunk_bounds(n, step, workers)
            ]
            # Barrier: the next pass reads what this one wrote.
            for future in concurrent.futures.as_completed(futures):
                future.result()


def parallel_sort(
    x: MutableSequence[Any],
    order: Direction = Direction.ASCENDING,
    max_workers: Optional[int] = None,
) -> None:
    parallel_sort_by(x, natural_order(order), max_workers=max_workers)


def _chunk_bounds(n: int, step: int, parts: int) -> List[Tuple[int, int]]:
    """
    Split [0, n) into at most *parts* ranges aligned to 2*step blocks,
    so i and i ^ step always fall in the same range.
    """
    block = 2 * step
    blocks = n // block
    per_chunk = max(1, -(-blocks // parts)) * block
    return [(start, min(start + per_chunk, n)) for start in range(0, n, per_chunk)]


def _run_chunk(x, stage: int, step: int, start: int, stop: int, comparator: Comparator) -> int:
    exchanges = 0
    for i in range(start, stop):
        j = i ^ step
        if j <= i:
            continue
        verdict = comparator(x[i], x[j])
        if (verdict > 0) if (i & stage) == 0 else (verdict < 0):
            x[i], x[j] = x[j], x[i]
            exchanges += 1
    return exchanges
