"""
Test-data helpers: reproducible random vectors and sortedness checks.
"""

from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np

U32_LIMIT = 2 ** 32


def new_u32_vec(n: int, seed: int = 0) -> List[int]:
    """
    Return *n* uniformly distributed unsigned 32-bit integers.

    Uses numpy's PCG64 generator, so a given (n, seed) always yields the
    same list.  Values are plain Python ints.
    """
    rng = np.random.default_rng(seed)
    return rng.integers(0, U32_LIMIT, size=n, dtype=np.uint32).tolist()


def is_sorted_ascending(x: Sequence[Any]) -> bool:
    return all(x[i] <= x[i + 1] for i in range(len(x) - 1))


def is_sorted_descending(x: Sequence[Any]) -> bool:
    return all(x[i] >= x[i + 1] for i in range(len(x) - 1))
