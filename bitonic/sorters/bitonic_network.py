"""
Bitonic Network
===============
The fixed compare/exchange schedule of the bitonic sort, made explicit.

For n = 2**k the network has k*(k+1)/2 passes.  Pass (stage, step) pairs
index i with i + step whenever bit ``step`` of i is clear; the pair sorts
ascending when bit ``stage`` of i is clear.  Within one pass no index
appears twice, which is what lets a pass run fully in parallel.

Running the passes in order gives exactly the result of the recursive
``bitonic_sort.sort_by``: the recursive version runs the same exchanges,
only interleaved across disjoint ranges.
"""

from __future__ import annotations

from typing import Any, Iterator, List, MutableSequence, NamedTuple, Sequence, Tuple

from bitonic.sorters.comparators import Comparator
from bitonic.sorters.sort_errors import InvalidLengthError, check_length, is_power_of_two


class CompareExchange(NamedTuple):
    """One comparator of the network: order x[low], x[high]."""
    low: int
    high: int
    ascending: bool


Pass = List[CompareExchange]


def stages(n: int) -> Iterator[Tuple[int, int]]:
    """Yield (stage, step) for every pass, in execution order."""
    stage = 2
    while stage <= n:
        step = stage // 2
        while step > 0:
            yield stage, step
            step //= 2
        stage *= 2


def _pass_pairs(n: int, stage: int, step: int) -> Iterator[CompareExchange]:
    for i in range(n):
        partner = i ^ step
        if partner > i:
            yield CompareExchange(i, partner, (i & stage) == 0)


def network_passes(n: int) -> List[Pass]:
    """
    Return the schedule for a length-n input as a list of passes.

    Raises InvalidLengthError when n is not a power of two.
    """
    if not is_power_of_two(n):
        raise InvalidLengthError(n)
    return [list(_pass_pairs(n, stage, step)) for stage, step in stages(n)]


def comparator_count(n: int) -> int:
    """Number of compare/exchange operations the network performs on length n."""
    if not is_power_of_two(n):
        raise InvalidLengthError(n)
    if n <= 1:
        return 0
    k = n.bit_length() - 1
    return (n // 2) * k * (k + 1) // 2


def is_disjoint(pass_: Sequence[CompareExchange]) -> bool:
    """True when no index is used by two comparators of the pass."""
    seen = set()
    for low, high, _ in pass_:
        if low in seen or high in seen:
            return False
        seen.add(low)
        seen.add(high)
    return True


def compare_exchange(x: MutableSequence[Any], op: CompareExchange, comparator: Comparator) -> bool:
    """Apply one comparator to x.  Returns True if the pair was exchanged."""
    low, high, ascending = op
    verdict = comparator(x[low], x[high])
    if (verdict > 0) if ascending else (verdict < 0):
        x[low], x[high] = x[high], x[low]
        return True
    return False


def apply_network(x: MutableSequence[Any], comparator: Comparator) -> None:
    """
    Iterative bitonic sort: run every pass over x in order, no recursion.

    Same contract as ``bitonic_sort.sort_by``: ascending per comparator,
    in place, InvalidLengthError before any exchange on a bad length.
    """
    n = check_length(x)
    for stage, step in stages(n):
        for op in _pass_pairs(n, stage, step):
            compare_exchange(x, op, comparator)
