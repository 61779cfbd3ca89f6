"""
Bitonic Sort
============
Recursive bitonic sorting network over any mutable random-access sequence
(list, 1-D numpy array, ...).

The compare/exchange pattern depends only on the length, never on the data:
- construct: sort the left half ascending and the right half descending,
  which leaves a bitonic sequence, then merge it.
- merge: one compare-and-swap pass between element i and i + n/2, then
  merge each half with the same direction.

Every compare-and-swap pass touches disjoint index pairs, and the two halves
of a split touch disjoint ranges, so both may run concurrently.  This module
is the sequential reference; see parallel_bitonic_sort for the threaded one.

Ranges are (offset, length) windows over the caller's sequence.  No slice
copies or auxiliary buffers are made; all mutation is in-place exchange.
Not stable: equal elements may be reordered.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Optional

from bitonic.sorters.comparators import Comparator, Direction, Ordering, natural_order
from bitonic.sorters.sort_config import resolve_debug_mode
from bitonic.sorters.sort_errors import InvalidLengthError, check_length

DEBUG_MODE = resolve_debug_mode()


def sort(
    x: MutableSequence[Any],
    order: Direction = Direction.ASCENDING,
    *,
    debug: Optional[bool] = None,
) -> None:
    """
    Sort *x* in place by the elements' natural order.

    Raises
    ------
    InvalidLengthError
        If ``len(x)`` is not a power of two.  *x* is left untouched.
    """
    sort_by(x, natural_order(order), debug=debug)


def sort_by(
    x: MutableSequence[Any],
    comparator: Comparator,
    *,
    debug: Optional[bool] = None,
) -> None:
    """
    Sort *x* in place into ascending order as defined by *comparator*.

    Parameters
    ----------
    x : mutable sequence
        Length must be 0, 1 or a power of two.
    comparator : callable
        ``comparator(a, b)`` returning a negative, zero or positive verdict
        (an ``Ordering`` or any int).  Must be a pure total order.

    Raises
    ------
    InvalidLengthError
        If ``len(x)`` is not a power of two.  Checked before any exchange,
        so *x* is never partially sorted.
    """
    trace = DEBUG_MODE if debug is None else debug
    try:
        n = check_length(x)
    except InvalidLengthError as e:
        if trace:
            print(f"[BITONIC DEBUG] rejected: {e}")
        raise

    exchanges = _construct(x, 0, n, True, comparator)

    if trace:
        print(f"[BITONIC DEBUG] sorted n={n} exchanges={exchanges}")


def sort_unchecked(x: MutableSequence[Any], ascending: bool = True) -> None:
    """
    Sort *x* in place by natural order without validating its length.

    Intended for inputs already known to be power-of-two sized.  Any other
    length is accepted but the result may not be monotonic; prefer ``sort``.

    A pair is exchanged when ``(a > b) == ascending``, so descending passes
    also exchange equal elements.
    """
    _construct(x, 0, len(x), ascending, _greater_or_less)


def _greater_or_less(a: Any, b: Any) -> Ordering:
    # Never EQUAL: a descending pass then swaps on a <= b.
    return Ordering.GREATER if a > b else Ordering.LESS


def _construct(x, low: int, count: int, ascending: bool, comparator: Comparator) -> int:
    """Build a bitonic sequence in x[low:low+count] and merge it. Returns exchanges made."""
    if count <= 1:
        return 0
    mid = count // 2
    exchanges = _construct(x, low, mid, True, comparator)
    exchanges += _construct(x, low + mid, count - mid, False, comparator)
    return exchanges + _merge(x, low, count, ascending, comparator)


def _merge(x, low: int, count: int, ascending: bool, comparator: Comparator) -> int:
    if count <= 1:
        return 0
    mid = count // 2
    exchanges = _compare_and_swap(x, low, count, ascending, comparator)
    exchanges += _merge(x, low, mid, ascending, comparator)
    exchanges += _merge(x, low + mid, count - mid, ascending, comparator)
    return exchanges


def _compare_and_swap(x, low: int, count: int, ascending: bool, comparator: Comparator) -> int:
    """
    One pass: compare x[i] with x[i + count//2] for every i in the first half.

    Pairs never share an index, so the loop body is order independent.
    """
    mid = count // 2
    exchanges = 0
    for i in range(low, low + mid):
        j = i + mid
        verdict = comparator(x[i], x[j])
        if (verdict > 0) if ascending else (verdict < 0):
            x[i], x[j] = x[j], x[i]
            exchanges += 1
    return exchanges
