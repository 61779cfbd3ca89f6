"""
Comparators
===========
Ordering verdicts and the comparator constructors used by the bitonic engine.

A comparator is any callable ``(a, b) -> int`` whose sign gives the verdict:
negative for "a before b", zero for "equal", positive for "a after b".
``Ordering`` members satisfy that contract, so do ``functools.cmp_to_key``
style functions.

Comparators must be pure and describe a total order.  Nothing here checks
that; an inconsistent comparator yields an unspecified permutation.
"""

from __future__ import annotations

import enum
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


class Direction(enum.Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class Ordering(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int) -> "Ordering":
        """Normalize any signed verdict to an Ordering member."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


def _ascending(a: Any, b: Any) -> Ordering:
    if a < b:
        return Ordering.LESS
    if b < a:
        return Ordering.GREATER
    return Ordering.EQUAL


def _descending(a: Any, b: Any) -> Ordering:
    return _ascending(b, a)


def natural_order(direction: Direction = Direction.ASCENDING) -> Comparator:
    """
    Comparator from the elements' own ``<``.

    ASCENDING keeps the natural order, DESCENDING inverts it.
    """
    if direction is Direction.ASCENDING:
        return _ascending
    if direction is Direction.DESCENDING:
        return _descending
    raise TypeError(f"direction must be a Direction, got {direction!r}")


def from_function(fn: Callable[[T, T], int]) -> Callable[[T, T], Ordering]:
    """Wrap a user comparison function so its result is always an Ordering."""

    def compare(a: T, b: T) -> Ordering:
        return Ordering.of(fn(a, b))

    return compare


def by_key(
    key: Callable[[T], Any],
    direction: Direction = Direction.ASCENDING,
) -> Callable[[T, T], Ordering]:
    """Compare elements on ``key(element)``, like ``sorted(..., key=...)``."""
    base = natural_order(direction)

    def compare(a: T, b: T) -> Ordering:
        return base(key(a), key(b))

    return compare


def then_with(first: Comparator, *rest: Comparator) -> Callable[[Any, Any], Ordering]:
    """
    Chain comparators lexicographically: later ones only break ties.

        by_name = then_with(by_key(lambda s: s.last_name),
                            by_key(lambda s: s.first_name))
    """
    chain = (first,) + rest

    def compare(a: Any, b: Any) -> Ordering:
        for comparator in chain:
            verdict = comparator(a, b)
            if verdict:
                return Ordering.of(verdict)
        return Ordering.EQUAL

    return compare
