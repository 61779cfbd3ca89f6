"""
Sort length errors.
"""

from __future__ import annotations

from typing import Sized

INVALID_LENGTH_MESSAGE = "The length of `x` is not a power of two. (x.len(): {length})"


class InvalidLengthError(ValueError):
    """
    Raised when a validating sort entry point receives a sequence whose
    length is not a power of two.  Raised before any element is moved.
    """

    def __init__(self, actual_length: int, message: str | None = None) -> None:
        if message is None:
            message = INVALID_LENGTH_MESSAGE.format(length=actual_length)
        super().__init__(message)
        self.actual_length = actual_length


def is_power_of_two(n: int) -> bool:
    """True for 0, 1 and every 2**k.  Zero is accepted as the empty no-op."""
    return n >= 0 and (n & (n - 1)) == 0


def check_length(x: Sized) -> int:
    """Return ``len(x)``, raising InvalidLengthError if it is not a power of two."""
    n = len(x)
    if not is_power_of_two(n):
        raise InvalidLengthError(n)
    return n
