"""Exceptions raised by the radix sort package."""

from __future__ import annotations


class RadixSortError(Exception):
    """Base class for all radix sort errors."""


class EmptyInputError(RadixSortError, ValueError):
    """Raised when extrema are requested for an empty collection."""


class RangeError(RadixSortError, ValueError):
    """Raised when a partition key falls outside the allowed [lo, hi] range."""

    def __init__(self, key: int, lo: int, hi: int) -> None:
        super().__init__(f"key {key} outside range [{lo}, {hi}]")
        self.key = key
        self.lo = lo
        self.hi = hi
