"""
Stable partitioning over a small closed integer range.

`radix_sort` only needs a callable matching `StablePartitioner`; the counting
sort below is the default one.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Protocol

from .errors import RangeError


class StablePartitioner(Protocol):
    def __call__(
        self,
        objects: MutableSequence[Any],
        lo: int,
        hi: int,
        key: Callable[[Any], int],
    ) -> None:
        """Reorder `objects` in place by key, keeping equal keys in input order."""
        ...


def counting_sort(
    objects: MutableSequence[Any], lo: int, hi: int, key: Callable[[Any], int]
) -> None:
    """Counting sort by key over [lo, hi]. Raises RangeError before touching `objects`."""
    if lo > hi:
        raise ValueError(f"empty key range [{lo}, {hi}]")

    n = len(objects)
    keys = [key(obj) for obj in objects]
    for k in keys:
        if not lo <= k <= hi:
            raise RangeError(k, lo, hi)

    # one slot per key value in [lo, hi]
    C = [0] * (hi - lo + 1)
    output = [None] * n

    # 1) Count frequency of each key
    for k in keys:
        C[k - lo] += 1

    # 2) Convert count to cumulative count
    for i in range(1, len(C)):
        C[i] += C[i - 1]

    # 3) Build the output array (RIGHT -> LEFT for stability)
    for i in range(n - 1, -1, -1):
        slot = keys[i] - lo
        output[C[slot] - 1] = objects[i]
        C[slot] -= 1

    # 4) Copy back
    for i in range(n):
        objects[i] = output[i]
