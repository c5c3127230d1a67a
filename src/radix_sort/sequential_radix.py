"""
LSD radix sort over arbitrary elements keyed by an integer projection.

Time complexity O(d * (n + 10)), d being the number of decimal digits of the
largest key magnitude. Negative keys are handled by complementing their digits
(so larger magnitudes sort first) and finishing with one stable pass on sign.
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Callable, MutableSequence, Optional, TypeVar

from .counting_sort import StablePartitioner, counting_sort
from .digits import BASE, get_digit, num_digits
from .extrema import find_min_max

logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_DIGIT = 0
MAX_DIGIT = BASE - 1


def radix_sort(
    objects: MutableSequence[T],
    key: Optional[Callable[[T], int]] = None,
    partition: StablePartitioner = counting_sort,
) -> MutableSequence[T]:
    """Sort `objects` in place by `key` (identity by default) and return it."""
    if len(objects) <= 1:
        return objects

    if key is None:
        key = _identity

    min_value, max_value = find_min_max(objects, key)
    max_digits = num_digits(max(abs(min_value), abs(max_value)))
    logger.debug(
        "radix sort: n=%d min=%d max=%d digits=%d",
        len(objects), min_value, max_value, max_digits,
    )

    for digit in range(max_digits):
        partition(objects, MIN_DIGIT, MAX_DIGIT, _digit_key(key, digit))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("after digit %d: %s", digit, _preview(objects, key))

    if min_value < 0:
        partition(objects, 0, 1, lambda o: 0 if key(o) < 0 else 1)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("after sign pass: %s", _preview(objects, key))

    return objects


def _identity(x):
    return x


def _digit_key(key: Callable[[T], int], digit: int) -> Callable[[T], int]:
    def digit_key(o: T) -> int:
        value = key(o)
        d = get_digit(value, digit)
        return MAX_DIGIT - d if value < 0 else d

    return digit_key


def _preview(objects, key, limit: int = 20):
    keys = [key(o) for o in islice(objects, limit)]
    return keys if len(objects) <= limit else keys + ["..."]
