"""Generic LSD radix sort keyed by an integer projection."""

from .counting_sort import StablePartitioner, counting_sort
from .digits import get_digit, num_digits
from .errors import EmptyInputError, RadixSortError, RangeError
from .extrema import find_min_max
from .sequential_radix import radix_sort

__all__ = [
    "EmptyInputError",
    "RadixSortError",
    "RangeError",
    "StablePartitioner",
    "counting_sort",
    "find_min_max",
    "get_digit",
    "num_digits",
    "radix_sort",
]

__version__ = "0.1.0"
