"""
Sequential radix sort demo and benchmark.

Run with something like:
    radix-sort-bench --sizes 10000 100000 --verify
    radix-sort-bench --sample 20 --seed 1
"""

from __future__ import annotations

import argparse
import logging
import random
import time
from typing import List, Optional, Sequence

from .sequential_radix import radix_sort

logger = logging.getLogger(__name__)


def random_data(n: int, max_value: int, negative: bool = False) -> List[int]:
    lo = -max_value if negative else 0
    return [random.randint(lo, max_value) for _ in range(n)]


def show_sample(k: int, max_value: int, negative: bool = False) -> List[int]:
    """Print a small unsorted sample, sort it (passes are logged at DEBUG), print it sorted."""
    A = random_data(k, max_value, negative)
    print(f"\n=== Sample of {k} integers ===")
    print("Unsorted:", A)
    radix_sort(A)
    print("Sorted:  ", A)
    return A


def benchmark(sizes: Sequence[int], max_value: int, negative: bool = False, verify: bool = False) -> List[float]:
    """Time radix_sort for each input size; returns the timings in seconds."""
    print("\n=== Sequential Radix Sort Performance ===")
    timings = []
    for n in sizes:
        A = random_data(n, max_value, negative)
        expected = sorted(A) if verify else None

        start = time.perf_counter()
        radix_sort(A)
        elapsed = time.perf_counter() - start
        timings.append(elapsed)
        print(f"n = {n:>10,}  ->  time = {elapsed:.3f} s")

        if verify and A != expected:
            raise AssertionError(f"Result is not sorted correctly for n={n}")
    return timings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sequential radix sort demo")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10_000, 100_000], help="Input sizes to benchmark.")
    parser.add_argument("--max-value", type=int, default=10**9, help="Largest key magnitude to generate.")
    parser.add_argument("--negative", action="store_true", help="Also generate negative keys.")
    parser.add_argument("--sample", type=int, default=None, metavar="K", help="Show a sample of K integers instead of benchmarking.")
    parser.add_argument("--verify", action="store_true", help="Check every result against sorted().")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every digit pass.")
    args = parser.parse_args(argv)
    if args.max_value < 0:
        parser.error("--max-value must be >= 0")
    if args.sample is not None and args.sample < 0:
        parser.error("--sample must be >= 0")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    verbose = args.verbose or args.sample is not None
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.seed is not None:
        random.seed(args.seed)
        logger.info("seeded random with %d", args.seed)

    if args.sample is not None:
        show_sample(args.sample, args.max_value, args.negative)
    else:
        benchmark(args.sizes, args.max_value, args.negative, args.verify)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
