# running_median.py
from __future__ import annotations

"""
Running median of a stream of numbers

What this file does:
- RunningMedian: two heaps, balanced on every add, so find_median is O(1)
- Benchmark (python running_median.py): streams random 16-bit ints and
  reports the final median and the elapsed time

Design notes:
- heapq only has a min-heap, so the lower half is stored negated.
- The upper half always holds the extra element when the count is odd.
- find_median on an empty stream returns 0.0.
"""

import heapq
import logging
import os
import time
from typing import Any, Dict, List

import numpy as np

from nth_from_back import env_int

logger = logging.getLogger(__name__)


class RunningMedian:
    def __init__(self):
        # max-heap of the lower half (negated values)
        self.lower: List[float] = []
        # min-heap of the upper half
        self.upper: List[float] = []

    def __len__(self) -> int:
        return len(self.lower) + len(self.upper)

    def add(self, num: float) -> None:
        if len(self.lower) == len(self.upper):
            # route through the lower half so upper gets the largest of the low side
            heapq.heappush(self.upper, -heapq.heappushpop(self.lower, -num))
        else:
            heapq.heappush(self.lower, -heapq.heappushpop(self.upper, num))

    def find_median(self) -> float:
        if len(self.lower) == len(self.upper):
            if not self.upper:
                return 0.0
            return (-self.lower[0] + self.upper[0]) / 2.0
        return float(self.upper[0])


# -----------------------------
# Benchmark
# -----------------------------

def run_benchmark(size: int = 1_000_000, seed: int = 7) -> Dict[str, Any]:
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")

    rng = np.random.default_rng(seed)
    # i16 range keeps the even-count average well inside float precision
    nums = rng.integers(-32768, 32768, size=size).tolist()

    running = RunningMedian()
    medians: List[float] = []

    start = time.perf_counter()
    for num in nums:
        running.add(num)
        medians.append(running.find_median())
    elapsed = time.perf_counter() - start

    logger.debug("streamed %d numbers in %.3fs", size, elapsed)
    return {
        "size": size,
        "median": running.find_median(),
        "seconds": elapsed,
        "medians": medians,
    }


def main() -> None:
    logging.basicConfig(
        level=os.getenv("NTH_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    out = run_benchmark(
        size=env_int("MEDIAN_BENCHMARK_SIZE", 1_000_000),
        seed=env_int("MEDIAN_BENCHMARK_SEED", 7),
    )
    print(f"Median: {out['median']}, {out['seconds']:.3f}s")


if __name__ == "__main__":
    main()
