"""
Day 10: Adapter Array

Adapters accept 1-3 jolts lower than their rating. The chain runs from the
outlet (0) through every adapter to the device (max + 3).
  - part 1: (#1-jolt differences) * (#3-jolt differences)
  - part 2: number of distinct arrangements, counted by memoized recursion
"""

from functools import lru_cache
from typing import List

import numpy as np

from aoc2020.inputs import ints

TITLE = "Adapter Array"
MAX_STEP = 3


def parse(text: str) -> List[int]:
    """Sorted chain including the outlet and the built-in device adapter."""
    adapters = ints(text)
    if not adapters:
        raise ValueError("No adapters")
    return sorted(adapters + [0, max(adapters) + MAX_STEP])


def joltage_differences(chain: List[int]) -> int:
    diffs = np.diff(np.asarray(chain, dtype=np.int64))
    if np.any(diffs > MAX_STEP):
        raise ValueError("Chain has a gap larger than 3 jolts")
    return int(np.sum(diffs == 1)) * int(np.sum(diffs == 3))


def count_arrangements(chain: List[int]) -> int:
    """
    Number of ways to get from chain[0] to chain[-1].

    ways(i) sums ways(j) for every later adapter j within 3 jolts of i.
    """
    n = len(chain)

    @lru_cache(maxsize=None)
    def ways(index: int) -> int:
        if index == n - 1:
            return 1
        count = 0
        j = index + 1
        while j < n and chain[j] - chain[index] <= MAX_STEP:
            count += ways(j)
            j += 1
        return count

    return ways(0)


def part1(chain: List[int]) -> int:
    return joltage_differences(chain)


def part2(chain: List[int]) -> int:
    return count_arrangements(chain)
