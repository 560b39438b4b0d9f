"""
Day 9: Encoding Error

XMAS data: every number after the preamble must be the sum of two distinct
numbers among the previous `preamble` numbers.
"""

from collections import deque
from typing import List

from aoc2020.inputs import ints

TITLE = "Encoding Error"
PREAMBLE = 25


def parse(text: str) -> List[int]:
    return ints(text)


def has_pair_sum(window: List[int], total: int) -> bool:
    seen = set()
    for n in window:
        if total - n in seen:
            return True
        seen.add(n)
    return False


def find_invalid(numbers: List[int], preamble: int = PREAMBLE) -> int:
    """
    First number that is not a sum of two entries of its window at different positions.

    Raises:
        ValueError: if every number is valid
    """
    window = deque(numbers[:preamble], maxlen=preamble)
    for n in numbers[preamble:]:
        if not has_pair_sum(list(window), n):
            return n
        window.append(n)
    raise ValueError("No invalid number found")


def find_weakness(numbers: List[int], target: int) -> int:
    """
    min + max of a contiguous range of at least two numbers summing to target.

    Two-pointer scan; assumes non-negative numbers.

    Raises:
        ValueError: if no such range exists
    """
    lo = 0
    total = 0
    for hi, n in enumerate(numbers):
        total += n
        while total > target and lo < hi:
            total -= numbers[lo]
            lo += 1
        if total == target and hi - lo >= 1:
            span = numbers[lo:hi + 1]
            return min(span) + max(span)
    raise ValueError(f"No contiguous range sums to {target}")


def part1(numbers: List[int], preamble: int = PREAMBLE) -> int:
    return find_invalid(numbers, preamble)


def part2(numbers: List[int], preamble: int = PREAMBLE) -> int:
    return find_weakness(numbers, find_invalid(numbers, preamble))
