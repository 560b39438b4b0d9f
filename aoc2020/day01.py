"""
Day 1: Report Repair

Find the entries of the expense report that sum to 2020 and multiply them.
"""

import itertools
import math
from typing import List, Tuple

from aoc2020.inputs import ints

TITLE = "Report Repair"
TARGET = 2020


def parse(text: str) -> List[int]:
    return ints(text)


def find_entries(numbers: List[int], count: int, target: int = TARGET) -> Tuple[int, ...]:
    """
    Find `count` distinct entries summing to target.

    Args:
        numbers: Expense report entries
        count: How many entries to combine
        target: Required sum

    Returns:
        The first matching combination (input order)

    Raises:
        ValueError: if no combination sums to target
    """
    for combo in itertools.combinations(numbers, count):
        if sum(combo) == target:
            return combo
    raise ValueError(f"No {count} entries sum to {target}")


def part1(numbers: List[int], target: int = TARGET) -> int:
    return math.prod(find_entries(numbers, 2, target))


def part2(numbers: List[int], target: int = TARGET) -> int:
    return math.prod(find_entries(numbers, 3, target))
