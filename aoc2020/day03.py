"""
Day 3: Toboggan Trajectory

Count trees ('#') hit when sliding down a map that repeats to the right.
"""

import math
from typing import Sequence, Tuple

import numpy as np

from aoc2020.grid import parse_grid

TITLE = "Toboggan Trajectory"

EMPTY, TREE = 0, 1
SLOPES: Tuple[Tuple[int, int], ...] = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def parse(text: str) -> np.ndarray:
    return parse_grid(text, {".": EMPTY, "#": TREE})


def count_trees(grid: np.ndarray, right: int, down: int) -> int:
    """
    Count trees on the path (0,0), (down, right), (2*down, 2*right), ...

    Columns wrap around modulo the map width.
    """
    H, W = grid.shape
    rows = np.arange(0, H, down)
    cols = (np.arange(rows.size) * right) % W
    return int(np.sum(grid[rows, cols] == TREE))


def part1(grid: np.ndarray) -> int:
    return count_trees(grid, 3, 1)


def part2(grid: np.ndarray, slopes: Sequence[Tuple[int, int]] = SLOPES) -> int:
    return math.prod(count_trees(grid, right, down) for right, down in slopes)
