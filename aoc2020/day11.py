"""
Day 11: Seating System

A cellular automaton on the seat layout, iterated until nothing changes:
  - an empty seat with no occupied neighbours becomes occupied
  - an occupied seat with too many occupied neighbours becomes empty
Part 1 counts the 8 adjacent cells (threshold 4); part 2 counts the first
seat visible in each of the 8 directions (threshold 5).
"""

import logging
from typing import Callable

import numpy as np

from aoc2020.grid import count_neighbours, neighbour_offsets, parse_grid

TITLE = "Seating System"

FLOOR, EMPTY, OCCUPIED = 0, 1, 2
CODES = {".": FLOOR, "L": EMPTY, "#": OCCUPIED}


def parse(text: str) -> np.ndarray:
    return parse_grid(text, CODES)


def visible_counter(grid: np.ndarray) -> Callable[[np.ndarray], np.ndarray]:
    """
    Counter of occupied seats among the first seat seen in each direction.

    The seat layout never changes, so the first visible seat of every cell in
    every direction is resolved once into a (H*W, 8) table of flat indices;
    H*W marks "no seat" and points at an always-empty sentinel.
    """
    H, W = grid.shape
    sentinel = H * W
    visible = np.full((H * W, 8), sentinel, dtype=np.int64)

    for d, (dr, dc) in enumerate(neighbour_offsets(2)):
        for r in range(H):
            for c in range(W):
                rr, cc = r + dr, c + dc
                while 0 <= rr < H and 0 <= cc < W:
                    if grid[rr, cc] != FLOOR:
                        visible[r * W + c, d] = rr * W + cc
                        break
                    rr += dr
                    cc += dc

    def count(occupied: np.ndarray) -> np.ndarray:
        occ_ext = np.append(occupied.ravel().astype(np.int32), 0)
        return occ_ext[visible].sum(axis=1).reshape(H, W)

    return count


def step(grid: np.ndarray, counter: Callable[[np.ndarray], np.ndarray], threshold: int) -> np.ndarray:
    """Apply one round of the seating rules."""
    counts = counter(grid == OCCUPIED)
    new_grid = grid.copy()
    new_grid[(grid == EMPTY) & (counts == 0)] = OCCUPIED
    new_grid[(grid == OCCUPIED) & (counts >= threshold)] = EMPTY
    return new_grid


def settle(grid: np.ndarray, counter: Callable[[np.ndarray], np.ndarray], threshold: int) -> np.ndarray:
    """Iterate the rules until the layout stops changing."""
    rounds = 0
    while True:
        new_grid = step(grid, counter, threshold)
        rounds += 1
        if np.array_equal(new_grid, grid):
            logging.debug(f"Seating stable after {rounds} rounds")
            return grid
        grid = new_grid


def part1(grid: np.ndarray) -> int:
    final = settle(grid, count_neighbours, 4)
    return int(np.sum(final == OCCUPIED))


def part2(grid: np.ndarray) -> int:
    final = settle(grid, visible_counter(grid), 5)
    return int(np.sum(final == OCCUPIED))
