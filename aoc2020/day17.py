"""
Day 17: Conway Cubes

Game-of-life style automaton in N dimensions, seeded by a 2D slice:
  - an active cube stays active with 2 or 3 active neighbours
  - an inactive cube becomes active with exactly 3 active neighbours
Neighbours are the 3**N - 1 cells differing by at most 1 on every axis.

The grid grows by one cell on every side per cycle, which is as far as
activity can spread, so the boundary never clips the pattern.
"""

import logging

import numpy as np

from aoc2020.grid import count_neighbours, parse_grid

TITLE = "Conway Cubes"
CYCLES = 6

INACTIVE, ACTIVE = 0, 1


def parse(text: str) -> np.ndarray:
    return parse_grid(text, {".": INACTIVE, "#": ACTIVE}).astype(bool)


def embed(initial: np.ndarray, dimensions: int) -> np.ndarray:
    """Lift a 2D (y, x) slice into `dimensions` axes with extent 1."""
    if dimensions < initial.ndim:
        raise ValueError(f"Cannot embed a {initial.ndim}D slice in {dimensions}D")
    return initial.reshape(initial.shape + (1,) * (dimensions - initial.ndim))


def cycle(active: np.ndarray) -> np.ndarray:
    """Grow the space by one on every side and apply one round of rules."""
    grown = np.pad(active, pad_width=1, mode='constant', constant_values=False)
    counts = count_neighbours(grown)
    survive = grown & ((counts == 2) | (counts == 3))
    born = ~grown & (counts == 3)
    return survive | born


def simulate(initial: np.ndarray, dimensions: int, cycles: int = CYCLES) -> np.ndarray:
    active = embed(np.asarray(initial, dtype=bool), dimensions)
    for i in range(cycles):
        active = cycle(active)
        logging.debug(f"{dimensions}D cycle {i + 1}: {int(active.sum())} active")
    return active


def part1(initial: np.ndarray, cycles: int = CYCLES) -> int:
    return int(simulate(initial, 3, cycles).sum())


def part2(initial: np.ndarray, cycles: int = CYCLES) -> int:
    return int(simulate(initial, 4, cycles).sum())
