"""
Character grids as NumPy arrays.

Maps each input character to a small integer code and counts neighbours by
padding the grid with zeros and summing shifted slices, so no Python loop
runs over cells. Works for any number of dimensions.
"""

import itertools
from typing import Dict, List, Tuple

import numpy as np


def parse_grid(text: str, codes: Dict[str, int]) -> np.ndarray:
    """
    Convert a rectangular character grid to an int array.

    Args:
        text: Lines of equal length
        codes: Dict mapping character → integer code

    Returns:
        Array of shape (H, W), dtype int8

    Raises:
        ValueError: on an unknown character or ragged rows
    """
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("Empty grid")

    W = len(rows[0])
    grid = np.zeros((len(rows), W), dtype=np.int8)
    for r, row in enumerate(rows):
        if len(row) != W:
            raise ValueError(f"Row {r} has length {len(row)}, expected {W}")
        for c, ch in enumerate(row):
            if ch not in codes:
                raise ValueError(f"Unknown grid character {ch!r} at row {r}")
            grid[r, c] = codes[ch]
    return grid


def neighbour_offsets(ndim: int) -> List[Tuple[int, ...]]:
    """All 3**ndim - 1 offsets in {-1, 0, 1}^ndim except the origin."""
    return [
        offset for offset in itertools.product((-1, 0, 1), repeat=ndim)
        if any(offset)
    ]


def count_neighbours(active: np.ndarray) -> np.ndarray:
    """
    Count active Moore neighbours of every cell.

    Cells outside the grid count as inactive.

    Args:
        active: Boolean or 0/1 array of any dimension

    Returns:
        Int array of the same shape with neighbour counts
    """
    A = np.asarray(active, dtype=np.int32)
    A_pad = np.pad(A, pad_width=1, mode='constant', constant_values=0)

    counts = np.zeros(A.shape, dtype=np.int32)
    for offset in neighbour_offsets(A.ndim):
        # A_pad[1+d : 1+d+n] along each axis is A shifted by d
        window = tuple(
            slice(1 + d, 1 + d + n) for d, n in zip(offset, A.shape)
        )
        counts += A_pad[window]
    return counts
