"""Tests for grid parsing and N-D neighbour counting."""

import numpy as np
import pytest

from aoc2020.grid import count_neighbours, neighbour_offsets, parse_grid


class TestParseGrid:

    def test_codes(self):
        grid = parse_grid("#.\n.#\n", {".": 0, "#": 1})
        np.testing.assert_array_equal(grid, [[1, 0], [0, 1]])

    def test_ragged_rows(self):
        with pytest.raises(ValueError):
            parse_grid("##\n#\n", {".": 0, "#": 1})

    def test_empty(self):
        with pytest.raises(ValueError):
            parse_grid("\n\n", {".": 0})


class TestNeighbours:

    @pytest.mark.parametrize("ndim,count", [(1, 2), (2, 8), (3, 26), (4, 80)])
    def test_offset_count(self, ndim, count):
        offsets = neighbour_offsets(ndim)
        assert len(offsets) == count
        assert (0,) * ndim not in offsets

    def test_center_of_full_block(self):
        counts = count_neighbours(np.ones((3, 3), dtype=bool))
        assert counts[1, 1] == 8
        assert counts[0, 0] == 3
        assert counts[0, 1] == 5

    def test_cell_does_not_count_itself(self):
        grid = np.zeros((3, 3, 3), dtype=bool)
        grid[1, 1, 1] = True
        counts = count_neighbours(grid)
        assert counts[1, 1, 1] == 0
        assert counts.sum() == 26

    def test_matches_brute_force(self):
        rng = np.random.default_rng(7)
        grid = rng.random((5, 6)) < 0.4
        counts = count_neighbours(grid)
        H, W = grid.shape
        for r in range(H):
            for c in range(W):
                expected = sum(
                    grid[r + dr, c + dc]
                    for dr, dc in neighbour_offsets(2)
                    if 0 <= r + dr < H and 0 <= c + dc < W
                )
                assert counts[r, c] == expected
