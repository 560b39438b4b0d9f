"""Tests for day 15 (Rambunctious Recitation)."""

import pytest

from aoc2020 import day15


class TestMemoryGame:

    def test_parse(self):
        assert day15.parse("0,3,6\n") == [0, 3, 6]

    def test_first_turns(self):
        """0,3,6 continues 0,3,3,1,0,4,0."""
        spoken = [day15.play([0, 3, 6], turn) for turn in range(1, 11)]
        assert spoken == [0, 3, 6, 0, 3, 3, 1, 0, 4, 0]

    @pytest.mark.parametrize("start,expected", [
        ([0, 3, 6], 436),
        ([1, 3, 2], 1),
        ([2, 1, 3], 10),
        ([1, 2, 3], 27),
        ([2, 3, 1], 78),
        ([3, 2, 1], 438),
        ([3, 1, 2], 1836),
    ])
    def test_part1(self, start, expected):
        assert day15.part1(start) == expected

    def test_large_starting_number(self):
        """Starting numbers above the turn count still fit the table."""
        assert day15.play([5000, 1], 4) == 0

    @pytest.mark.slow
    def test_part2(self):
        assert day15.part2([0, 3, 6]) == 175594

    def test_turn_before_first(self):
        with pytest.raises(ValueError):
            day15.play([0, 3, 6], 0)

    def test_empty_start(self):
        with pytest.raises(ValueError):
            day15.parse("\n")
