"""Tests for day 9 (Encoding Error)."""

import pytest

from aoc2020 import day09

EXAMPLE = [
    35, 20, 15, 25, 47, 40, 62, 55, 65, 95,
    102, 117, 150, 182, 127, 219, 299, 277, 309, 576,
]


class TestEncodingError:

    def test_find_invalid(self):
        assert day09.find_invalid(EXAMPLE, preamble=5) == 127

    def test_find_weakness(self):
        assert day09.find_weakness(EXAMPLE, 127) == 62

    def test_part2(self):
        assert day09.part2(EXAMPLE, preamble=5) == 62

    def test_pair_must_be_distinct(self):
        assert not day09.has_pair_sum([5, 1, 2], 10)
        assert day09.has_pair_sum([5, 1, 9], 10)

    def test_equal_values_at_different_positions(self):
        """Two 5s in the window sum to 10."""
        assert day09.has_pair_sum([5, 5, 1], 10)
        assert day09.find_invalid([5, 5, 1, 10, 100], preamble=3) == 100

    def test_preamble_of_25(self):
        """Numbers 1..25 then 26, 49, 100: 100 is the first invalid."""
        numbers = list(range(1, 26)) + [26, 49, 100]
        assert day09.part1(numbers) == 100

    def test_all_valid(self):
        with pytest.raises(ValueError):
            day09.find_invalid([1, 2, 3, 5, 8], preamble=2)

    def test_weakness_needs_two_numbers(self):
        with pytest.raises(ValueError):
            day09.find_weakness([1, 50, 3], 50)
