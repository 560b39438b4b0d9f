"""Tests for day 1 (Report Repair)."""

import pytest

from aoc2020 import day01

EXAMPLE = """\
1721
979
366
299
675
1456
"""


class TestReportRepair:
    """Expense report pair and triple search."""

    def test_parse(self):
        assert day01.parse(EXAMPLE) == [1721, 979, 366, 299, 675, 1456]

    def test_find_pair(self):
        assert day01.find_entries(day01.parse(EXAMPLE), 2) == (1721, 299)

    def test_find_triple(self):
        assert sorted(day01.find_entries(day01.parse(EXAMPLE), 3)) == [366, 675, 979]

    def test_part1(self):
        assert day01.part1(day01.parse(EXAMPLE)) == 514579

    def test_part2(self):
        assert day01.part2(day01.parse(EXAMPLE)) == 241861950

    def test_entry_not_reused(self):
        """1010 alone must not pair with itself."""
        with pytest.raises(ValueError):
            day01.part1([1010, 1, 2])

    def test_custom_target(self):
        assert day01.part1([1, 2, 3], target=5) == 6

    def test_malformed_input(self):
        with pytest.raises(ValueError):
            day01.parse("12\nabc\n")
