"""Tests for day 2 (Password Philosophy)."""

import pytest

from aoc2020 import day02
from aoc2020.day02 import Entry

EXAMPLE = """\
1-3 a: abcde
1-3 b: cdefg
2-9 c: ccccccccc
"""


class TestPasswordPolicies:

    def test_parse_entry(self):
        assert day02.parse_entry("1-3 a: abcde") == Entry(1, 3, "a", "abcde")

    def test_part1(self):
        assert day02.part1(day02.parse(EXAMPLE)) == 2

    def test_part2(self):
        assert day02.part2(day02.parse(EXAMPLE)) == 1

    def test_position_policy_exactly_one(self):
        """Letter at both positions is invalid."""
        assert day02.is_valid_position(Entry(1, 3, "a", "abcde"))
        assert not day02.is_valid_position(Entry(1, 3, "b", "cdefg"))
        assert not day02.is_valid_position(Entry(2, 9, "c", "ccccccccc"))

    def test_position_beyond_password(self):
        assert day02.is_valid_position(Entry(1, 10, "a", "abc"))

    def test_malformed_entry(self):
        with pytest.raises(ValueError):
            day02.parse_entry("1-3 abcde")
