"""Tests for day 6 (Custom Customs)."""

from aoc2020 import day06

EXAMPLE = """\
abc

a
b
c

ab
ac

a
a
a
a

b
"""


class TestCustomCustoms:

    def test_parse_groups(self):
        assert day06.parse(EXAMPLE)[1] == ["a", "b", "c"]

    def test_union(self):
        assert day06.group_union(["abc", "bc", "adc"]) == {"a", "b", "c", "d"}

    def test_intersection(self):
        assert day06.group_intersection(["abc", "ac", "a"]) == {"a"}
        assert day06.group_intersection(["xy", "zyx", "aybx"]) == {"x", "y"}

    def test_part1(self):
        assert day06.part1(day06.parse(EXAMPLE)) == 11

    def test_part2(self):
        assert day06.part2(day06.parse(EXAMPLE)) == 6
