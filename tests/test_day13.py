"""Tests for day 13 (Shuttle Search)."""

import pytest

from aoc2020 import day13
from aoc2020.congruence import NoInverseError

EXAMPLE = "939\n7,13,x,x,59,x,31,19\n"


class TestShuttleSearch:

    def test_parse(self):
        notes = day13.parse(EXAMPLE)
        assert notes.earliest == 939
        assert notes.schedule == [7, 13, None, None, 59, None, 31, 19]

    def test_part1(self):
        assert day13.part1(day13.parse(EXAMPLE)) == 295

    def test_part1_bus_leaving_now(self):
        """A bus departing exactly at the timestamp means no wait."""
        assert day13.part1(day13.parse("14\n7,5\n")) == 0

    def test_part2(self):
        assert day13.part2(day13.parse(EXAMPLE)) == 1068781

    def test_missing_schedule_line(self):
        with pytest.raises(ValueError):
            day13.parse("939\n")

    def test_malformed_timestamp(self):
        with pytest.raises(ValueError):
            day13.parse("soon\n7,13\n")

    def test_not_coprime_schedule(self):
        with pytest.raises(NoInverseError):
            day13.part2(day13.parse("0\n4,x,6\n"))
