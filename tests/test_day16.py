"""Tests for day 16 (Ticket Translation)."""

import pytest

from aoc2020 import day16

EXAMPLE = """\
class: 1-3 or 5-7
row: 6-11 or 33-44
seat: 13-40 or 45-50

your ticket:
7,1,14

nearby tickets:
7,3,47
40,4,50
55,2,20
38,6,12
"""

DEDUCTION = """\
class: 0-1 or 4-19
row: 0-5 or 8-19
seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9
"""


class TestTicketTranslation:

    def test_parse(self):
        notes = day16.parse(EXAMPLE)
        assert notes.rules["row"] == [(6, 11), (33, 44)]
        assert notes.ticket == [7, 1, 14]
        assert len(notes.nearby) == 4

    def test_part1(self):
        assert day16.part1(day16.parse(EXAMPLE)) == 71

    def test_valid_tickets(self):
        assert day16.valid_tickets(day16.parse(EXAMPLE)) == [[7, 3, 47]]

    def test_deduce_fields(self):
        notes = day16.parse(DEDUCTION)
        mapping = day16.deduce_fields(notes.rules, day16.valid_tickets(notes))
        assert mapping == {"row": 0, "class": 1, "seat": 2}

    def test_part2_prefix(self):
        notes = day16.parse(DEDUCTION)
        assert day16.part2(notes, prefix="seat") == 13
        assert day16.part2(notes, prefix="") == 11 * 12 * 13

    def test_ambiguous_fields(self):
        rules = {"a": [(0, 5), (0, 5)], "b": [(0, 5), (0, 5)]}
        with pytest.raises(ValueError):
            day16.deduce_fields(rules, [[1, 2]])

    def test_missing_sections(self):
        with pytest.raises(ValueError):
            day16.parse("class: 1-3 or 5-7\n")
