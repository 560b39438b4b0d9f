"""
Day 13: Shuttle Search

Input: line 1 is the earliest departure timestamp, line 2 the bus schedule
("x" = no constraint at that position).
  - part 1: earliest bus after the timestamp, id * minutes waited
  - part 2: earliest timestamp t where the bus at position i leaves at t + i,
    solved with the congruence solver
"""

from typing import List, NamedTuple, Optional

from aoc2020.congruence import earliest_aligned_timestamp, parse_schedule
from aoc2020.inputs import lines

TITLE = "Shuttle Search"


class Notes(NamedTuple):
    earliest: int
    schedule: List[Optional[int]]


def parse(text: str) -> Notes:
    rows = lines(text)
    if len(rows) < 2:
        raise ValueError("Expected a timestamp line and a schedule line")
    return Notes(int(rows[0]), parse_schedule(rows[1]))


def earliest_bus(notes: Notes) -> int:
    """id * wait of the first bus departing at or after notes.earliest."""
    buses = [bus_id for bus_id in notes.schedule if bus_id is not None]
    if not buses:
        raise ValueError("Schedule contains no buses")
    wait, bus_id = min(((-notes.earliest) % b, b) for b in buses)
    return bus_id * wait


def part1(notes: Notes) -> int:
    return earliest_bus(notes)


def part2(notes: Notes) -> int:
    return earliest_aligned_timestamp(notes.schedule)
