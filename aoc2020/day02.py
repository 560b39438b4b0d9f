"""
Day 2: Password Philosophy

Each line is "min-max c: password".
  - part 1: count of c in password must lie in [min, max]
  - part 2: exactly one of the 1-based positions min, max holds c
"""

from typing import List, NamedTuple

from aoc2020.inputs import lines

TITLE = "Password Philosophy"


class Entry(NamedTuple):
    low: int
    high: int
    char: str
    password: str


def parse_entry(line: str) -> Entry:
    try:
        policy, char, password = line.split()
        low, high = policy.split("-")
        return Entry(int(low), int(high), char.rstrip(":"), password)
    except ValueError as exc:
        raise ValueError(f"Invalid password entry {line!r}") from exc


def parse(text: str) -> List[Entry]:
    return [parse_entry(line) for line in lines(text)]


def is_valid_count(entry: Entry) -> bool:
    return entry.low <= entry.password.count(entry.char) <= entry.high


def is_valid_position(entry: Entry) -> bool:
    hits = 0
    for pos in (entry.low, entry.high):
        if pos <= len(entry.password) and entry.password[pos - 1] == entry.char:
            hits += 1
    return hits == 1


def part1(entries: List[Entry]) -> int:
    return sum(1 for e in entries if is_valid_count(e))


def part2(entries: List[Entry]) -> int:
    return sum(1 for e in entries if is_valid_position(e))
