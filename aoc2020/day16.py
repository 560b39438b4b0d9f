"""
Day 16: Ticket Translation

Input sections: field rules ("name: a-b or c-d"), "your ticket:", and
"nearby tickets:".
  - part 1: sum of nearby ticket values that match no rule at all
  - part 2: deduce which position holds which field from the valid nearby
    tickets, multiply the own ticket's "departure" fields
"""

import math
import re
from typing import Dict, List, NamedTuple, Set, Tuple

from aoc2020.inputs import groups

TITLE = "Ticket Translation"
PREFIX = "departure"

RULE_RE = re.compile(r"([^:]+): (\d+)-(\d+) or (\d+)-(\d+)")

Ranges = List[Tuple[int, int]]


class Notes(NamedTuple):
    rules: Dict[str, Ranges]
    ticket: List[int]
    nearby: List[List[int]]


def parse_ticket(line: str) -> List[int]:
    return [int(v) for v in line.split(",")]


def parse(text: str) -> Notes:
    sections = groups(text)
    if len(sections) != 3:
        raise ValueError(f"Expected 3 sections, found {len(sections)}")
    rule_lines, own_lines, nearby_lines = sections
    if own_lines[0] != "your ticket:" or nearby_lines[0] != "nearby tickets:":
        raise ValueError("Missing ticket section headers")

    rules: Dict[str, Ranges] = {}
    for line in rule_lines:
        match = RULE_RE.fullmatch(line)
        if not match:
            raise ValueError(f"Invalid rule {line!r}")
        a, b, c, d = (int(g) for g in match.groups()[1:])
        rules[match.group(1)] = [(a, b), (c, d)]

    ticket = parse_ticket(own_lines[1])
    nearby = [parse_ticket(line) for line in nearby_lines[1:]]
    return Notes(rules, ticket, nearby)


def matches(ranges: Ranges, value: int) -> bool:
    return any(lo <= value <= hi for lo, hi in ranges)


def matches_any(rules: Dict[str, Ranges], value: int) -> bool:
    return any(matches(ranges, value) for ranges in rules.values())


def error_rate(notes: Notes) -> int:
    return sum(
        value
        for ticket in notes.nearby
        for value in ticket
        if not matches_any(notes.rules, value)
    )


def valid_tickets(notes: Notes) -> List[List[int]]:
    return [t for t in notes.nearby if all(matches_any(notes.rules, v) for v in t)]


def deduce_fields(rules: Dict[str, Ranges], tickets: List[List[int]]) -> Dict[str, int]:
    """
    Map each field name to its ticket position.

    Every position starts with the names whose ranges accept all its values;
    positions left with a single name fix that name, which is then removed
    from every other position, until all positions are fixed.

    Raises:
        ValueError: if elimination cannot fix every position
    """
    width = len(tickets[0])
    candidates: List[Set[str]] = [
        {name for name, ranges in rules.items() if all(matches(ranges, t[i]) for t in tickets)}
        for i in range(width)
    ]

    mapping: Dict[str, int] = {}
    while len(mapping) < width:
        fixed = [(i, next(iter(names))) for i, names in enumerate(candidates) if len(names) == 1]
        if not fixed:
            raise ValueError("Ticket fields cannot be deduced")
        for i, name in fixed:
            mapping[name] = i
            for names in candidates:
                names.discard(name)
    return mapping


def part1(notes: Notes) -> int:
    return error_rate(notes)


def part2(notes: Notes, prefix: str = PREFIX) -> int:
    tickets = valid_tickets(notes)
    if not tickets:
        raise ValueError("No valid nearby tickets")
    mapping = deduce_fields(notes.rules, tickets)
    return math.prod(notes.ticket[i] for name, i in mapping.items() if name.startswith(prefix))
