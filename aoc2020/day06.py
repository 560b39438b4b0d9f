"""
Day 6: Custom Customs

Each group is a block of lines, one line of answered questions per person.
"""

from typing import List, Set

from aoc2020.inputs import groups

TITLE = "Custom Customs"


def parse(text: str) -> List[List[str]]:
    return groups(text)


def group_union(group: List[str]) -> Set[str]:
    return set().union(*(set(person) for person in group))


def group_intersection(group: List[str]) -> Set[str]:
    if not group:
        return set()
    return set(group[0]).intersection(*(set(person) for person in group[1:]))


def part1(answer_groups: List[List[str]]) -> int:
    return sum(len(group_union(g)) for g in answer_groups)


def part2(answer_groups: List[List[str]]) -> int:
    return sum(len(group_intersection(g)) for g in answer_groups)
