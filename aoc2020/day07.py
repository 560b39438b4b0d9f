"""
Day 7: Handy Haversacks

Bag rules form a weighted DAG: outer colour -> (count, inner colour).
  - part 1: how many colours can eventually contain the target
  - part 2: how many bags the target holds in total
"""

import re
from functools import lru_cache
from typing import Dict, List, Set, Tuple

from aoc2020.inputs import lines

TITLE = "Handy Haversacks"
TARGET = "shiny gold"

Rules = Dict[str, List[Tuple[int, str]]]

RULE_RE = re.compile(r"(.+?) bags contain (.+)\.")
INNER_RE = re.compile(r"(\d+) (.+?) bags?")


def parse_rule(line: str) -> Tuple[str, List[Tuple[int, str]]]:
    match = RULE_RE.fullmatch(line.strip())
    if not match:
        raise ValueError(f"Invalid bag rule {line!r}")
    outer, contents = match.groups()
    if contents == "no other bags":
        return outer, []

    inner: List[Tuple[int, str]] = []
    for part in contents.split(", "):
        inner_match = INNER_RE.fullmatch(part)
        if not inner_match:
            raise ValueError(f"Invalid bag content {part!r} in {line!r}")
        inner.append((int(inner_match.group(1)), inner_match.group(2)))
    return outer, inner


def parse(text: str) -> Rules:
    rules: Rules = {}
    for line in lines(text):
        outer, inner = parse_rule(line)
        rules[outer] = inner
    return rules


def parents_of(rules: Rules) -> Dict[str, Set[str]]:
    """Reverse edges: inner colour -> colours directly containing it."""
    parents: Dict[str, Set[str]] = {}
    for outer, inner in rules.items():
        for _, color in inner:
            parents.setdefault(color, set()).add(outer)
    return parents


def count_containers(rules: Rules, target: str = TARGET) -> int:
    parents = parents_of(rules)
    seen: Set[str] = set()
    stack = [target]
    while stack:
        color = stack.pop()
        for parent in parents.get(color, ()):
            if parent not in seen:
                seen.add(parent)
                stack.append(parent)
    return len(seen)


def count_contents(rules: Rules, target: str = TARGET) -> int:
    if target not in rules:
        raise ValueError(f"No rule for {target!r}")

    @lru_cache(maxsize=None)
    def bags_inside(color: str) -> int:
        return sum(n * (1 + bags_inside(inner)) for n, inner in rules.get(color, []))

    return bags_inside(target)


def part1(rules: Rules) -> int:
    return count_containers(rules)


def part2(rules: Rules) -> int:
    return count_contents(rules)
