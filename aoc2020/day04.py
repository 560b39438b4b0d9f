"""
Day 4: Passport Processing

Passports are blank-line separated groups of "key:value" tokens.
"cid" is optional; every other field is required.
"""

import re
from typing import Callable, Dict, List, Optional

from aoc2020.inputs import groups

TITLE = "Passport Processing"

Passport = Dict[str, str]

FIELDS = ("byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid", "cid")
REQUIRED = ("byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid")
EYE_COLORS = {"amb", "blu", "brn", "gry", "grn", "hzl", "oth"}

HAIR_COLOR_RE = re.compile(r"#[0-9a-f]{6}")
HEIGHT_RE = re.compile(r"(\d+)(cm|in)")
PID_RE = re.compile(r"\d{9}")


def parse_passport(group: List[str]) -> Passport:
    passport: Passport = {}
    for line in group:
        for item in line.split():
            key, sep, value = item.partition(":")
            if not sep or key not in FIELDS:
                raise ValueError(f"Invalid passport item {item!r}")
            passport[key] = value
    return passport


def parse(text: str) -> List[Passport]:
    return [parse_passport(group) for group in groups(text)]


def is_valid_year(text: Optional[str], low: int, high: int) -> bool:
    if text is None or len(text) != 4 or not text.isdigit():
        return False
    return low <= int(text) <= high


def is_valid_height(text: Optional[str]) -> bool:
    match = HEIGHT_RE.fullmatch(text or "")
    if not match:
        return False
    value, unit = int(match.group(1)), match.group(2)
    if unit == "cm":
        return 150 <= value <= 193
    return 59 <= value <= 76


def is_valid_hair_color(text: Optional[str]) -> bool:
    return HAIR_COLOR_RE.fullmatch(text or "") is not None


def is_valid_eye_color(text: Optional[str]) -> bool:
    return text in EYE_COLORS


def is_valid_pid(text: Optional[str]) -> bool:
    return PID_RE.fullmatch(text or "") is not None


VALIDATORS: Dict[str, Callable[[Optional[str]], bool]] = {
    "byr": lambda t: is_valid_year(t, 1920, 2002),
    "iyr": lambda t: is_valid_year(t, 2010, 2020),
    "eyr": lambda t: is_valid_year(t, 2020, 2030),
    "hgt": is_valid_height,
    "hcl": is_valid_hair_color,
    "ecl": is_valid_eye_color,
    "pid": is_valid_pid,
}


def has_required_fields(passport: Passport) -> bool:
    return all(key in passport for key in REQUIRED)


def is_valid(passport: Passport) -> bool:
    return all(check(passport.get(key)) for key, check in VALIDATORS.items())


def part1(passports: List[Passport]) -> int:
    return sum(1 for p in passports if has_required_fields(p))


def part2(passports: List[Passport]) -> int:
    return sum(1 for p in passports if is_valid(p))
