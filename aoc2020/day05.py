"""
Day 5: Binary Boarding

A boarding pass is a 10-bit number: F/L are 0 bits, B/R are 1 bits.
The first 7 bits are the row, the last 3 the column, so the seat id
row * 8 + column is the pass read as binary.
"""

from typing import List

from aoc2020.inputs import lines

TITLE = "Binary Boarding"

BITS = {"F": "0", "B": "1", "L": "0", "R": "1"}


def seat_id(boarding_pass: str) -> int:
    if len(boarding_pass) != 10:
        raise ValueError(f"Boarding pass must have 10 characters: {boarding_pass!r}")
    try:
        return int("".join(BITS[c] for c in boarding_pass), 2)
    except KeyError as exc:
        raise ValueError(f"Invalid character {exc.args[0]!r} in {boarding_pass!r}") from None


def parse(text: str) -> List[int]:
    return [seat_id(line.strip()) for line in lines(text)]


def find_gap(seat_ids: List[int]) -> int:
    """
    Find the missing seat whose ids -1 and +1 are both taken.

    Raises:
        ValueError: if there is no such seat
    """
    taken = set(seat_ids)
    for candidate in range(min(taken) + 1, max(taken)):
        if candidate not in taken and candidate - 1 in taken and candidate + 1 in taken:
            return candidate
    raise ValueError("Gap seat not found")


def part1(seat_ids: List[int]) -> int:
    return max(seat_ids)


def part2(seat_ids: List[int]) -> int:
    return find_gap(seat_ids)
