"""
Day 15: Rambunctious Recitation

Memory game: after the starting numbers, each turn says 0 if the last
number was new, otherwise how many turns apart its last two mentions were.
"""

from typing import List

TITLE = "Rambunctious Recitation"
SHORT_GAME = 2020
LONG_GAME = 30_000_000


def parse(text: str) -> List[int]:
    numbers = [int(token) for token in text.strip().split(",") if token.strip()]
    if not numbers:
        raise ValueError("No starting numbers")
    return numbers


def play(start: List[int], turns: int) -> int:
    """
    Number spoken on turn `turns` (1-based).

    last_spoken_at[n] holds the turn n was last said before the current
    one, 0 meaning never; every spoken number is below `turns`.
    """
    if turns < 1:
        raise ValueError(f"Turn must be at least 1, got {turns}")
    if turns <= len(start):
        return start[turns - 1]

    size = max(turns, max(start) + 1)
    last_spoken_at = [0] * size
    for turn, n in enumerate(start[:-1], start=1):
        last_spoken_at[n] = turn

    spoken = start[-1]
    for turn in range(len(start), turns):
        previous = last_spoken_at[spoken]
        last_spoken_at[spoken] = turn
        spoken = turn - previous if previous else 0
    return spoken


def part1(start: List[int], turns: int = SHORT_GAME) -> int:
    return play(start, turns)


def part2(start: List[int], turns: int = LONG_GAME) -> int:
    return play(start, turns)
