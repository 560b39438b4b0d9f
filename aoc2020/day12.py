"""
Day 12: Rain Risk

Navigation instructions N/E/S/W/L/R/F with an integer argument.
  - part 1: the ship moves and turns itself (starts facing east)
  - part 2: N/E/S/W/L/R move or rotate a waypoint relative to the ship,
    F moves the ship towards the waypoint n times
Coordinates: x grows east, y grows north; answers are Manhattan distances.
"""

from typing import List, NamedTuple, Tuple

from aoc2020.inputs import lines

TITLE = "Rain Risk"

ACTIONS = "NESWLRF"
DIRECTIONS = {"N": (0, 1), "E": (1, 0), "S": (0, -1), "W": (-1, 0)}
WAYPOINT_START = (10, 1)


class Instruction(NamedTuple):
    action: str
    value: int


def parse_instruction(line: str) -> Instruction:
    action, value = line[:1], int(line[1:])
    if action not in ACTIONS:
        raise ValueError(f"Invalid instruction {line!r}")
    if action in "LR" and value % 90 != 0:
        raise ValueError(f"Unsupported rotation {line!r}")
    return Instruction(action, value)


def parse(text: str) -> List[Instruction]:
    return [parse_instruction(line.strip()) for line in lines(text)]


def rotate_left(x: int, y: int, degrees: int) -> Tuple[int, int]:
    """Rotate (x, y) counter-clockwise by a multiple of 90 degrees."""
    for _ in range((degrees // 90) % 4):
        x, y = -y, x
    return x, y


def navigate(instructions: List[Instruction]) -> Tuple[int, int]:
    x, y = 0, 0
    dx, dy = 1, 0
    for action, value in instructions:
        if action in DIRECTIONS:
            mx, my = DIRECTIONS[action]
            x += mx * value
            y += my * value
        elif action == "L":
            dx, dy = rotate_left(dx, dy, value)
        elif action == "R":
            dx, dy = rotate_left(dx, dy, -value)
        else:
            x += dx * value
            y += dy * value
    return x, y


def navigate_waypoint(
    instructions: List[Instruction],
    waypoint: Tuple[int, int] = WAYPOINT_START,
) -> Tuple[int, int]:
    x, y = 0, 0
    wx, wy = waypoint
    for action, value in instructions:
        if action in DIRECTIONS:
            mx, my = DIRECTIONS[action]
            wx += mx * value
            wy += my * value
        elif action == "L":
            wx, wy = rotate_left(wx, wy, value)
        elif action == "R":
            wx, wy = rotate_left(wx, wy, -value)
        else:
            x += wx * value
            y += wy * value
    return x, y


def part1(instructions: List[Instruction]) -> int:
    x, y = navigate(instructions)
    return abs(x) + abs(y)


def part2(instructions: List[Instruction]) -> int:
    x, y = navigate_waypoint(instructions)
    return abs(x) + abs(y)
