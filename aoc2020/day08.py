"""
Day 8: Handheld Halting

A tiny processor with acc/jmp/nop instructions.
  - part 1: accumulator just before any instruction would run a second time
  - part 2: swap exactly one jmp <-> nop so the program runs off its end
"""

from typing import List, NamedTuple, Tuple

from aoc2020.inputs import lines

TITLE = "Handheld Halting"

OPCODES = ("acc", "jmp", "nop")
SWAP = {"jmp": "nop", "nop": "jmp"}


class Instruction(NamedTuple):
    op: str
    arg: int


def parse_instruction(line: str) -> Instruction:
    parts = line.split()
    if len(parts) != 2 or parts[0] not in OPCODES:
        raise ValueError(f"Invalid instruction {line!r}")
    return Instruction(parts[0], int(parts[1]))


def parse(text: str) -> List[Instruction]:
    return [parse_instruction(line) for line in lines(text)]


def run(program: List[Instruction]) -> Tuple[bool, int]:
    """
    Execute until an instruction repeats or the counter leaves the program.

    Returns:
        (terminated, acc): terminated is True when the program counter
        reached the end of the program, False on an infinite loop.
    """
    acc = 0
    pc = 0
    executed = [False] * len(program)
    while 0 <= pc < len(program):
        if executed[pc]:
            return False, acc
        executed[pc] = True

        op, arg = program[pc]
        if op == "acc":
            acc += arg
            pc += 1
        elif op == "jmp":
            pc += arg
        else:
            pc += 1
    return True, acc


def repair(program: List[Instruction]) -> int:
    """
    Brute-force the single jmp/nop swap that makes the program terminate.

    Raises:
        ValueError: if no single swap fixes the program
    """
    for i, (op, arg) in enumerate(program):
        if op not in SWAP:
            continue
        patched = list(program)
        patched[i] = Instruction(SWAP[op], arg)
        terminated, acc = run(patched)
        if terminated:
            return acc
    raise ValueError("No fix found")


def part1(program: List[Instruction]) -> int:
    terminated, acc = run(program)
    if terminated:
        raise ValueError("Program terminates without looping")
    return acc


def part2(program: List[Instruction]) -> int:
    return repair(program)
