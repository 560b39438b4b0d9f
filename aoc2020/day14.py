"""
Day 14: Docking Data

A 36-bit bitmask program of "mask = ..." and "mem[addr] = value" lines.
  - part 1: the mask rewrites values ('0'/'1' force a bit, 'X' keeps it)
  - part 2: the mask rewrites addresses ('1' forces a bit, '0' keeps it,
    'X' floats and takes both values), every resulting address is written
"""

import re
from typing import Dict, List, NamedTuple, Union

from aoc2020.inputs import lines

TITLE = "Docking Data"
WIDTH = 36

MASK_RE = re.compile(r"mask = ([01X]{36})")
MEM_RE = re.compile(r"mem\[(\d+)\] = (\d+)")


class Mask(NamedTuple):
    ones: int       # bits forced to 1
    zeros: int      # bits forced to 0
    floating: int   # 'X' bits


class Store(NamedTuple):
    address: int
    value: int


Instruction = Union[Mask, Store]


def parse_mask(bits: str) -> Mask:
    if len(bits) != WIDTH or set(bits) - set("01X"):
        raise ValueError(f"Invalid mask {bits!r}")
    ones = int(bits.replace("X", "0"), 2)
    zeros = int(bits.replace("1", "X").replace("0", "1").replace("X", "0"), 2)
    floating = int(bits.replace("1", "0").replace("X", "1"), 2)
    return Mask(ones, zeros, floating)


def parse(text: str) -> List[Instruction]:
    program: List[Instruction] = []
    for line in lines(text):
        line = line.strip()
        mask_match = MASK_RE.fullmatch(line)
        if mask_match:
            program.append(parse_mask(mask_match.group(1)))
            continue
        mem_match = MEM_RE.fullmatch(line)
        if mem_match:
            program.append(Store(int(mem_match.group(1)), int(mem_match.group(2))))
            continue
        raise ValueError(f"Invalid instruction {line!r}")
    return program


def apply_mask(value: int, mask: Mask) -> int:
    return (value | mask.ones) & ~mask.zeros


def floating_addresses(address: int, mask: Mask) -> List[int]:
    """All addresses produced by the floating bits of the mask."""
    addresses = [(address | mask.ones) & ~mask.floating]
    for i in range(WIDTH):
        bit = 1 << i
        if mask.floating & bit:
            addresses += [a | bit for a in addresses]
    return addresses


def run_program(program: List[Instruction], decoder_v2: bool = False) -> Dict[int, int]:
    """Execute the program and return the memory image."""
    if program and not isinstance(program[0], Mask):
        raise ValueError("Program must start with a mask")

    memory: Dict[int, int] = {}
    mask = Mask(0, 0, 0)
    for instr in program:
        if isinstance(instr, Mask):
            mask = instr
        elif decoder_v2:
            for address in floating_addresses(instr.address, mask):
                memory[address] = instr.value
        else:
            memory[instr.address] = apply_mask(instr.value, mask)
    return memory


def part1(program: List[Instruction]) -> int:
    return sum(run_program(program).values())


def part2(program: List[Instruction]) -> int:
    return sum(run_program(program, decoder_v2=True).values())
