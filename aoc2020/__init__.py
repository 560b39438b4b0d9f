"""
Advent of Code 2020 solvers (days 1-17)

Modules:
- congruence: modular inverse + Chinese Remainder fold (day 13 core)
- grid: character grids as NumPy arrays, N-D neighbour counting
- inputs: text input helpers
- day01 .. day17: parse / part1 / part2 per puzzle day
- receipts: JSONL run receipts
- solve: CLI runner over all days
"""

__version__ = "0.1.0"
