"""
Puzzle input helpers.

Inputs are small text files; every day parses the whole text at once.
"""

from pathlib import Path
from typing import List


def read_text(path: Path) -> str:
    """Read a puzzle input file as text."""
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def lines(text: str) -> List[str]:
    """Non-empty, right-stripped lines of the input."""
    return [line.rstrip() for line in text.splitlines() if line.strip()]


def groups(text: str) -> List[List[str]]:
    """
    Split the input into blank-line separated groups of lines.

    Args:
        text: Raw input text

    Returns:
        List of groups, each a list of non-empty lines
    """
    result: List[List[str]] = []
    current: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if line:
            current.append(line)
        elif current:
            result.append(current)
            current = []
    if current:
        result.append(current)
    return result


def ints(text: str) -> List[int]:
    """One integer per non-empty line."""
    return [int(line) for line in lines(text)]
