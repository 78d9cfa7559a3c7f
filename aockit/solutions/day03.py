"""Day 3: pick the batteries that form the largest joltage."""

from __future__ import annotations

from ..puzzle import Puzzle
from ..solution import PuzzleSolution, aoc_puzzle

_DIGITS = "0123456789"


def _digit(char: str) -> int:
    value = _DIGITS.find(char)
    if value < 0:
        raise ValueError(f"invalid digit: {char!r}")
    return value


def find_highest(line: str, size: int) -> int:
    """The largest number formed by keeping size digits of line in order."""
    digits = [_digit(char) for char in line]
    if len(digits) < size:
        raise ValueError(f"line has fewer than {size} digits")
    chosen: list[int] = []
    start = 0
    while len(chosen) < size:
        end = len(digits) - (size - len(chosen)) + 1
        window = digits[start:end]
        best = max(range(len(window)), key=window.__getitem__)
        chosen.append(window[best])
        start += best + 1
    result = 0
    for digit in chosen:
        result = result * 10 + digit
    return result


@aoc_puzzle(day=3, year=2025)
class Day(PuzzleSolution):
    def part1(self, puzzle: Puzzle) -> int:
        return sum(find_highest(line, 2) for line in puzzle.lines())

    def part2(self, puzzle: Puzzle) -> int:
        return sum(find_highest(line, 12) for line in puzzle.lines())