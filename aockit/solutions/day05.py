"""Day 5: fresh ingredient id ranges."""

from __future__ import annotations

import re

from ..puzzle import Puzzle
from ..solution import PuzzleSolution, aoc_puzzle

_NUMBER = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 2**64


def _parse_u64(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if value >= _U64_LIMIT:
        raise ValueError(f"number out of range: {text!r}")
    return value


def _split_sections(puzzle: Puzzle) -> tuple[str, str]:
    ranges, separator, ingredients = puzzle.input.partition("\n\n")
    if not separator:
        raise ValueError("input has no blank line between ranges and ingredients")
    return ranges, ingredients


def _parse_ranges(text: str) -> list[tuple[int, int]]:
    ranges = []
    for line in text.splitlines():
        start, separator, end = line.partition("-")
        if not separator:
            raise ValueError(f"not a range: {line!r}")
        ranges.append((_parse_u64(start), _parse_u64(end)))
    return ranges


@aoc_puzzle(day=5, year=2025)
class Day(PuzzleSolution):
    def part1(self, puzzle: Puzzle) -> int:
        """Count the listed ingredients that fall in some fresh range."""
        range_text, ingredient_text = _split_sections(puzzle)
        ranges = _parse_ranges(range_text)
        return sum(
            1
            for ingredient in map(_parse_u64, ingredient_text.splitlines())
            if any(start <= ingredient <= end for start, end in ranges)
        )

    def part2(self, puzzle: Puzzle) -> int:
        """Count the ids covered by the union of all fresh ranges."""
        range_text, _ = _split_sections(puzzle)
        ranges = sorted(_parse_ranges(range_text), key=lambda pair: pair[0])
        total = 0
        current_start = current_end = 0
        for start, end in ranges:
            if start > current_end:
                if current_end != 0:
                    total += current_end - current_start + 1
                current_start, current_end = start, end
            elif end > current_end:
                current_end = end
        return total + current_end - current_start + 1