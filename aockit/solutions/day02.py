"""Day 2: sum product ids made of a repeated digit pattern."""

from __future__ import annotations

import re
from typing import Iterator

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


def get_ranges(puzzle: Puzzle) -> Iterator[tuple[int, int]]:
    """Yield the (start, end) pairs of the comma separated input."""
    for part in puzzle.input.split(","):
        start, separator, end = part.strip().partition("-")
        if not separator:
            raise ValueError(f"not a range: {part!r}")
        yield _parse_u64(start), _parse_u64(end)


def digit_count(n: int) -> int:
    """Number of decimal digits of a non-negative integer."""
    return len(str(n)) if n else 1


def _doubled_sum(low: int, high: int) -> int:
    start, end = low, high
    digits_start = digit_count(start)
    digits_end = digit_count(end)
    if digits_start % 2 == 1 and digits_end % 2 == 1:
        return 0
    digits = digits_start
    if digits_start % 2 == 1:
        # An odd digit count cannot be split in two equal halves.
        start = 10**digits_start
        digits += 1
    if digits_end % 2 == 1:
        end = 10 ** (digits_end - 1) - 1
    power = 10 ** (digits // 2)
    total = 0
    for left in range(start // power, end // power + 1):
        value = left + left * power
        if low <= value <= high:
            total += value
    return total


def _repeated_sum(low: int, high: int) -> int:
    digits_start = digit_count(low)
    digits_end = digit_count(high)
    # Ranges are assumed to span at most two digit counts.
    if digits_start == digits_end:
        spans = [(low, high, digits_start)]
    else:
        spans = [
            (low, 10**digits_start - 1, digits_start),
            (10 ** (digits_end - 1), high, digits_end),
        ]
    hits: set[int] = set()
    for start, end, digits in spans:
        for width in range(1, digits // 2 + 1):
            if digits % width:
                continue
            divisor = 10 ** (digits - width)
            step = 10**width
            for pattern in range(start // divisor, end // divisor + 1):
                repeated = 0
                for _ in range(digits // width):
                    repeated = repeated * step + pattern
                if low <= repeated <= high:
                    hits.add(repeated)
    return sum(hits)


@aoc_puzzle(day=2, year=2025)
class Day(PuzzleSolution):
    def part1(self, puzzle: Puzzle) -> int:
        """Sum ids made of one pattern written twice."""
        return sum(_doubled_sum(low, high) for low, high in get_ranges(puzzle))

    def part2(self, puzzle: Puzzle) -> int:
        """Sum ids made of one pattern written two or more times."""
        return sum(_repeated_sum(low, high) for low, high in get_ranges(puzzle))