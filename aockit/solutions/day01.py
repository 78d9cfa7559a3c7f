"""Day 1: a dial turned left and right, counting how often it rests on zero."""

from __future__ import annotations

import re

from ..puzzle import Puzzle
from ..solution import PuzzleSolution, aoc_puzzle

DIAL_SIZE = 100
START_POSITION = 50
_NUMBER = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


def _parse_i32(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def _moves(puzzle: Puzzle):
    for line in puzzle.lines():
        direction, amount = line[:1], line[1:]
        if direction == "L":
            yield -_parse_i32(amount)
        elif direction == "R":
            yield _parse_i32(amount)
        else:
            raise ValueError("Invalid direction")


@aoc_puzzle(day=1, year=2025)
class Day(PuzzleSolution):
    def part1(self, puzzle: Puzzle) -> int:
        """Count the moves that leave the dial pointing at zero."""
        position = START_POSITION
        zero_count = 0
        for move in _moves(puzzle):
            position = (position + move) % DIAL_SIZE
            if position == 0:
                zero_count += 1
        return zero_count

    def part2(self, puzzle: Puzzle) -> int:
        """Count every time the dial passes or lands on zero."""
        position = START_POSITION
        zero_count = 0
        for move in _moves(puzzle):
            start = position
            new_position = start + move
            position = new_position % DIAL_SIZE
            zeros = 1 if position == 0 else 0
            if not 0 <= new_position < DIAL_SIZE:
                crossings = abs(new_position - position) // DIAL_SIZE
                # A turn starting on zero, or ending on it, is not a crossing.
                if (start == 0 and move < 0) or (move > 0 and position == 0):
                    crossings -= 1
                zeros += crossings
            zero_count += zeros
        return zero_count