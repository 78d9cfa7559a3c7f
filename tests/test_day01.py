import pytest

from aockit.puzzle import Puzzle
from aockit.solutions.day01 import Day

EXAMPLE = """L68
L30
R48
L5
R60
L55
L1
L99
R14
L82
"""


def test_part1_example():
    assert Day().part1(Puzzle(EXAMPLE)) == 3


def test_part2_example():
    assert Day().part2(Puzzle(EXAMPLE)) == 6


def test_part2_counts_at_least_part1():
    puzzle = Puzzle(EXAMPLE)
    assert Day().part2(puzzle) >= Day().part1(puzzle)


def test_invalid_direction_raises():
    with pytest.raises(ValueError, match="Invalid direction"):
        Day().part1(Puzzle("X10\n"))


def test_invalid_amount_raises():
    with pytest.raises(ValueError):
        Day().part2(Puzzle("Rabc\n"))