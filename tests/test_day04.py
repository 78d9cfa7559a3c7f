import pytest

from aockit.puzzle import Puzzle
from aockit.solutions.day04 import Cell, Day

EXAMPLE = """..@@.@@@@.
@@@.@.@.@@
@@@@@.@.@@
@.@@@@..@.
@@.@@@@.@@
.@@@@@@@.@
.@.@.@.@@@
@.@@@.@@@@
.@@@@@@@@.
@.@.@@@.@."""


def test_part1_example():
    assert Day().part1(Puzzle(EXAMPLE)) == 13


def test_part2_example():
    assert Day().part2(Puzzle(EXAMPLE)) == 43


def test_cell_round_trip():
    for char in ".@":
        assert str(Cell(char)) == char
    assert Cell("@") is Cell.ROLL


def test_invalid_cell_raises():
    with pytest.raises(ValueError):
        Day().part1(Puzzle("..#.."))


def test_empty_grid_has_no_rolls():
    assert Day().part1(Puzzle("....\n....")) == 0
    assert Day().part2(Puzzle("....\n....")) == 0


def test_removed_never_exceeds_rolls():
    assert Day().part2(Puzzle(EXAMPLE)) <= EXAMPLE.count("@")