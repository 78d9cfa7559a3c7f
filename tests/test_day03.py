import pytest

from aockit.puzzle import Puzzle
from aockit.solutions.day03 import Day, find_highest

EXAMPLE = """987654321111111
811111111111119
234234234234278
818181911112111"""


def test_part1_example():
    assert Day().part1(Puzzle(EXAMPLE)) == 357


def test_part2_example():
    assert Day().part2(Puzzle(EXAMPLE)) == 3121910778619


def test_keeping_every_digit_returns_the_line():
    assert find_highest("234234234234278", 15) == 234234234234278


def test_keeping_no_digit_is_zero():
    assert find_highest("12345", 0) == 0


def test_result_has_requested_length():
    for line in EXAMPLE.splitlines():
        assert len(str(find_highest(line, 12))) == 12


def test_too_short_line_raises():
    with pytest.raises(ValueError):
        find_highest("9", 2)


def test_non_digit_raises():
    with pytest.raises(ValueError):
        find_highest("12a45", 2)