import pytest

from aockit.puzzle import Puzzle
from aockit.solutions.day02 import Day, digit_count, get_ranges

EXAMPLE = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,1698522-1698528,"
    "446443-446449,38593856-38593862,565653-565659,824824821-824824827,"
    "2121212118-2121212124"
)


def test_part1_example():
    assert Day().part1(Puzzle(EXAMPLE)) == 1227775554


def test_part2_example():
    assert Day().part2(Puzzle(EXAMPLE)) == 4174379265


def test_get_ranges_parses_pairs():
    ranges = list(get_ranges(Puzzle("11-22, 95-115\n")))
    assert ranges == [(11, 22), (95, 115)]


def test_get_ranges_rejects_missing_dash():
    with pytest.raises(ValueError):
        list(get_ranges(Puzzle("1122")))


def test_get_ranges_rejects_non_numbers():
    with pytest.raises(ValueError):
        list(get_ranges(Puzzle("a-22")))


def test_digit_count_matches_string_length():
    assert digit_count(0) == 1
    assert digit_count(9) == 1
    for value in (10, 1188511880, 2121212124):
        assert digit_count(value) == len(str(value))


def test_part2_covers_part1():
    puzzle = Puzzle(EXAMPLE)
    assert Day().part2(puzzle) >= Day().part1(puzzle)