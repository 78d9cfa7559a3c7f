"""Puzzle solutions and how their day and year are determined."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .answer import Answer, to_answer
from .fetcher import AocDataType, FetchError, get_aoc_data
from .puzzle import Puzzle, load_puzzle

MISSING_DAY_ERROR = (
    "Could not determine puzzle day. Use one of these methods to define the day:\n"
    "- use the day argument `@aoc_puzzle(day=1)`\n"
    "- set a day suffix `class MySolution01`\n"
)
MISSING_YEAR_ERROR = "AOC year not set, call `set_year()`"
_MAX_DAY_VALUE = 0xFFFFFFFF
_TRAILING_DIGITS = re.compile(r"[0-9]*\Z")


class AocConfigError(Exception):
    """Raised when a solution's day or year is missing or invalid."""


@dataclass
class _Settings:
    year: int | None = None


_SETTINGS = _Settings()


def set_year(year: int | None) -> None:
    """Set the year used by solutions that do not name one."""
    _SETTINGS.year = year


def get_year() -> int | None:
    return _SETTINGS.year


def validate_day(day: int | None) -> int | None:
    """Return day unchanged, raising when it is outside 1 to 25."""
    if day is not None and not 1 <= day <= 25:
        raise AocConfigError("day must be between 1 and 25")
    return day


def day_from_name(name: str) -> int | None:
    """Read a day from the digits a name ends with."""
    digits = _TRAILING_DIGITS.search(name).group(0).lstrip("0")
    if not digits:
        return None
    value = int(digits)
    return value if value <= _MAX_DAY_VALUE else None


@dataclass(frozen=True)
class SolutionProps:
    year: int
    day: int


class PuzzleSolution(ABC):
    """A solution for both parts of one day's puzzle."""

    @abstractmethod
    def part1(self, puzzle: Puzzle) -> object:
        """Solve the first part; return anything to_answer accepts."""

    @abstractmethod
    def part2(self, puzzle: Puzzle) -> object:
        """Solve the second part; return anything to_answer accepts."""


def aoc_puzzle(cls=None, *, day=None, year=None):
    """Class decorator recording the day and, optionally, year of a solution."""
    validate_day(day)

    def decorate(target):
        resolved = day if day is not None else validate_day(day_from_name(target.__name__))
        if resolved is None:
            raise AocConfigError(MISSING_DAY_ERROR)
        target._aoc_day = resolved
        target._aoc_year = year
        return target

    return decorate if cls is None else decorate(cls)


def resolve_props(solution_cls: type) -> SolutionProps:
    """Work out the year and day of a solution class."""
    year = getattr(solution_cls, "_aoc_year", None)
    if year is None:
        year = get_year()
    if year is None:
        raise AocConfigError(MISSING_YEAR_ERROR)
    day = getattr(solution_cls, "_aoc_day", None)
    if day is None:
        day = validate_day(day_from_name(solution_cls.__name__))
    if day is None:
        raise AocConfigError(MISSING_DAY_ERROR)
    return SolutionProps(year=year, day=day)


def puzzle_description(solution_cls: type) -> str:
    """Return the Markdown description of a solution's puzzle, or why it is missing."""
    props = resolve_props(solution_cls)
    try:
        description = get_aoc_data(AocDataType.TEXT, props.day, props.year)
    except FetchError as exc:
        description = (
            f"Failed to get puzzle description for day {props.day} ({props.year}): {exc}"
        )
    return description.replace("```", "```text")


@dataclass
class SolutionWrapper:
    """A solution together with the day and year it belongs to."""

    solution: PuzzleSolution
    props: SolutionProps

    @property
    def day(self) -> int:
        return self.props.day

    def get_puzzle(self) -> Puzzle:
        return load_puzzle(self.props.day, self.props.year)

    def part1(self, puzzle: Puzzle) -> Answer:
        return to_answer(self.solution.part1(puzzle))

    def part2(self, puzzle: Puzzle) -> Answer:
        return to_answer(self.solution.part2(puzzle))