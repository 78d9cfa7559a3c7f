"""Puzzle input."""

from __future__ import annotations

from dataclasses import dataclass

from .fetcher import AocDataType, get_aoc_data


@dataclass(frozen=True)
class Puzzle:
    """The input text of one puzzle."""

    input: str

    def lines(self) -> list[str]:
        """Return the input split into lines, without line endings."""
        return self.input.splitlines()

    def __str__(self) -> str:
        return self.input


def load_puzzle(day: int, year: int) -> Puzzle:
    """Load the input of a puzzle, downloading it when not cached."""
    return Puzzle(get_aoc_data(AocDataType.INPUT, day, year))