"""Day 4: paper rolls reachable by a forklift."""

from __future__ import annotations

from enum import Enum

from ..puzzle import Puzzle
from ..solution import PuzzleSolution, aoc_puzzle
from ..tools.grid import Grid, parse_grid

MAX_ROLL_NEIGHBORS = 4


class Cell(Enum):
    EMPTY = "."
    ROLL = "@"

    def __str__(self) -> str:
        return self.value


def _roll_neighbors(grid: Grid, x: int, y: int) -> int:
    return sum(
        1 for nx, ny in grid.all_neighbors(x, y) if grid.get(nx, ny) is Cell.ROLL
    )


def _accessible(grid: Grid):
    for (x, y), cell in grid.items():
        if cell is Cell.ROLL and _roll_neighbors(grid, x, y) < MAX_ROLL_NEIGHBORS:
            yield x, y


@aoc_puzzle(day=4, year=2025)
class Day(PuzzleSolution):
    def part1(self, puzzle: Puzzle) -> int:
        """Count rolls with fewer than four rolls around them."""
        grid = parse_grid(str(puzzle), Cell)
        return sum(1 for _ in _accessible(grid))

    def part2(self, puzzle: Puzzle) -> int:
        """Repeatedly remove accessible rolls; count how many go."""
        grid = parse_grid(str(puzzle), Cell)
        removed = 0
        while True:
            reference = grid.copy()
            accessible = list(_accessible(reference))
            if not accessible:
                return removed
            for x, y in accessible:
                grid.insert(x, y, Cell.EMPTY)
            removed += len(accessible)