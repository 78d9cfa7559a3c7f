"""The collection of all available solutions."""

from __future__ import annotations

from ..collection import SolutionCollection
from . import day01, day02, day03, day04, day05

SOLUTIONS = (day01.Day, day02.Day, day03.Day, day04.Day, day05.Day)


def get_collection() -> SolutionCollection:
    """A collection holding every solution."""
    collection = SolutionCollection()
    for solution_cls in SOLUTIONS:
        collection.register(solution_cls)
    return collection


def run(day: int | None = None) -> None:
    """Run one day, or every day when day is None."""
    get_collection().run(day)