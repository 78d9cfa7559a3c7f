"""A collection of solutions that can be run and timed."""

from __future__ import annotations

import time
from functools import partial
from typing import Callable

from .answer import Answer
from .solution import SolutionWrapper, resolve_props

_UNITS = ((1_000_000_000, "s"), (1_000_000, "ms"), (1_000, "µs"))


def timed(func: Callable, *args):
    """Call func and return its result with the elapsed seconds."""
    start = time.perf_counter()
    result = func(*args)
    return result, time.perf_counter() - start


def format_duration(seconds: float) -> str:
    """Render a duration with two decimals and the largest fitting unit."""
    nanos = max(0, round(seconds * 1_000_000_000))
    for size, suffix in _UNITS:
        if nanos >= size:
            return f"{nanos / size:.2f}{suffix}"
    return f"{nanos:.2f}ns"


def print_timed(label: str, func: Callable, *args):
    """Call func, print how long it took under label, and return its result."""
    result, elapsed = timed(func, *args)
    print(f"{label}: {format_duration(elapsed)}")
    return result


def display_answer(answer: Answer) -> str:
    return answer.display()


class SolutionCollection:
    """Solutions keyed by day."""

    def __init__(self) -> None:
        self._solutions: dict[int, SolutionWrapper] = {}

    def register_solution(self, solution: SolutionWrapper) -> None:
        self._solutions[solution.day] = solution

    def register(self, solution_cls: type) -> type:
        """Create and register a solution class; returns the class."""
        self.register_solution(SolutionWrapper(solution_cls(), resolve_props(solution_cls)))
        return solution_cls

    def _get(self, day: int) -> SolutionWrapper:
        try:
            return self._solutions[day]
        except KeyError:
            raise KeyError(f"Day {day} was not yet created") from None

    def run(self, day: int | None = None) -> None:
        """Run one day, or every day in order followed by the total time."""
        if day is not None:
            self.run_day(day)
            return
        total = sum(self.run_day(each) for each in self.get_days())
        print(f"total_time: {format_duration(total)}")

    def run_day(self, day: int) -> float:
        """Run and print both parts of a day; return the seconds spent."""
        solution = self._get(day)
        puzzle = solution.get_puzzle()
        print(f"Day {day}")
        part1, time1 = timed(solution.part1, puzzle)
        part2, time2 = timed(solution.part2, puzzle)
        print(f"Part 1: {display_answer(part1)}")
        print(f"Part 2: {display_answer(part2)}")
        print(
            f"time: {format_duration(time1 + time2)} "
            f"(1: {format_duration(time1)}, 2: {format_duration(time2)})"
        )
        return time1 + time2

    def run_day_part1(self, day: int) -> tuple[Answer, float]:
        solution = self._get(day)
        return timed(solution.part1, solution.get_puzzle())

    def run_day_part2(self, day: int) -> tuple[Answer, float]:
        solution = self._get(day)
        return timed(solution.part2, solution.get_puzzle())

    def prepare_bench(self, day: int) -> tuple[Callable[[], Answer], Callable[[], Answer]]:
        """Load the puzzle once and return callables for both parts."""
        solution = self._get(day)
        puzzle = solution.get_puzzle()
        return partial(solution.part1, puzzle), partial(solution.part2, puzzle)

    def get_days(self) -> list[int]:
        return sorted(self._solutions)