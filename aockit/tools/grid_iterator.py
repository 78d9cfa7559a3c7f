"""Row-major iteration over a rectangular range of grid coordinates."""

from __future__ import annotations

from typing import Iterator

Coord = tuple[int, int]


def _check_range(value: range, name: str) -> range:
    if not isinstance(value, range):
        raise TypeError(f"{name} must be a range, not {type(value).__name__}")
    if value.step != 1:
        raise ValueError(f"{name} must have a step of 1")
    return value


class GridIterator:
    """Every (x, y) in an x range and a y range, row by row.

    The iterator can be walked any number of times, forwards or with
    reversed().
    """

    __slots__ = ("x_range", "y_range")

    def __init__(self, x_range: range, y_range: range) -> None:
        self.x_range = _check_range(x_range, "x_range")
        self.y_range = _check_range(y_range, "y_range")

    def __iter__(self) -> Iterator[Coord]:
        for y in self.y_range:
            for x in self.x_range:
                yield x, y

    def __reversed__(self) -> Iterator[Coord]:
        for y in reversed(self.y_range):
            for x in reversed(self.x_range):
                yield x, y

    def __len__(self) -> int:
        return len(self.x_range) * len(self.y_range)

    def __repr__(self) -> str:
        return f"GridIterator({self.x_range!r}, {self.y_range!r})"

    def x_iter(self) -> GridIterator:
        """Walk the x range alone; every coordinate has y set to 1."""
        return GridIterator(self.x_range, range(1, 2))

    def y_iter(self) -> GridIterator:
        """Walk the y range alone; every coordinate has x set to 1."""
        return GridIterator(range(1, 2), self.y_range)