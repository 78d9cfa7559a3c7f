"""A sparse two-dimensional grid keyed by (x, y)."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from .grid_iterator import GridIterator
from .grid_printer import GridPrinter
from .path_finder import PathFinder

Coord = tuple[int, int]

_DIGITS = "0123456789"


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Grid:
    """Cells stored row by row; iteration runs by y, then x, ascending."""

    __slots__ = ("_rows",)

    def __init__(self, cells: Iterable[tuple[Coord, object]] = ()) -> None:
        self._rows: dict[int, dict[int, object]] = {}
        for (x, y), value in cells:
            self.insert(x, y, value)

    def __contains__(self, coord: Coord) -> bool:
        x, y = coord
        row = self._rows.get(y)
        return row is not None and x in row

    def __len__(self) -> int:
        return sum(len(row) for row in self._rows.values())

    def __bool__(self) -> bool:
        return bool(self._rows)

    def __iter__(self) -> Iterator[Coord]:
        return self.keys()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __str__(self) -> str:
        return str(self.printer())

    def __repr__(self) -> str:
        return f"Grid({list(self.items())!r})"

    def clear(self) -> None:
        self._rows.clear()

    def get(self, x: int, y: int, default=None):
        row = self._rows.get(y)
        if row is None:
            return default
        return row.get(x, default)

    def insert(self, x: int, y: int, value):
        """Store value at (x, y) and return the value it replaced, if any."""
        row = self._rows.setdefault(y, {})
        previous = row.get(x)
        row[x] = value
        return previous

    def setdefault(self, x: int, y: int, default=None):
        return self._rows.setdefault(y, {}).setdefault(x, default)

    def remove(self, x: int, y: int):
        """Remove and return the value at (x, y), or None when empty."""
        row = self._rows.get(y)
        if row is None:
            return None
        return row.pop(x, None)

    def _sorted_rows(self) -> Iterator[tuple[int, dict[int, object]]]:
        for y in sorted(self._rows):
            yield y, self._rows[y]

    def items(self) -> Iterator[tuple[Coord, object]]:
        for y, row in self._sorted_rows():
            for x in sorted(row):
                yield (x, y), row[x]

    def keys(self) -> Iterator[Coord]:
        return (coord for coord, _ in self.items())

    def values(self) -> Iterator[object]:
        return (value for _, value in self.items())

    def retain(self, predicate: Callable[[int, int, object], bool]) -> None:
        """Keep only cells for which predicate(x, y, value) is true."""
        for y in list(self._rows):
            row = self._rows[y]
            for x in sorted(row):
                if not predicate(x, y, row[x]):
                    del row[x]
            if not row:
                del self._rows[y]

    def copy(self) -> Grid:
        grid = Grid()
        grid._rows = {y: dict(row) for y, row in self._rows.items()}
        return grid

    def transpose(self) -> Grid:
        """Swap x and y of every cell in place."""
        old = self._rows
        self._rows = {}
        for y, row in old.items():
            for x, value in row.items():
                self._rows.setdefault(x, {})[y] = value
        return self

    def row(self, y: int) -> Iterator[tuple[int, object]]:
        row = self._rows.get(y, {})
        return ((x, row[x]) for x in sorted(row))

    def column(self, x: int) -> Iterator[tuple[int, object]]:
        for y, row in self._sorted_rows():
            if x in row:
                yield y, row[x]

    def width(self) -> int:
        return max((len(row) for row in self._rows.values()), default=0)

    def height(self) -> int:
        return len(self._rows)

    def size(self) -> tuple[int, int]:
        return self.width(), self.height()

    def collect_cells(self, value) -> list[Coord]:
        return [coord for coord, cell in self.items() if cell == value]

    def find_coord(self, value) -> Coord | None:
        return next((coord for coord, cell in self.items() if cell == value), None)

    def x_range(self) -> range | None:
        xs = [x for row in self._rows.values() for x in row]
        if not xs:
            return None
        return range(min(xs), max(xs) + 1)

    def y_range(self) -> range | None:
        if not self._rows:
            return None
        return range(min(self._rows), max(self._rows) + 1)

    def cardinal_neighbors(self, x: int, y: int) -> list[Coord]:
        """West, north, east and south neighbours that have no negative part."""
        neighbors = []
        if x > 0:
            neighbors.append((x - 1, y))
        if y > 0:
            neighbors.append((x, y - 1))
        neighbors.append((x + 1, y))
        neighbors.append((x, y + 1))
        return neighbors

    def all_neighbors(self, x: int, y: int) -> list[Coord]:
        """All eight neighbours, diagonals included, that have no negative part."""
        neighbors = []
        if x > 0:
            neighbors.append((x - 1, y))
            neighbors.append((x - 1, y + 1))
            if y > 0:
                neighbors.append((x - 1, y - 1))
        if y > 0:
            neighbors.append((x, y - 1))
            neighbors.append((x + 1, y - 1))
        neighbors.append((x + 1, y))
        neighbors.append((x, y + 1))
        neighbors.append((x + 1, y + 1))
        return neighbors

    def to_diagonal(self) -> Grid:
        """Rotate the grid 45 degrees clockwise in place; it grows to X+Y."""
        x_range, y_range = self.x_range(), self.y_range()
        if x_range is None or y_range is None:
            return self
        old = self._rows
        self._rows = {}
        y_end = y_range[-1]
        diagonals = range(x_range[0] + y_range[0], x_range[-1] + y_end + 1)
        for diagonal in diagonals:
            for y in reversed(y_range):
                if y > diagonal:
                    continue
                x = diagonal - y
                if x not in x_range:
                    continue
                row = old.get(y)
                if row is None or x not in row:
                    continue
                value = row.pop(x)
                self._rows.setdefault(diagonal, {})[y_end - y + x] = value
        return self

    def grid_iter(self) -> GridIterator:
        """Every coordinate of the grid's range; just (0, 0) when empty."""
        x_range, y_range = self.x_range(), self.y_range()
        if x_range is None or y_range is None:
            return GridIterator(range(0, 1), range(0, 1))
        return GridIterator(x_range, y_range)

    def iter_range(self) -> Iterator[tuple[Coord, object]]:
        """Every coordinate of the range with its value, or None when empty."""
        for x, y in self.grid_iter():
            yield (x, y), self.get(x, y)

    def fill_empty(self, value) -> None:
        """Give every empty cell of the range the value."""
        for x, y in self.grid_iter():
            self.setdefault(x, y, value)

    def apply_path_finder(self) -> PathFinder:
        return PathFinder(self)

    def printer(self) -> GridPrinter:
        return GridPrinter(self)


def parse_grid(text: str, convert: Callable[[str], object] = str) -> Grid:
    """Build a grid from lines of text, converting every character."""
    grid = Grid()
    for y, line in enumerate(_lines(text)):
        for x, char in enumerate(line):
            grid.insert(x, y, convert(char))
    return grid


def _digit(char: str) -> int:
    value = _DIGITS.find(char) if len(char) == 1 else -1
    if value < 0:
        raise ValueError("Invalid digit")
    return value


def parse_digit_grid(text: str) -> Grid:
    """Build a grid of integers from lines of decimal digits."""
    return parse_grid(text, _digit)