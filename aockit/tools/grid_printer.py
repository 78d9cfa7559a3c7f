"""Text rendering of a grid, with optional legend, cell width and overrides."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from .grid import Grid

Coord = tuple[int, int]
OverrideFn = Callable[[Coord], Optional[str]]


def _center(text: str, width: int) -> str:
    pad = width - len(text)
    if pad <= 0:
        return text
    left = pad // 2
    return " " * left + text + " " * (pad - left)


class GridPrinter:
    """Render a grid as text, one row per line.

    Every cell of the grid's range is printed; cells without a value are
    shown as blanks.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._legend = False
        self._cell_width = 1
        self._cell_fill: list = []
        self._override: OverrideFn | None = None

    def with_legend(self) -> GridPrinter:
        """Print x coordinates above and y coordinates beside the grid."""
        self._legend = True
        return self

    def with_cell_width(self, width: int) -> GridPrinter:
        """Print every cell centred in this many characters."""
        if width < 0:
            raise ValueError("cell width cannot be negative")
        self._cell_width = width
        return self

    def with_cell_fill(self, content) -> GridPrinter:
        """Repeat cells holding content to fill the whole cell width."""
        self._cell_fill.append(content)
        return self

    def with_cell_override_fn(self, func: OverrideFn) -> GridPrinter:
        """Use func((x, y)) as a cell's text whenever it returns a string."""
        self._override = func
        return self

    def print(self) -> None:
        print(self)

    def _format(self, value: object) -> str:
        text = str(value)
        width = self._cell_width
        if len(text) > width:
            text = text[: len(text) - width]
        return _center(text, width)

    def _cell_text(self, x: int, y: int) -> str:
        if self._override is not None:
            text = self._override((x, y))
            if text is not None:
                return text
        if (x, y) not in self._grid:
            return " "
        value = self._grid.get(x, y)
        if value in self._cell_fill:
            return (str(value) * self._cell_width)[: self._cell_width]
        return str(value)

    def __str__(self) -> str:
        coords = self._grid.grid_iter()
        parts: list[str] = []
        if self._legend:
            parts.append(self._format(" "))
            parts.extend(self._format(x) for x, _ in coords.x_iter())
            parts.append("\n")
        last_y = None
        for x, y in coords:
            if last_y is not None and last_y != y:
                parts.append("\n")
            if last_y != y and self._legend:
                parts.append(self._format(y))
            parts.append(self._format(self._cell_text(x, y)))
            last_y = y
        return "".join(parts)