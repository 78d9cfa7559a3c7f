"""Set up path searches from the contents of a grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .bfs import BfsBuilder, Coord
from .dijkstra import DijkstraBuilder

if TYPE_CHECKING:
    from .grid import Grid


class PathFinderError(ValueError):
    """Raised when a search is requested without both start and end."""


class PathFinder:
    """Pick start, end and obstacles from a grid, then build a search."""

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self.start: Coord | None = None
        self.end: Coord | None = None
        self.obstacles: set[Coord] = set()

    def with_start_coord(self, start: Coord) -> PathFinder:
        self.start = start
        return self

    def with_start(self, value) -> PathFinder:
        """Start at the first cell holding value; unset when there is none."""
        self.start = self._grid.find_coord(value)
        return self

    def with_end_coord(self, end: Coord) -> PathFinder:
        self.end = end
        return self

    def with_end(self, value) -> PathFinder:
        """End at the first cell holding value; unset when there is none."""
        self.end = self._grid.find_coord(value)
        return self

    def with_obstacle_coords(self, coords: Iterable[Coord]) -> PathFinder:
        self.obstacles.update(coords)
        return self

    def with_obstacles(self, value) -> PathFinder:
        """Treat every cell holding value as an obstacle."""
        self.obstacles.update(self._grid.collect_cells(value))
        return self

    def _endpoints(self) -> tuple[Coord, Coord]:
        if self.start is None or self.end is None:
            raise PathFinderError("Start and end coordinates must be set")
        return self.start, self.end

    def bfs(self) -> BfsBuilder:
        start, end = self._endpoints()
        return BfsBuilder(start, end).with_obstacles(self.obstacles)

    def dijkstra(self) -> DijkstraBuilder:
        start, end = self._endpoints()
        return DijkstraBuilder(start, end).with_obstacles(self.obstacles)