"""Breadth-first (or depth-first) path search on a grid of obstacles."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator

Coord = tuple[int, int]
Bounds = tuple[Coord, Coord]


def _enclosing_bounds(start: Coord, end: Coord, obstacles: Iterable[Coord]) -> Bounds:
    points = [start, end, *obstacles]
    top_left = (min(x for x, _ in points), min(y for _, y in points))
    bottom_right = (max(x for x, _ in points), max(y for _, y in points))
    return top_left, bottom_right


def _visitable_neighbors(
    x: int, y: int, bounds: Bounds, obstacles: set[Coord]
) -> Iterator[Coord]:
    """Left, right, up and down neighbours inside bounds and free of obstacles."""
    (left, top), (right, bottom) = bounds
    candidates = []
    if x > 0:
        candidates.append((x - 1, y))
    candidates.append((x + 1, y))
    if y > 0:
        candidates.append((x, y - 1))
    candidates.append((x, y + 1))
    for nx, ny in candidates:
        if left <= nx <= right and top <= ny <= bottom and (nx, ny) not in obstacles:
            yield nx, ny


@dataclass(frozen=True)
class BfsResult:
    """The path found, from start to end inclusive."""

    path: list[Coord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.path)


class BfsBuilder:
    """Configure and run a search where every step costs the same.

    Without explicit bounds the search stays inside the smallest rectangle
    holding the start, the end and every obstacle.
    """

    def __init__(self, start: Coord, end: Coord) -> None:
        self.start = start
        self.end = end
        self.obstacles: set[Coord] = set()
        self.bounds: Bounds | None = None
        self._depth_first = False

    def with_obstacles(self, obstacles: Iterable[Coord]) -> BfsBuilder:
        """Add obstacles; may be called more than once."""
        self.obstacles.update(obstacles)
        return self

    def with_bounds(self, top_left: Coord, bottom_right: Coord) -> BfsBuilder:
        """Limit the search to this rectangle, both corners included."""
        self.bounds = (top_left, bottom_right)
        return self

    def use_dfs(self) -> BfsBuilder:
        """Search depth first instead of breadth first."""
        self._depth_first = True
        return self

    def _resolve_bounds(self) -> Bounds:
        if self.bounds is None:
            self.bounds = _enclosing_bounds(self.start, self.end, self.obstacles)
        return self.bounds

    def run(self) -> BfsResult | None:
        """Search for a path; None when the end cannot be reached."""
        bounds = self._resolve_bounds()
        queue = deque([self.start])
        parents: dict[Coord, Coord | None] = {self.start: None}
        take = queue.pop if self._depth_first else queue.popleft

        while queue:
            current = take()
            if current == self.end:
                path = [current]
                parent = parents[current]
                while parent is not None:
                    path.append(parent)
                    parent = parents[parent]
                path.reverse()
                return BfsResult(path)
            for neighbor in _visitable_neighbors(*current, bounds, self.obstacles):
                if neighbor in parents:
                    continue
                parents[neighbor] = current
                queue.append(neighbor)
        return None