"""Lowest-cost path search on a grid of obstacles."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable

from .bfs import Bounds, Coord, _enclosing_bounds, _visitable_neighbors


@dataclass(frozen=True)
class CostInput:
    """One step being priced: where it starts, where it goes, the cost so far."""

    origin: Coord
    next: Coord
    cost: int


@dataclass(frozen=True)
class _Entry:
    cost: int
    parent: Coord | None


def _step_cost(step: CostInput) -> int:
    return step.cost + 1


class DijkstraResult:
    """Cheapest known route to every reached cell, and the end sought."""

    def __init__(self, entries: dict[Coord, _Entry], end: Coord) -> None:
        self._entries = entries
        self.end = end

    def found_path(self) -> bool:
        return self.end in self._entries

    def cost(self) -> int | None:
        """Cost of reaching the end, or None when it was not reached."""
        entry = self._entries.get(self.end)
        return None if entry is None else entry.cost

    def path(self) -> list[Coord] | None:
        """The path from start to end inclusive, or None when not reached."""
        entry = self._entries.get(self.end)
        if entry is None:
            return None
        path = [self.end]
        parent = entry.parent
        while parent is not None:
            path.append(parent)
            parent = self._entries[parent].parent
        path.reverse()
        return path


class DijkstraBuilder:
    """Configure and run a lowest-cost search.

    Each step costs one more than the cost so far unless a cost function is
    given. Without explicit bounds the search stays inside the smallest
    rectangle holding the start, the end and every obstacle.
    """

    def __init__(self, start: Coord, end: Coord) -> None:
        self.start = start
        self.end = end
        self.obstacles: set[Coord] = set()
        self.bounds: Bounds | None = None
        self.cost_func: Callable[[CostInput], int] = _step_cost

    def with_obstacles(self, obstacles: Iterable[Coord]) -> DijkstraBuilder:
        """Add obstacles; may be called more than once."""
        self.obstacles.update(obstacles)
        return self

    def with_bounds(self, top_left: Coord, bottom_right: Coord) -> DijkstraBuilder:
        """Limit the search to this rectangle, both corners included."""
        self.bounds = (top_left, bottom_right)
        return self

    def with_cost_func(self, func: Callable[[CostInput], int]) -> DijkstraBuilder:
        """Price each step with func, which returns the total cost after it."""
        self.cost_func = func
        return self

    def run(self) -> DijkstraResult:
        if self.bounds is None:
            self.bounds = _enclosing_bounds(self.start, self.end, self.obstacles)
        bounds = self.bounds
        entries: dict[Coord, _Entry] = {self.start: _Entry(0, None)}
        queue = deque([(self.start, 0)])

        while queue:
            current, cost = queue.popleft()
            for neighbor in _visitable_neighbors(*current, bounds, self.obstacles):
                next_cost = self.cost_func(CostInput(current, neighbor, cost))
                existing = entries.get(neighbor)
                if existing is not None and existing.cost <= next_cost:
                    continue
                entries[neighbor] = _Entry(next_cost, current)
                if neighbor != self.end:
                    queue.append((neighbor, next_cost))
        return DijkstraResult(entries, self.end)