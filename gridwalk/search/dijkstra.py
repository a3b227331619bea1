"""Label-correcting shortest path search with a pluggable step cost.

The work list is a plain FIFO queue rather than a priority queue. A cell can
be improved, and re-queued, several times before the queue drains; every
relaxation accepts a candidate only when it is strictly cheaper than the
recorded one. The end cell is a sink and is never queued.

Cost functions must be non-decreasing along a path. Non-monotonic cost
functions are not supported.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Set

from ..config import Config
from ..logging_utils import log_search
from ..schemas import Bounds, Coord, SearchOptions
from .helpers import visitable_neighbors, walk_parents


@dataclass(frozen=True)
class CostInput:
    """Arguments handed to a cost function for a single step."""

    origin: Coord
    next: Coord
    cost: int


CostFunc = Callable[[CostInput], int]


def unit_cost(step: CostInput) -> int:
    """Default cost function: every step costs one."""
    return step.cost + 1


@dataclass
class SearchEntry:
    """Cheapest known cost of a cell and the cell it was reached from."""

    cost: int
    parent: Optional[Coord] = None


class DijkstraResult:
    """Best-known costs after the work queue drained."""

    def __init__(self, entries: Dict[Coord, SearchEntry], end: Coord):
        self.entries = entries
        self.end = end

    def found_path(self) -> bool:
        return self.end in self.entries

    def cost(self) -> Optional[int]:
        """Cost of the cheapest route to the end, ``None`` when unreachable."""
        return self.cost_at(self.end)

    def cost_at(self, coord: Coord) -> Optional[int]:
        entry = self.entries.get(coord)
        return entry.cost if entry is not None else None

    def path(self) -> Optional[List[Coord]]:
        if not self.found_path():
            return None
        parents = {coord: entry.parent for coord, entry in self.entries.items()}
        return walk_parents(parents, self.end)


class DijkstraBuilder:
    """Configure and run a weighted search between two coordinates."""

    def __init__(self, start: Coord, end: Coord):
        self.start = start
        self.end = end
        self.obstacles: Set[Coord] = set()
        self.bounds: Optional[Bounds] = None
        self.calculate_cost: CostFunc = unit_cost

    def with_obstacles(self, obstacles: Iterable[Coord]) -> "DijkstraBuilder":
        """Add obstacles; can be called multiple times."""
        self.obstacles.update(obstacles)
        return self

    def with_bounds(self, top_left: Coord, bottom_right: Coord) -> "DijkstraBuilder":
        """Enforce search bounds instead of inferring them from start, end and obstacles."""
        self.bounds = Bounds(top_left=top_left, bottom_right=bottom_right)
        return self

    def with_cost_func(self, func: CostFunc) -> "DijkstraBuilder":
        """Replace the step cost; ``func`` returns the accumulated cost at ``next``.

        A negative result raises during ``run()``; functions that can return
        less than ``step.cost`` are unsupported.
        """
        self.calculate_cost = func
        return self

    def options(self) -> SearchOptions:
        return SearchOptions(
            start=self.start,
            end=self.end,
            obstacles=self.obstacles,
            bounds=self.bounds,
        )

    def run(self) -> DijkstraResult:
        options = self.options()
        self.bounds = options.resolve_bounds()
        start = tuple(options.start)
        end = tuple(options.end)
        obstacles = options.obstacles
        cost_func = self.calculate_cost

        queue: deque[tuple[Coord, int]] = deque([(start, 0)])
        entries: Dict[Coord, SearchEntry] = {start: SearchEntry(cost=0)}
        relaxations = 0

        while queue:
            current, cost = queue.popleft()
            for neighbor in visitable_neighbors(current, self.bounds, obstacles):
                next_cost = cost_func(CostInput(origin=current, next=neighbor, cost=cost))
                if next_cost < 0:
                    raise ValueError(
                        f"Cost function returned a negative cost ({next_cost}) for {current} -> {neighbor}"
                    )
                existing = entries.get(neighbor)
                if existing is not None and existing.cost <= next_cost:
                    continue
                entries[neighbor] = SearchEntry(cost=next_cost, parent=current)
                relaxations += 1
                if neighbor != end:
                    queue.append((neighbor, next_cost))

        result = DijkstraResult(entries, end)
        if Config.debug_search():
            log_search(
                f"[Dijkstra] {relaxations} relaxations over {len(entries)} cells, "
                f"end cost {result.cost()}"
            )
        return result
