"""Breadth-first (and depth-first) path search over an obstacle grid.

Rules for trusting the result as a shortest path:
- every step costs the same
- the frontier is popped in FIFO order (the default)

With ``use_dfs()`` the frontier becomes a stack and the search returns *a*
path, not necessarily the shortest one.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from ..config import Config
from ..logging_utils import log_search
from ..schemas import Bounds, Coord, SearchOptions
from .helpers import visitable_neighbors, walk_parents


@dataclass
class BfsResult:
    """Path found by :class:`BfsBuilder`, start and end included."""

    path: List[Coord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.path)

    def is_empty(self) -> bool:
        return not self.path

    @property
    def steps(self) -> int:
        """Number of moves along the path."""
        return max(len(self.path) - 1, 0)


class BfsBuilder:
    """Configure and run a breadth-first search between two coordinates."""

    def __init__(self, start: Coord, end: Coord):
        self.start = start
        self.end = end
        self.obstacles: Set[Coord] = set()
        self.bounds: Optional[Bounds] = None
        self.dfs = False

    def with_obstacles(self, obstacles: Iterable[Coord]) -> "BfsBuilder":
        """Add obstacles; can be called multiple times."""
        self.obstacles.update(obstacles)
        return self

    def with_bounds(self, top_left: Coord, bottom_right: Coord) -> "BfsBuilder":
        """Enforce search bounds instead of inferring them from start, end and obstacles."""
        self.bounds = Bounds(top_left=top_left, bottom_right=bottom_right)
        return self

    def use_dfs(self) -> "BfsBuilder":
        """Use depth-first search instead of breadth-first search."""
        self.dfs = True
        return self

    def options(self) -> SearchOptions:
        """Validate the collected settings."""
        return SearchOptions(
            start=self.start,
            end=self.end,
            obstacles=self.obstacles,
            bounds=self.bounds,
            use_dfs=self.dfs,
        )

    def run(self) -> Optional[BfsResult]:
        """Search for a path; ``None`` means the end is unreachable.

        Besides the frontier we keep the parent of every visited cell so the
        path can be rebuilt once the end is popped.
        """

        options = self.options()
        # Bounds are resolved once and kept for later runs of this builder
        self.bounds = options.resolve_bounds()
        start = tuple(options.start)
        end = tuple(options.end)
        obstacles = options.obstacles

        queue: deque[Coord] = deque([start])
        visited: Dict[Coord, Optional[Coord]] = {start: None}
        expanded = 0

        while queue:
            current = queue.pop() if options.use_dfs else queue.popleft()
            if current == end:
                path = walk_parents(visited, end)
                if Config.debug_search():
                    log_search(
                        f"[{self._mode(options)}] expanded {expanded} cells, path of {len(path)} found"
                    )
                return BfsResult(path=path)
            expanded += 1
            for neighbor in visitable_neighbors(current, self.bounds, obstacles):
                if neighbor in visited:
                    continue
                visited[neighbor] = current
                queue.append(neighbor)

        if Config.debug_search():
            log_search(f"[{self._mode(options)}] expanded {expanded} cells, no path to {end}")
        return None

    @staticmethod
    def _mode(options: SearchOptions) -> str:
        return "DFS" if options.use_dfs else "BFS"
