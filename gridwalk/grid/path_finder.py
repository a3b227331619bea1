"""Bind a grid's cells to the path searches."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Iterable, Optional, Set, Tuple, TypeVar

from ..errors import PathFinderError
from ..search import BfsBuilder, DijkstraBuilder

if TYPE_CHECKING:
    from .grid import Grid

D = TypeVar("D")
Coord = Tuple[int, int]


class PathFinder(Generic[D]):
    """Resolve start, end and obstacles on a grid, then hand them to a search.

    Coordinates can be given explicitly or looked up by cell value (a
    "marker" such as ``"S"`` or ``"#"``). Nothing is copied from the grid
    beyond the coordinates, so the returned builders do not depend on it.
    """

    def __init__(self, grid: "Grid[D]"):
        self.grid = grid
        self.start: Optional[Coord] = None
        self.end: Optional[Coord] = None
        self.obstacles: Set[Coord] = set()

    def with_start_coord(self, start: Coord) -> "PathFinder[D]":
        self.start = start
        return self

    def with_start(self, value: D) -> "PathFinder[D]":
        """Start at the first cell holding ``value`` (unset if none does)."""
        self.start = self.grid.find_coord(value)
        return self

    def with_end_coord(self, end: Coord) -> "PathFinder[D]":
        self.end = end
        return self

    def with_end(self, value: D) -> "PathFinder[D]":
        """End at the first cell holding ``value`` (unset if none does)."""
        self.end = self.grid.find_coord(value)
        return self

    def with_obstacle_coords(self, coords: Iterable[Coord]) -> "PathFinder[D]":
        self.obstacles.update(coords)
        return self

    def with_obstacles(self, value: D) -> "PathFinder[D]":
        """Treat every cell holding ``value`` as an obstacle."""
        self.obstacles.update(self.grid.collect_cells_iter(value))
        return self

    def bfs(self) -> BfsBuilder:
        start, end = self._endpoints()
        return BfsBuilder(start, end).with_obstacles(self.obstacles)

    def dijkstra(self) -> DijkstraBuilder:
        start, end = self._endpoints()
        return DijkstraBuilder(start, end).with_obstacles(self.obstacles)

    def _endpoints(self) -> Tuple[Coord, Coord]:
        if self.start is None or self.end is None:
            raise PathFinderError(
                f"Start and end coordinates must be set (start={self.start}, end={self.end})"
            )
        return self.start, self.end
