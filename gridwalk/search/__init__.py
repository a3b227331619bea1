"""Path searches over obstacle sets, independent of any grid container."""

from .bfs import BfsBuilder, BfsResult
from .dijkstra import (
    CostFunc,
    CostInput,
    DijkstraBuilder,
    DijkstraResult,
    SearchEntry,
    unit_cost,
)
from .helpers import visitable_neighbors, walk_parents

__all__ = [
    "BfsBuilder",
    "BfsResult",
    "CostFunc",
    "CostInput",
    "DijkstraBuilder",
    "DijkstraResult",
    "SearchEntry",
    "unit_cost",
    "visitable_neighbors",
    "walk_parents",
]
