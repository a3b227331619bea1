"""Utilities shared by the grid searches."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set

from ..schemas import Bounds, Coord


def visitable_neighbors(coord: Coord, bounds: Bounds, obstacles: Set[Coord]) -> Iterator[Coord]:
    """Yield the cardinal neighbors of ``coord`` that a search may enter.

    Neighbors come out west, east, north, south. Tie-breaking between equally
    short routes depends on this order, so keep it stable. Coordinates below
    zero are skipped rather than wrapped.
    """

    x, y = coord
    candidates = [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]
    for nx, ny in candidates:
        if nx < 0 or ny < 0:
            continue
        if not bounds.contains((nx, ny)):
            continue
        if (nx, ny) in obstacles:
            continue
        yield nx, ny


def walk_parents(parents: Dict[Coord, Optional[Coord]], end: Coord) -> List[Coord]:
    """Follow parent links from ``end`` back to the root and return the path root-first."""

    path: List[Coord] = [end]
    current = parents.get(end)
    while current is not None:
        path.append(current)
        current = parents.get(current)
    path.reverse()
    return path
