"""
Gridwalk - sparse 2D grids and path search for grid puzzles.

Build a Grid from text or coordinates, render it for debugging, then look up
start/end/obstacle markers and run a breadth-first or weighted search.

No I/O required beyond the text you hand in. No global state.
"""

__version__ = "0.1.0"

# Grid container and attached tools
from .grid import Grid, GridEntry, GridIterator, GridPrinter, PathFinder

# Path searches
from .search import (
    BfsBuilder,
    BfsResult,
    CostInput,
    DijkstraBuilder,
    DijkstraResult,
    SearchEntry,
    unit_cost,
)

# Option schemas
from .schemas import Bounds, RenderOptions, SearchOptions

# Errors and input
from .errors import GridParseError, GridwalkError, PathFinderError
from .puzzle import Puzzle
from .config import Config

__all__ = [
    # Grid
    "Grid",
    "GridEntry",
    "GridIterator",
    "GridPrinter",
    "PathFinder",
    # Search
    "BfsBuilder",
    "BfsResult",
    "CostInput",
    "DijkstraBuilder",
    "DijkstraResult",
    "SearchEntry",
    "unit_cost",
    # Schemas
    "Bounds",
    "RenderOptions",
    "SearchOptions",
    # Errors and input
    "GridParseError",
    "GridwalkError",
    "PathFinderError",
    "Puzzle",
    "Config",
]
