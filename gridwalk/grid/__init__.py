"""Sparse grid container and its attached tools."""

from .grid import Grid, GridEntry
from .iterator import GridIterator
from .path_finder import PathFinder
from .printer import GridPrinter

__all__ = [
    "Grid",
    "GridEntry",
    "GridIterator",
    "GridPrinter",
    "PathFinder",
]
