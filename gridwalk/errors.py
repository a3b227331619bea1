"""Exception hierarchy for gridwalk.

Parse failures are recoverable and carry a readable message. Path finder
misconfiguration is a programming error and derives from ``RuntimeError`` so
it is not caught by handlers that expect bad input.
"""

from __future__ import annotations


class GridwalkError(Exception):
    """Base class for every error raised by gridwalk."""


class GridParseError(GridwalkError, ValueError):
    """Raised when text cannot be converted into a grid."""

    def __init__(self, message: str, *, position: tuple[int, int] | None = None):
        super().__init__(message)
        self.position = position


class PathFinderError(GridwalkError, RuntimeError):
    """Raised when a search is requested before start and end are resolved."""
