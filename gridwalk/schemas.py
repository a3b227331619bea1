"""Pydantic schemas for search and rendering options.

Builders collect their settings through chained ``with_*`` calls and only
validate them here, once, when the search runs or the grid is rendered.
Invalid settings (negative coordinates, inverted bounds, zero width cells)
surface as ``pydantic.ValidationError``.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator

Coord = Tuple[int, int]
# Search coordinates are unsigned: neighbors are clipped at zero.
GridCoord = Tuple[NonNegativeInt, NonNegativeInt]


class Bounds(BaseModel):
    """Inclusive rectangle a search is allowed to explore."""

    model_config = ConfigDict(frozen=True)

    top_left: GridCoord
    bottom_right: GridCoord

    @model_validator(mode="after")
    def _check_order(self) -> "Bounds":
        if self.top_left[0] > self.bottom_right[0] or self.top_left[1] > self.bottom_right[1]:
            raise ValueError(
                f"top_left {self.top_left} must not lie beyond bottom_right {self.bottom_right}"
            )
        return self

    @classmethod
    def enclosing(cls, coords: Iterable[Coord]) -> "Bounds":
        """Return the bounding rectangle of ``coords`` (must not be empty)."""

        xs: List[int] = []
        ys: List[int] = []
        for x, y in coords:
            xs.append(x)
            ys.append(y)
        if not xs:
            raise ValueError("Cannot infer bounds from an empty coordinate set")
        return cls(top_left=(min(xs), min(ys)), bottom_right=(max(xs), max(ys)))

    def contains(self, coord: Coord) -> bool:
        x, y = coord
        return (
            self.top_left[0] <= x <= self.bottom_right[0]
            and self.top_left[1] <= y <= self.bottom_right[1]
        )


class SearchOptions(BaseModel):
    """Validated configuration shared by the unweighted and weighted searches."""

    start: GridCoord
    end: GridCoord
    obstacles: Set[GridCoord] = Field(
        default_factory=set,
        description="Coordinates that are never traversable",
    )
    bounds: Optional[Bounds] = Field(
        None,
        description="Explicit search area; None means infer from start, end and obstacles",
    )
    use_dfs: bool = Field(False, description="Pop the frontier LIFO instead of FIFO")

    def resolve_bounds(self) -> Bounds:
        """Explicit bounds, or the bounding box of start, end and obstacles."""

        if self.bounds is not None:
            return self.bounds
        return Bounds.enclosing([self.start, self.end, *self.obstacles])


class RenderOptions(BaseModel):
    """Encodes how a grid is formatted as text."""

    legend: bool = Field(False, description="Prefix rows and columns with their coordinates")
    cell_width: int = Field(1, ge=1, description="Display width of every cell and label")
    cell_fill: List[Any] = Field(
        default_factory=list,
        description="Cell values repeated across the whole cell width",
    )
