"""Text rendering of a grid, including its empty cells."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, List, Optional, Tuple, TypeVar

from ..config import Config
from ..schemas import RenderOptions

if TYPE_CHECKING:
    from .grid import Grid

D = TypeVar("D")
OverrideFn = Callable[[Tuple[int, int]], Optional[str]]


class GridPrinter(Generic[D]):
    """Formats the bounding rectangle of a grid as aligned text.

    Every option is set through a chained ``with_*`` call:

        grid.printer().with_legend().with_cell_width(3).render()

    Rows are separated by newlines and the output carries no trailing
    newline, so a grid parsed from text renders back to the same text.
    """

    def __init__(self, grid: "Grid[D]"):
        self.grid = grid
        self.legend = False
        self.cell_width = Config.DEFAULT_CELL_WIDTH
        self.cell_fill: List[D] = []
        self.cell_override_fn: Optional[OverrideFn] = None

    def with_legend(self) -> "GridPrinter[D]":
        """Print an X/Y legend on the side of the grid."""
        self.legend = True
        return self

    def with_cell_width(self, width: int) -> "GridPrinter[D]":
        """Print all cells with a specific width."""
        self.cell_width = width
        return self

    def with_cell_fill(self, content: D) -> "GridPrinter[D]":
        """Cells holding ``content`` repeat it across the cell instead of padding with spaces."""
        self.cell_fill.append(content)
        return self

    def with_cell_override_fn(self, cell_override_fn: OverrideFn) -> "GridPrinter[D]":
        """Override cell contents; a non-``None`` return wins, even over empty cells."""
        self.cell_override_fn = cell_override_fn
        return self

    def options(self) -> RenderOptions:
        return RenderOptions(legend=self.legend, cell_width=self.cell_width, cell_fill=self.cell_fill)

    def render(self) -> str:
        options = self.options()
        grid_iter = self.grid.grid_iter()
        lines: List[str] = []

        if options.legend:
            header = [self._format_value(" ", options.cell_width)]
            for x, _ in grid_iter.x_iter():
                header.append(self._format_value(x, options.cell_width))
            lines.append("".join(header))

        current: List[str] = []
        last_y: Optional[int] = None
        for x, y in grid_iter:
            if last_y != y:
                if last_y is not None:
                    lines.append("".join(current))
                current = []
                if options.legend:
                    current.append(self._format_value(y, options.cell_width))
            current.append(self._format_value(self._cell_content(x, y, options), options.cell_width))
            last_y = y
        lines.append("".join(current))

        return "\n".join(lines)

    def print(self) -> None:
        """Print grid."""
        print(self.render())

    def __str__(self) -> str:
        return self.render()

    def _cell_content(self, x: int, y: int, options: RenderOptions) -> str:
        if self.cell_override_fn is not None:
            content = self.cell_override_fn((x, y))
            if content is not None:
                return content
        if not self.grid.contains_key(x, y):
            return " "
        value = self.grid.get(x, y)
        if value in options.cell_fill:
            return (str(value) * options.cell_width)[: options.cell_width]
        return str(value)

    @staticmethod
    def _format_value(value: Any, width: int) -> str:
        # Overlong content keeps its trailing characters
        text = str(value)
        if len(text) > width:
            text = text[len(text) - width:]
        return f"{text:^{width}}"
