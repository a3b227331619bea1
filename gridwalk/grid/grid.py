"""Sparse two-dimensional grid keyed by ``(x, y)``.

Cells are stored in a two-level mapping: row (y) to column (x) to value.
Only present cells take space; a missing key means "empty", which is never
confused with a stored value. Rows disappear as soon as their last cell is
removed, so ``height()`` always counts occupied rows.

Ordered traversal (``iter``, ``keys``, ``values``, ``column``) sorts keys
on the fly. ``row`` hands back the row's own insertion order; use
``row_sorted`` when the order matters.
"""

from __future__ import annotations

import copy
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from ..errors import GridParseError
from .iterator import GridIterator

if TYPE_CHECKING:
    from .path_finder import PathFinder
    from .printer import GridPrinter

D = TypeVar("D")
Coord = Tuple[int, int]
Range = Tuple[int, int]

_DIGITS = "0123456789"


class GridEntry(Generic[D]):
    """Handle on one coordinate of a grid, occupied or not.

    Lets callers read, write or fill a single cell without looking it up
    twice. Obtained from :meth:`Grid.entry`, :meth:`Grid.get_mut`,
    :meth:`Grid.iter_mut` and :meth:`Grid.for_each_entry_range`.
    """

    __slots__ = ("_grid", "x", "y")

    def __init__(self, grid: "Grid[D]", x: int, y: int):
        self._grid = grid
        self.x = x
        self.y = y

    @property
    def key(self) -> Coord:
        return (self.x, self.y)

    def is_occupied(self) -> bool:
        return self._grid.contains_key(self.x, self.y)

    def get(self, default: Optional[D] = None) -> Optional[D]:
        return self._grid.get(self.x, self.y, default)

    def set(self, value: D) -> Optional[D]:
        """Store ``value``; returns the previous value, if any."""
        return self._grid.insert(self.x, self.y, value)

    def or_insert(self, value: D) -> D:
        """Store ``value`` only if the cell is empty; returns the cell's value."""
        if not self.is_occupied():
            self._grid.insert(self.x, self.y, value)
        return self._grid.get(self.x, self.y)

    def or_insert_with(self, factory: Callable[[], D]) -> D:
        if not self.is_occupied():
            self._grid.insert(self.x, self.y, factory())
        return self._grid.get(self.x, self.y)

    def remove(self) -> Optional[D]:
        return self._grid.remove(self.x, self.y)

    def __repr__(self) -> str:
        state = "occupied" if self.is_occupied() else "vacant"
        return f"GridEntry({self.x}, {self.y}, {state})"


class Grid(Generic[D]):
    """Coordinate indexed sparse container."""

    def __init__(self) -> None:
        self._rows: Dict[int, Dict[int, D]] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_text(cls, text: Any, convert: Optional[Callable[[str], D]] = None) -> "Grid[D]":
        """Build a grid from a line oriented text blob.

        Line ``n`` becomes row ``y = n`` and character ``m`` becomes column
        ``x = m``. ``convert`` maps each character to a cell value (the
        character itself by default). Anything with a ``str()`` form, such as
        a :class:`~gridwalk.puzzle.Puzzle`, is accepted.
        """

        grid: Grid[D] = cls()
        for y, line in enumerate(str(text).splitlines()):
            for x, char in enumerate(line):
                grid.insert(x, y, convert(char) if convert is not None else char)
        return grid

    @classmethod
    def from_digits(cls, text: Any) -> "Grid[int]":
        """Build a grid of ints where every character must be a decimal digit."""

        grid: Grid[int] = cls()
        for y, line in enumerate(str(text).splitlines()):
            for x, char in enumerate(line):
                if char not in _DIGITS:
                    raise GridParseError(
                        f"Invalid digit {char!r} at x={x}, y={y}", position=(x, y)
                    )
                grid.insert(x, y, int(char))
        return grid

    @classmethod
    def from_cells(cls, cells: Union[Mapping[Coord, D], Iterable[Tuple[Coord, D]]]) -> "Grid[D]":
        """Build a grid from ``{(x, y): value}`` or ``((x, y), value)`` pairs."""

        grid: Grid[D] = cls()
        items = cells.items() if isinstance(cells, Mapping) else cells
        for (x, y), value in items:
            grid.insert(x, y, value)
        return grid

    @classmethod
    def from_coords(cls, coords: Iterable[Coord], value: D) -> "Grid[D]":
        """Mark every coordinate in ``coords`` with the same ``value``."""

        grid: Grid[D] = cls()
        for x, y in coords:
            grid.insert(x, y, value)
        return grid

    # ------------------------------------------------------------------
    # Mapping behaviour
    # ------------------------------------------------------------------
    def clear(self) -> None:
        self._rows.clear()

    def contains_key(self, x: int, y: int) -> bool:
        row = self._rows.get(y)
        return row is not None and x in row

    def __contains__(self, coord: object) -> bool:
        if not isinstance(coord, tuple) or len(coord) != 2:
            return False
        return self.contains_key(coord[0], coord[1])

    def entry(self, x: int, y: int) -> GridEntry[D]:
        return GridEntry(self, x, y)

    def get(self, x: int, y: int, default: Optional[D] = None) -> Optional[D]:
        row = self._rows.get(y)
        if row is None:
            return default
        return row.get(x, default)

    def get_mut(self, x: int, y: int) -> Optional[GridEntry[D]]:
        """Writable handle on an occupied cell, ``None`` if the cell is empty."""
        if not self.contains_key(x, y):
            return None
        return GridEntry(self, x, y)

    def insert(self, x: int, y: int, value: D) -> Optional[D]:
        """Store ``value`` at ``(x, y)``; returns the value it replaced, if any."""
        row = self._rows.setdefault(y, {})
        previous = row.get(x)
        row[x] = value
        return previous

    def remove(self, x: int, y: int) -> Optional[D]:
        removed = self.remove_entry(x, y)
        return removed[1] if removed is not None else None

    def remove_entry(self, x: int, y: int) -> Optional[Tuple[Coord, D]]:
        row = self._rows.get(y)
        if row is None or x not in row:
            return None
        value = row.pop(x)
        if not row:
            del self._rows[y]
        return (x, y), value

    def retain(self, predicate: Callable[[int, int, D], bool]) -> None:
        """Keep only the cells for which ``predicate(x, y, value)`` is true."""

        for y in list(self._rows):
            row = self._rows[y]
            for x in list(row):
                if not predicate(x, y, row[x]):
                    del row[x]
            if not row:
                del self._rows[y]

    def is_empty(self) -> bool:
        return not self._rows

    def __len__(self) -> int:
        return sum(len(row) for row in self._rows.values())

    def iter(self) -> Iterator[Tuple[Coord, D]]:
        """Present cells as ``((x, y), value)``, ordered by row then column."""
        for y in sorted(self._rows):
            row = self._rows[y]
            for x in sorted(row):
                yield (x, y), row[x]

    __iter__ = iter
    items = iter

    def iter_mut(self) -> Iterator[Tuple[Coord, GridEntry[D]]]:
        for (x, y), _ in list(self.iter()):
            yield (x, y), GridEntry(self, x, y)

    def keys(self) -> Iterator[Coord]:
        for coord, _ in self.iter():
            yield coord

    def values(self) -> Iterator[D]:
        for _, value in self.iter():
            yield value

    def drain(self) -> Iterator[Tuple[Coord, D]]:
        """Yield every cell in order and leave the grid empty."""
        rows, self._rows = self._rows, {}
        for y in sorted(rows):
            row = rows[y]
            for x in sorted(row):
                yield (x, y), row[x]

    def clone(self) -> "Grid[D]":
        """Deep copy of both map levels and the stored values."""
        cloned: Grid[D] = type(self)()
        cloned._rows = copy.deepcopy(self._rows)
        return cloned

    def __copy__(self) -> "Grid[D]":
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Grid[D]":
        cloned: Grid[D] = type(self)()
        cloned._rows = copy.deepcopy(self._rows, memo)
        return cloned

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Grid(width={self.width()}, height={self.height()}, cells={len(self)})"

    def __str__(self) -> str:
        return self.printer().render()

    # ------------------------------------------------------------------
    # Rows, columns and extent
    # ------------------------------------------------------------------
    def row(self, y: int) -> Iterator[Tuple[int, D]]:
        """Cells of row ``y`` as ``(x, value)`` in the row's storage order."""
        return iter(list(self._rows.get(y, {}).items()))

    def column(self, x: int) -> Iterator[Tuple[int, D]]:
        """Cells of column ``x`` as ``(y, value)``."""
        for y in sorted(self._rows):
            row = self._rows[y]
            if x in row:
                yield y, row[x]

    def row_sorted(self, y: int) -> Iterator[Tuple[int, D]]:
        return iter(sorted(self.row(y), key=lambda item: item[0]))

    def column_sorted(self, x: int) -> Iterator[Tuple[int, D]]:
        return iter(sorted(self.column(x), key=lambda item: item[0]))

    def width(self) -> int:
        """Length of the longest occupied row."""
        return max((len(row) for row in self._rows.values()), default=0)

    def height(self) -> int:
        """Number of occupied rows."""
        return len(self._rows)

    def size(self) -> Tuple[int, int]:
        return self.width(), self.height()

    def x_range(self) -> Optional[Range]:
        xs = [x for row in self._rows.values() for x in row]
        if not xs:
            return None
        return min(xs), max(xs)

    def y_range(self) -> Optional[Range]:
        if not self._rows:
            return None
        return min(self._rows), max(self._rows)

    # ------------------------------------------------------------------
    # Dense views over the bounding rectangle
    # ------------------------------------------------------------------
    def grid_iter(self) -> GridIterator:
        """Iterator over the full bounding rectangle.

        An empty grid yields the single coordinate ``(0, 0)``; check
        ``is_empty()`` first when that matters.
        """
        x_range = self.x_range()
        y_range = self.y_range()
        if x_range is None or y_range is None:
            return GridIterator((0, 0), (0, 0))
        return GridIterator(x_range, y_range)

    def iter_range(self) -> Iterator[Tuple[Coord, Optional[D]]]:
        """Every coordinate of the bounding rectangle with its value or ``None``."""
        for x, y in self.grid_iter():
            yield (x, y), self.get(x, y)

    def for_each_entry_range(self, func: Callable[[Coord, GridEntry[D]], Any]) -> None:
        """Call ``func((x, y), entry)`` for every coordinate of the bounding rectangle."""
        for x, y in self.grid_iter():
            func((x, y), self.entry(x, y))

    def fill_empty(self, default: D) -> None:
        """Insert a copy of ``default`` into every gap of the bounding rectangle."""
        self.for_each_entry_range(lambda _, entry: entry.or_insert_with(lambda: copy.copy(default)))

    # ------------------------------------------------------------------
    # Neighbors
    # ------------------------------------------------------------------
    def cardinal_neighbors(self, x: int, y: int) -> List[Coord]:
        """West, north, east and south of ``(x, y)``; nothing below zero."""
        neighbors: List[Coord] = []
        if x > 0:
            neighbors.append((x - 1, y))
        if y > 0:
            neighbors.append((x, y - 1))
        neighbors.append((x + 1, y))
        neighbors.append((x, y + 1))
        return neighbors

    def all_neighbors(self, x: int, y: int) -> List[Coord]:
        """The eight cells around ``(x, y)``; nothing below zero."""
        neighbors: List[Coord] = []
        if x > 0:
            neighbors.append((x - 1, y))
            neighbors.append((x - 1, y + 1))
            if y > 0:
                neighbors.append((x - 1, y - 1))
        if y > 0:
            neighbors.append((x, y - 1))
            neighbors.append((x + 1, y - 1))
        neighbors.append((x + 1, y))
        neighbors.append((x, y + 1))
        neighbors.append((x + 1, y + 1))
        return neighbors

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------
    def transpose(self) -> "Grid[D]":
        """Swap rows and columns in place."""
        old_rows, self._rows = self._rows, {}
        for y, row in old_rows.items():
            for x, value in row.items():
                self._rows.setdefault(x, {})[y] = value
        return self

    def to_diagonal(self) -> "Grid[D]":
        """Rotate the grid 45 degrees clockwise in place.

        Cell ``(x, y)`` moves to row ``x + y`` and column ``(y_max - y) + x``.
        Every call grows the extent to width + height, so calling it twice
        does not undo anything.
        """
        y_range = self.y_range()
        if y_range is None:
            return self
        y_max = y_range[1]
        cells = list(self.drain())
        # Fill each diagonal from the bottom row up so new columns ascend
        cells.sort(key=lambda cell: (cell[0][0] + cell[0][1], -cell[0][1]))
        for (x, y), value in cells:
            self.insert((y_max - y) + x, x + y, value)
        return self

    # ------------------------------------------------------------------
    # Searching by value
    # ------------------------------------------------------------------
    def collect_cells_iter(self, value: D) -> Iterator[Coord]:
        for coord, cell in self.iter():
            if cell == value:
                yield coord

    def collect_cells(self, value: D, factory: Callable[[Iterable[Coord]], Any] = set) -> Any:
        """All coordinates holding ``value``, gathered with ``factory`` (a set by default)."""
        return factory(self.collect_cells_iter(value))

    def find_coord(self, value: D) -> Optional[Coord]:
        """First coordinate (row-major) holding ``value``."""
        return next(self.collect_cells_iter(value), None)

    # ------------------------------------------------------------------
    # Attached tools
    # ------------------------------------------------------------------
    def apply_path_finder(self) -> "PathFinder[D]":
        from .path_finder import PathFinder

        return PathFinder(self)

    def printer(self) -> "GridPrinter[D]":
        from .printer import GridPrinter

        return GridPrinter(self)
