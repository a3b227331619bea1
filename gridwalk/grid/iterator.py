"""Row-major iteration over an inclusive rectangle of grid coordinates."""

from __future__ import annotations

import numbers
from typing import Iterator, Optional, Tuple

Coord = Tuple[int, int]
Range = Tuple[int, int]


def _unit_step(key: int) -> int:
    """Return the value one for the key's type.

    Stepping relies on integer arithmetic; any other key type cannot be
    walked and is rejected outright.
    """

    if not isinstance(key, numbers.Integral):
        raise TypeError(
            f"Grid keys must be integers to step through a range, got {type(key).__name__}"
        )
    return type(key)(1)


class GridIterator:
    """Lazily yields every ``(x, y)`` in ``x_range`` x ``y_range``.

    Both ranges are inclusive ``(start, end)`` pairs. Forward iteration goes
    row by row (all x for the first y, then the next y). ``next_back`` walks
    the same sequence from the other end; the two cursors meet in the middle,
    after which the iterator is exhausted from both sides.
    """

    def __init__(self, x_range: Range, y_range: Range):
        self.x_range = (x_range[0], x_range[1])
        self.y_range = (y_range[0], y_range[1])
        self.one = _unit_step(self.x_range[0])
        _unit_step(self.y_range[0])
        self.head: Optional[Coord] = (self.x_range[0], self.y_range[0])
        self.tail: Optional[Coord] = (self.x_range[1], self.y_range[1])
        if self.x_range[0] > self.x_range[1] or self.y_range[0] > self.y_range[1]:
            self.head = None
            self.tail = None

    def get_one(self) -> int:
        return self.one

    def x_iter(self) -> "GridIterator":
        """Iterate the x range only; y is pinned to one."""
        return GridIterator(self.x_range, (self.one, self.one))

    def y_iter(self) -> "GridIterator":
        """Iterate the y range only; x is pinned to one."""
        return GridIterator((self.one, self.one), self.y_range)

    def __iter__(self) -> Iterator[Coord]:
        return self

    def __next__(self) -> Coord:
        if self.head is None or self.tail is None:
            raise StopIteration
        current = self.head
        if current == self.tail:
            self.head = None
            return current
        x, y = current
        x += self.one
        if x > self.x_range[1]:
            x = self.x_range[0]
            y += self.one
        self.head = (x, y)
        return current

    def next_back(self) -> Optional[Coord]:
        """Take the last remaining coordinate, or ``None`` when exhausted."""

        if self.tail is None or self.head is None:
            return None
        current = self.tail
        if current == self.head:
            self.tail = None
            return current
        x, y = current
        if x - self.one < self.x_range[0]:
            x = self.x_range[1]
            y -= self.one
        else:
            x -= self.one
        self.tail = (x, y)
        return current

    def __reversed__(self) -> Iterator[Coord]:
        while True:
            coord = self.next_back()
            if coord is None:
                return
            yield coord

    def __repr__(self) -> str:
        return f"GridIterator(x_range={self.x_range}, y_range={self.y_range})"
