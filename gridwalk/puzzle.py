"""Ready-made puzzle input handed to the grid tools.

Where the text comes from (a download, a cache, a test fixture) is the
caller's business; this wrapper only holds it and offers line access.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union


class Puzzle:
    """A text blob, usually one grid or a list of instructions."""

    def __init__(self, text: str):
        self.input = text

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Puzzle":
        """Read a puzzle from disk as UTF-8 text."""
        return cls(Path(path).read_text(encoding="utf-8"))

    def input_as_str(self) -> str:
        return self.input

    def get_input(self) -> str:
        return str(self.input)

    def get_input_lines(self) -> List[str]:
        return self.input.splitlines()

    def __str__(self) -> str:
        return self.input

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Puzzle):
            return self.input == other.input
        if isinstance(other, str):
            return self.input == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Puzzle({len(self.get_input_lines())} lines)"
