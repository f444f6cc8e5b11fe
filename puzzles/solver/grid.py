"""
Grid Module - Immutable character grid shared by the grid puzzles.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

# Character returned for reads outside the grid
BACKGROUND = "."


@dataclass(frozen=True)
class Grid:
    """
    Immutable 2-D character grid.

    Rows are stored as a tuple of strings and may differ in length.
    Reads past the end of a row (or outside the grid entirely) return
    the background character instead of raising.

    Attributes:
        rows: Tuple of row strings, top to bottom
    """
    rows: Tuple[str, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'Grid':
        """
        Create a Grid from text lines, dropping blank lines.

        Args:
            lines: Raw text lines

        Returns:
            Grid instance
        """
        return cls(rows=tuple(line.rstrip("\r\n") for line in lines if line.strip()))

    def get_cell(self, row: int, col: int) -> str:
        """
        Get the character at a position.

        Returns:
            Cell character, or BACKGROUND if out of bounds
        """
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return BACKGROUND

    def find(self, char: str) -> List[Tuple[int, int]]:
        """
        Find every position holding a character.

        Returns:
            List of (row, col) tuples in reading order
        """
        return [
            (r, c)
            for r, line in enumerate(self.rows)
            for c, cell in enumerate(line)
            if cell == char
        ]

    def mask(self, char: str) -> np.ndarray:
        """
        Boolean array marking cells equal to char.

        The array is height x width; cells past the end of a short row
        are False.
        """
        width = self.width
        if width == 0:
            return np.zeros((self.height, 0), dtype=bool)
        cells = np.array([list(line.ljust(width, "\0")) for line in self.rows])
        return cells == char

    def render(self) -> List[str]:
        """
        Render the grid as display lines.

        Returns:
            List of row strings padded to a common width with background
        """
        width = self.width
        return [line.ljust(width, BACKGROUND) for line in self.rows]

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(line) for line in self.rows), default=0)

    @property
    def is_empty(self) -> bool:
        """True if the grid has no cells."""
        return self.width == 0
