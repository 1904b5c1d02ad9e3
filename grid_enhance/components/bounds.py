"""Bounds component.

Inclusive bounding rectangle of the tracked pixels of a ``Grid``. Each step
recomputes the region as ``bounds.expand(1)``.
"""

from dataclasses import dataclass
from typing import Iterator

from .position import Position


@dataclass(frozen=True)
class Bounds:
    """Inclusive rectangle ``[min_row, max_row] x [min_col, max_col]``."""

    min_row: int
    min_col: int
    max_row: int
    max_col: int

    @property
    def height(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def width(self) -> int:
        return self.max_col - self.min_col + 1

    def expand(self, amount: int = 1) -> "Bounds":
        """Return a copy grown by ``amount`` cells on every side."""
        return Bounds(
            min_row=self.min_row - amount,
            min_col=self.min_col - amount,
            max_row=self.max_row + amount,
            max_col=self.max_col + amount,
        )

    def contains(self, pos: Position) -> bool:
        return (
            self.min_row <= pos.row <= self.max_row
            and self.min_col <= pos.col <= self.max_col
        )

    def positions(self) -> Iterator[Position]:
        """Yield every position in raster order (row by row, left to right)."""
        for row in range(self.min_row, self.max_row + 1):
            for col in range(self.min_col, self.max_col + 1):
                yield Position(row, col)
