"""Position component.

Immutable integer coordinates on the unbounded plane. Used as the key of
``Grid.pixels``; rows grow downward and either axis may go negative as the
tracked region expands.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at the first input line, negative above it).
        col: Column index (0 at the first input column, negative left of it).
    """

    row: int
    col: int
