"""Puzzle: an enhancement table paired with an initial grid.

Built by :mod:`grid_enhance.levels.loader` or directly from values. The table
length is checked on construction, so a ``Puzzle`` that exists can always be
run.
"""

from dataclasses import dataclass

from grid_enhance.state import Grid
from grid_enhance.step import run, validate_table
from grid_enhance.types import EnhancementTable
from grid_enhance.utils.render import table_to_string


@dataclass(frozen=True)
class Puzzle:
    """Immutable enhancement puzzle.

    Attributes:
        enhancement (EnhancementTable): 512-entry lookup table.
        grid (Grid): Initial generation (background normally unlit).
    """

    enhancement: EnhancementTable
    grid: Grid

    def __post_init__(self) -> None:
        validate_table(self.enhancement)

    def run(self, steps: int) -> Grid:
        """Return the generation reached after ``steps`` enhancements."""
        return run(self.grid, self.enhancement, steps)

    def __str__(self) -> str:
        return f"{table_to_string(self.enhancement)}\n\n{self.grid}"
