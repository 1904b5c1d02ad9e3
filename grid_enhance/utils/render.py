"""Text rendering helpers.

Used by ``Grid.to_display_string`` and ``Puzzle.__str__``. Output is meant
for diagnostics and test failure messages, not as a stable serialization
format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from grid_enhance.types import PixelChar

if TYPE_CHECKING:
    from grid_enhance.state import Grid


def pixel_to_char(lit: bool) -> str:
    return PixelChar.LIT.value if lit else PixelChar.UNLIT.value


def table_to_string(table: Iterable[bool]) -> str:
    """Render an enhancement table as a single line of symbols."""
    return "".join(pixel_to_char(lit) for lit in table)


def grid_to_string(grid: Grid) -> str:
    """Render the tracked region row by row, plus a background trailer line.

    An empty grid renders only the trailer.
    """
    lines = []
    bounds = grid.bounds
    if bounds is not None:
        for row in range(bounds.min_row, bounds.max_row + 1):
            lines.append(
                "".join(
                    pixel_to_char(grid.get(row, col))
                    for col in range(bounds.min_col, bounds.max_col + 1)
                )
            )
    lines.append(f"background: {pixel_to_char(grid.background_lit)}")
    return "\n".join(lines)
