"""Pixel enhancement system.

Recomputes every pixel of the expanded tracked region from its 3x3
neighborhood in the previous generation. Pixels one cell outside the old
bounds must be recomputed and stored, because their tracked neighbors may
make them differ from the new background.
"""

from typing import Dict

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_enhance.components import Position
from grid_enhance.state import Grid
from grid_enhance.types import EnhancementTable

NEIGHBORHOOD_OFFSETS = [(d_row, d_col) for d_row in (-1, 0, 1) for d_col in (-1, 0, 1)]
"""Raster order of the 3x3 read: top-left first, bottom-right last."""


def enhancement_index(grid: Grid, row: int, col: int) -> int:
    """Pack the 3x3 neighborhood around ``(row, col)`` into a 9-bit index.

    The top-left neighbor becomes the most significant bit and the bottom-right
    neighbor the least significant, so the result is always in ``[0, 511]``.

    Args:
        grid (Grid): Generation to read from (never the one being built).
        row (int): Center row.
        col (int): Center column.

    Returns:
        int: Index into the enhancement table.
    """
    code = 0
    for d_row, d_col in NEIGHBORHOOD_OFFSETS:
        code <<= 1
        if grid.get(row + d_row, col + d_col):
            code |= 1
    return code


def enhance_pixels(grid: Grid, table: EnhancementTable) -> PMap[Position, bool]:
    """Compute the tracked pixels of the next generation.

    Args:
        grid (Grid): Previous generation; left untouched.
        table (EnhancementTable): 512-entry lookup.

    Returns:
        PMap[Position, bool]: New mapping covering ``grid.bounds.expand(1)``;
            empty when ``grid`` tracks nothing.
    """
    bounds = grid.bounds
    if bounds is None:
        return pmap()

    pixels: Dict[Position, bool] = {}
    for pos in bounds.expand(1).positions():
        pixels[pos] = table[enhancement_index(grid, pos.row, pos.col)]
    return pmap(pixels)
