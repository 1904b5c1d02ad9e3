"""Raster rendering of grid generations with NumPy and Pillow."""

from typing import Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from grid_enhance.state import Grid

BoolArray = npt.NDArray[np.bool_]
UInt8Array = npt.NDArray[np.uint8]

Color = Tuple[int, int, int]

DEFAULT_CELL_SIZE = 4
DEFAULT_LIT_COLOR: Color = (255, 255, 255)
DEFAULT_UNLIT_COLOR: Color = (0, 0, 0)


def grid_to_array(grid: Grid, margin: int = 0) -> BoolArray:
    """Sample the tracked region of ``grid`` into a 2D boolean array.

    Args:
        grid (Grid): Generation to sample.
        margin (int): Extra rows / columns of background drawn on every side.

    Returns:
        BoolArray: ``arr[r, c]`` is the pixel at
            ``(bounds.min_row - margin + r, bounds.min_col - margin + c)``.
            An empty grid yields a ``(2 * margin, 2 * margin)`` background
            block.
    """
    if margin < 0:
        raise ValueError(f"margin must be non-negative, got {margin}")

    bounds = grid.bounds
    if bounds is None:
        return np.full((2 * margin, 2 * margin), grid.background_lit, dtype=np.bool_)

    bounds = bounds.expand(margin)
    arr: BoolArray = np.full(
        (bounds.height, bounds.width), grid.background_lit, dtype=np.bool_
    )
    for pos, lit in grid.pixels.items():
        arr[pos.row - bounds.min_row, pos.col - bounds.min_col] = lit
    return arr


def render_grid_image(
    grid: Grid,
    cell_size: int = DEFAULT_CELL_SIZE,
    margin: int = 0,
    lit_color: Color = DEFAULT_LIT_COLOR,
    unlit_color: Color = DEFAULT_UNLIT_COLOR,
) -> Image.Image:
    """
    Renders a grid as an RGB PIL Image with ``cell_size`` x ``cell_size`` pixels per cell.
    """
    if cell_size < 1:
        raise ValueError(f"cell_size must be positive, got {cell_size}")

    mask = grid_to_array(grid, margin=margin)
    rgb: UInt8Array = np.where(
        mask[..., np.newaxis],
        np.array(lit_color, dtype=np.uint8),
        np.array(unlit_color, dtype=np.uint8),
    ).astype(np.uint8)
    rgb = np.repeat(np.repeat(rgb, cell_size, axis=0), cell_size, axis=1)
    return Image.fromarray(rgb)


class GridRenderer:
    cell_size: int
    margin: int
    lit_color: Color
    unlit_color: Color

    def __init__(
        self,
        cell_size: int = DEFAULT_CELL_SIZE,
        margin: int = 0,
        lit_color: Color = DEFAULT_LIT_COLOR,
        unlit_color: Color = DEFAULT_UNLIT_COLOR,
    ):
        self.cell_size = cell_size
        self.margin = margin
        self.lit_color = lit_color
        self.unlit_color = unlit_color

    def render(self, grid: Grid) -> Image.Image:
        return render_grid_image(
            grid,
            cell_size=self.cell_size,
            margin=self.margin,
            lit_color=self.lit_color,
            unlit_color=self.unlit_color,
        )
