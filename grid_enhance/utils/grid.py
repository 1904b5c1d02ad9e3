"""Grid geometry helpers.

Pure functions over the tracked-pixel mapping. They take plain mappings
rather than ``Grid`` so that ``grid_enhance.state`` can use them without an
import cycle.
"""

from typing import Iterable, Mapping, Optional

from grid_enhance.components import Bounds, Position


def bounds_of(positions: Iterable[Position]) -> Optional[Bounds]:
    """Return the inclusive bounding rectangle of ``positions``.

    Returns:
        Bounds | None: ``None`` when ``positions`` is empty.
    """
    bounds: Optional[Bounds] = None
    for pos in positions:
        if bounds is None:
            bounds = Bounds(pos.row, pos.col, pos.row, pos.col)
            continue
        bounds = Bounds(
            min_row=min(bounds.min_row, pos.row),
            min_col=min(bounds.min_col, pos.col),
            max_row=max(bounds.max_row, pos.row),
            max_col=max(bounds.max_col, pos.col),
        )
    return bounds


def count_lit_pixels(pixels: Mapping[Position, bool]) -> int:
    """Return how many stored pixels are lit (background ignored)."""
    return sum(1 for lit in pixels.values() if lit)


def pixel_at(
    pixels: Mapping[Position, bool], background_lit: bool, row: int, col: int
) -> bool:
    """Stored value at ``(row, col)``, falling back to the background."""
    return pixels.get(Position(row, col), background_lit)
