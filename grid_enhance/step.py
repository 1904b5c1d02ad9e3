"""Generation reducer and run orchestration.

:func:`step` is the only transition between generations and is pure: it
reads the previous :class:`grid_enhance.state.Grid` and returns a new one.
:func:`run` and :func:`iter_generations` chain steps strictly in sequence,
since each generation depends on the whole previous one.

Ordering within a step:

1. ``background_system`` derives the new background from table entry 0 or
    511.
2. ``enhance_pixels`` recomputes the tracked region grown by one cell on
    every side, reading only the previous generation.
"""

import logging
from itertools import islice
from typing import Iterator, Sequence

from grid_enhance.exceptions import InvalidTableError
from grid_enhance.state import Grid
from grid_enhance.systems.background import background_system
from grid_enhance.systems.enhance import enhance_pixels
from grid_enhance.types import TABLE_SIZE, EnhancementTable, StepFn

logger = logging.getLogger(__name__)


def validate_table(table: Sequence[bool]) -> None:
    """Raise ``InvalidTableError`` unless ``table`` has exactly 512 entries."""
    if len(table) != TABLE_SIZE:
        raise InvalidTableError(len(table), TABLE_SIZE)


def step(grid: Grid, table: EnhancementTable) -> Grid:
    """Apply the enhancement table once.

    Args:
        grid (Grid): Previous generation. Not modified.
        table (EnhancementTable): 512-entry lookup table.

    Returns:
        Grid: Next generation with its own pixel map and background flag.

    Raises:
        InvalidTableError: If ``table`` does not have 512 entries.
    """
    validate_table(table)

    background_lit = background_system(grid, table)
    pixels = enhance_pixels(grid, table)

    logger.debug(
        "step: %d -> %d tracked pixels, background %s -> %s",
        len(grid.pixels),
        len(pixels),
        grid.background_lit,
        background_lit,
    )
    return Grid(pixels=pixels, background_lit=background_lit)


def iter_generations(
    grid: Grid, table: EnhancementTable, step_fn: StepFn = step
) -> Iterator[Grid]:
    """Yield ``grid`` followed by every later generation, forever.

    ``step_fn`` produces each generation from the previous one; it defaults
    to :func:`step`.
    """
    validate_table(table)
    while True:
        yield grid
        grid = step_fn(grid, table)


def run(
    grid: Grid, table: EnhancementTable, steps: int, step_fn: StepFn = step
) -> Grid:
    """Apply ``step_fn`` exactly ``steps`` times and return the last generation.

    Raises:
        ValueError: If ``steps`` is negative.
        InvalidTableError: If ``table`` does not have 512 entries.
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    logger.debug("run: %d steps from %d tracked pixels", steps, len(grid.pixels))
    return next(islice(iter_generations(grid, table, step_fn), steps, None))
