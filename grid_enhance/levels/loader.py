"""Puzzle text loader.

Input layout:

* Line 1: the enhancement table, exactly 512 symbols (``#`` lit, ``.`` unlit).
* Line 2: blank separator.
* Remaining lines: the initial image, one row per line. Row ``r`` column ``c``
    of the text becomes ``Position(r, c)``; every symbol is stored as a tracked
    pixel and the initial background is unlit.

By default parsing is permissive: any symbol other than the lit one reads as
unlit, and rows may differ in length. ``PuzzleConfig(strict=True)`` rejects
both. Trailing blank lines are ignored.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from pyrsistent import pmap, pvector

from grid_enhance.components import Position
from grid_enhance.config import PuzzleConfig
from grid_enhance.exceptions import PuzzleFormatError, PuzzleLoadError
from grid_enhance.puzzle import Puzzle
from grid_enhance.state import Grid
from grid_enhance.types import TABLE_SIZE

logger = logging.getLogger(__name__)


def _parse_symbols(
    symbols: str, line: int, config: PuzzleConfig
) -> List[bool]:
    """Decode one line of symbols into pixel values."""
    if config.strict:
        for offset, symbol in enumerate(symbols):
            if symbol not in (config.lit_char, config.unlit_char):
                raise PuzzleFormatError(
                    f"unexpected symbol {symbol!r} at column {offset}",
                    line=line,
                    details={"column": offset},
                )
    return [symbol == config.lit_char for symbol in symbols]


def _parse_table(lines: List[str], config: PuzzleConfig) -> List[bool]:
    if not lines or not lines[0]:
        raise PuzzleFormatError("missing enhancement table line", line=1)
    table = _parse_symbols(lines[0], 1, config)
    if len(table) != TABLE_SIZE:
        raise PuzzleFormatError(
            f"enhancement table must have {TABLE_SIZE} symbols, got {len(table)}",
            line=1,
            details={"size": len(table)},
        )
    return table


def _parse_grid(rows: List[str], config: PuzzleConfig) -> Grid:
    while rows and not rows[-1].strip():
        rows = rows[:-1]

    if config.strict and len({len(row) for row in rows}) > 1:
        raise PuzzleFormatError(
            "grid rows must all have the same length",
            line=3,
            details={"widths": sorted({len(row) for row in rows})},
        )

    pixels: Dict[Position, bool] = {}
    for row, symbols in enumerate(rows):
        for col, lit in enumerate(_parse_symbols(symbols, row + 3, config)):
            pixels[Position(row, col)] = lit
    return Grid(pixels=pmap(pixels), background_lit=False)


def parse_puzzle(text: str, config: Optional[PuzzleConfig] = None) -> Puzzle:
    """Parse puzzle text into a :class:`Puzzle`.

    Args:
        text (str): Full contents of a puzzle file.
        config (PuzzleConfig | None): Symbol / strictness settings; defaults
            to ``PuzzleConfig()``.

    Returns:
        Puzzle: Table plus initial grid with an unlit background.

    Raises:
        PuzzleFormatError: If the table line is missing or not 512 symbols,
            the separator line is missing or not blank, or (strict mode) a
            symbol is unknown or rows are ragged.
    """
    if config is None:
        config = PuzzleConfig()

    lines = text.splitlines()
    table = _parse_table(lines, config)

    if len(lines) < 2:
        raise PuzzleFormatError(
            "enhancement table and grid must be separated by a blank line",
            line=2,
        )
    if lines[1].strip():
        raise PuzzleFormatError("separator line must be blank", line=2)

    puzzle = Puzzle(enhancement=pvector(table), grid=_parse_grid(lines[2:], config))
    logger.debug(
        "parsed puzzle: %d tracked pixels, table[0]=%s table[511]=%s",
        len(puzzle.grid.pixels),
        table[0],
        table[-1],
    )
    return puzzle


def load_puzzle(
    path: Union[str, "os.PathLike[str]"], config: Optional[PuzzleConfig] = None
) -> Puzzle:
    """Read and parse the puzzle file at ``path``.

    Relative paths resolve against the current working directory.

    Raises:
        PuzzleLoadError: If the file cannot be read.
        PuzzleFormatError: If its contents are malformed.
    """
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PuzzleLoadError(str(source), str(exc)) from exc

    logger.debug("loaded %d bytes from %s", len(text), source)
    return parse_puzzle(text, config)
