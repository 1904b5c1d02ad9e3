"""Configuration dataclasses.

Plain frozen dataclasses with defaults matching the puzzle format and the
standard Dirac dice rules. Values are validated on construction so that a
bad config fails before any parsing or simulation starts.
"""

from dataclasses import dataclass

from grid_enhance.exceptions import ConfigurationError
from grid_enhance.types import PixelChar


@dataclass(frozen=True)
class PuzzleConfig:
    """Text format settings for :mod:`grid_enhance.levels.loader`.

    Attributes:
        lit_char: Symbol read as a lit pixel.
        unlit_char: Symbol read as an unlit pixel.
        strict: Reject unknown symbols and ragged grid rows. When False
            (default) any symbol other than ``lit_char`` reads as unlit.
    """

    lit_char: str = PixelChar.LIT.value
    unlit_char: str = PixelChar.UNLIT.value
    strict: bool = False

    def __post_init__(self) -> None:
        for key in ("lit_char", "unlit_char"):
            value = getattr(self, key)
            if len(value) != 1:
                raise ConfigurationError(
                    key, f"expected a single character, got {value!r}"
                )
        if self.lit_char == self.unlit_char:
            raise ConfigurationError(
                "unlit_char", "lit and unlit symbols must differ"
            )


@dataclass(frozen=True)
class DiceConfig:
    """Rules for the deterministic Dirac dice game.

    Attributes:
        target_score: Score at which a player wins (inclusive).
        board_size: Number of spaces on the circular board (1-based).
        die_sides: Highest value of the deterministic die before it wraps.
        rolls_per_turn: Rolls summed for each move.
    """

    target_score: int = 1000
    board_size: int = 10
    die_sides: int = 100
    rolls_per_turn: int = 3

    def __post_init__(self) -> None:
        for key in (
            "target_score",
            "board_size",
            "die_sides",
            "rolls_per_turn",
        ):
            value = getattr(self, key)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigurationError(
                    key, f"expected a positive integer, got {value!r}"
                )
