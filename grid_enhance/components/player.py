"""Player component (pawn space plus accumulated score)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Dirac dice player.

    Attributes:
        space: Board space the pawn occupies (1-based).
        score: Sum of every space landed on so far.
    """

    space: int
    score: int = 0
