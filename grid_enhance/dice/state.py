"""Immutable snapshot of a deterministic Dirac dice game."""

from dataclasses import dataclass

from pyrsistent.typing import PVector

from grid_enhance.components import Die, Player


@dataclass(frozen=True)
class DiceGame:
    """Dice game state between turns.

    Attributes:
        players (PVector[Player]): Players in turn order.
        die (Die): Shared deterministic die.
        turn (int): Index of the player about to move.
    """

    players: PVector[Player]
    die: Die = Die()
    turn: int = 0
