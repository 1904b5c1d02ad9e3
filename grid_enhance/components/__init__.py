"""Component aggregates.

Re-exports the immutable value types shared by the simulators:
:class:`Position` and :class:`Bounds` for the enhancement grid, and
:class:`Die` / :class:`Player` for the dice game. Changing state means
building a new instance; nothing here is mutated in place.
"""

from .bounds import Bounds
from .die import Die
from .player import Player
from .position import Position

__all__ = [
    "Bounds",
    "Die",
    "Player",
    "Position",
]
