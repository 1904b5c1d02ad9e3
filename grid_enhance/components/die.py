"""Die component.

Deterministic die for the Dirac dice game: rolls 1, 2, ..., sides, then wraps
back to 1. Rolling returns a new ``Die`` rather than mutating this one.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Die:
    """Deterministic die state.

    Attributes:
        next_value: Value the next roll will produce (1-based).
        rolls: Total number of rolls taken so far.
    """

    next_value: int = 1
    rolls: int = 0
