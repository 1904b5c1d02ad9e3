"""Common type aliases and enumerations.

``EnhancementTable`` is the central lookup consumed by every step; ``StepFn``
is the signature shared by :func:`grid_enhance.step.step` and any
alternative reducer a caller wants to plug into ``run``.
"""

from enum import StrEnum
from typing import Callable, TYPE_CHECKING

from pyrsistent.typing import PVector


# Forward declaration for StepFn typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_enhance.state import Grid

EnhancementTable = PVector[bool]

StepFn = Callable[["Grid", EnhancementTable], "Grid"]

TABLE_SIZE = 512
"""Number of entries in an enhancement table (one per 9-bit neighborhood)."""

ALL_DARK_INDEX = 0
ALL_LIT_INDEX = TABLE_SIZE - 1


class PixelChar(StrEnum):
    """Text symbols used by the input format and the display renderer."""

    LIT = "#"
    UNLIT = "."
