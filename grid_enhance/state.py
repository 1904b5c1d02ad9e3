"""Core immutable ``Grid`` dataclass.

A ``Grid`` is one generation of the conceptually infinite binary image. It
stores only the pixels whose value has to be tracked explicitly, plus one
flag describing every other pixel on the plane.

Design notes:

* ``pixels`` is a **persistent map** (``pyrsistent.PMap``) keyed by
    :class:`grid_enhance.components.Position`. Absence of a key means the pixel
    has the ``background_lit`` value.
* A ``Grid`` is never mutated. :func:`grid_enhance.step.step` builds a brand
    new instance, so earlier generations can be kept and compared freely.
* The background is spatially uniform, so one boolean is enough to model the
    unbounded remainder of the plane, even when it flips every generation.
"""

from dataclasses import dataclass
from typing import Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_enhance.components import Bounds, Position
from grid_enhance.exceptions import InfiniteCountError
from grid_enhance.utils.grid import bounds_of, count_lit_pixels, pixel_at
from grid_enhance.utils.render import grid_to_string


@dataclass(frozen=True)
class Grid:
    """Immutable generation of the infinite image.

    Attributes:
        pixels (PMap[Position, bool]): Explicitly tracked pixels.
        background_lit (bool): Value of every position not in ``pixels``.
    """

    pixels: PMap[Position, bool] = pmap()
    background_lit: bool = False

    def get(self, row: int, col: int) -> bool:
        """Return whether the pixel at ``(row, col)`` is lit."""
        return pixel_at(self.pixels, self.background_lit, row, col)

    @property
    def bounds(self) -> Optional[Bounds]:
        """Bounding rectangle of tracked pixels, ``None`` if nothing is tracked."""
        return bounds_of(self.pixels.keys())

    def count_lit(self) -> int:
        """Number of lit pixels on the whole plane.

        Raises:
            InfiniteCountError: If the background is lit, since the plane then
                holds infinitely many lit pixels.
        """
        tracked = count_lit_pixels(self.pixels)
        if self.background_lit:
            raise InfiniteCountError(tracked)
        return tracked

    def count_tracked_lit(self) -> int:
        """Number of lit *tracked* pixels, ignoring the background entirely."""
        return count_lit_pixels(self.pixels)

    def to_display_string(self) -> str:
        return grid_to_string(self)

    def __str__(self) -> str:
        return self.to_display_string()
